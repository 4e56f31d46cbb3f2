"""
Tests unitaires pour la classification des noms de dossiers.
"""

from anitrack.core.value_objects import FolderCategory, FolderKind
from anitrack.services.folder_categorizer import categorize_folder


class TestSeasonFolders:
    """Tests des dossiers de saison."""

    def test_all_season_forms_map_to_season_one(self):
        """Season 1, S01, Part 1 et Cour 1 sont tous la saison 1."""
        for name in ("Season 1", "S01", "Part 1", "Cour 1"):
            assert categorize_folder(name) == FolderCategory.season_of(1), name

    def test_case_insensitive(self):
        assert categorize_folder("season 03") == FolderCategory.season_of(3)
        assert categorize_folder("s2") == FolderCategory.season_of(2)

    def test_season_with_suffix(self):
        """Le nom peut continuer apres le numero."""
        assert categorize_folder("Season 2 - Arc du Sud") == FolderCategory.season_of(2)
        assert categorize_folder("S02 - Arc du Sud") == FolderCategory.season_of(2)

    def test_season_specials_stays_season(self):
        """Les marqueurs de saison sont testes avant les speciaux."""
        assert categorize_folder("Season 1 Specials").is_season

    def test_out_of_range_season(self):
        """Saison 0 ou >= 100 : non classe."""
        assert categorize_folder("Season 0").is_unknown
        assert categorize_folder("Season 100").is_unknown


class TestSpecialFolders:
    """Tests des dossiers hors saison."""

    def test_ova(self):
        for name in ("OVA", "OVAs", "OAV", "oad"):
            assert categorize_folder(name).kind == FolderKind.OVA, name

    def test_specials_and_movies(self):
        assert categorize_folder("Specials").kind == FolderKind.SPECIAL
        assert categorize_folder("Special").kind == FolderKind.SPECIAL
        assert categorize_folder("Movies").kind == FolderKind.MOVIE
        assert categorize_folder("Movie").kind == FolderKind.MOVIE

    def test_extras(self):
        for name in ("NCOP", "NCEDs", "Extras", "Bonus"):
            assert categorize_folder(name).kind == FolderKind.EXTRA, name

    def test_anchored_patterns(self):
        """Les marqueurs speciaux doivent couvrir tout le nom."""
        assert categorize_folder("Special Edition").is_unknown
        assert categorize_folder("My Movies Collection").is_unknown


class TestUnknownFolders:
    """Tests des dossiers non classes."""

    def test_random_folder(self):
        assert categorize_folder("Random Folder") == FolderCategory.unknown()

    def test_category_display(self):
        assert str(FolderCategory.season_of(2)) == "Season 2"
        assert str(FolderCategory(FolderKind.OVA)) == "ova"
        assert FolderCategory.unknown().season is None
