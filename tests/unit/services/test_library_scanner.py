"""
Tests unitaires pour LibraryScannerService.

Tests couvrant:
- Dossier de serie : episodes, saisons, speciaux, dossiers non classes
- Repertoire de bibliotheque : series, videos isolees, tri
- Plusieurs repertoires : dedoublonnage
- Rescan avec conservation de l'etat de visionnage
"""

import pytest

from anitrack.services.filename_parser import RegexFilenameParser
from anitrack.services.library_scanner import LibraryScannerService


@pytest.fixture
def scanner(file_system) -> LibraryScannerService:
    return LibraryScannerService(file_system, RegexFilenameParser())


class TestScanShowDir:
    """Tests du scan d'un dossier de serie."""

    def test_flat_show(self, scanner, make_tree):
        root = make_tree("Frieren", ["Frieren - 02.mkv", "Frieren - 01.mkv", "cover.jpg"])

        show = scanner.scan_show_dir(root)

        assert show.id == "frieren"
        assert show.title == "Frieren"
        assert [ep.number for ep in show.episodes] == [1, 2]
        assert show.total_episodes == 2
        assert show.is_seasonal is False

    def test_seasons_and_specials(self, scanner, make_tree):
        root = make_tree(
            "Mob_Psycho_100",
            [
                "Season 2/Mob - 01.mkv",
                "Season 1/Mob - 01.mkv",
                "Season 1/Mob - 02.mkv",
                "OVA/Mob OVA.mkv",
                "NCOP/Opening.mkv",
            ],
            dirs=("Season 3",),
        )

        show = scanner.scan_show_dir(root)

        assert show.title == "Mob Psycho 100"
        assert [s.number for s in show.seasons] == [1, 2]
        assert show.seasons[0].episodes[0].relative_path == "Season 1"
        assert len(show.specials) == 2
        assert show.episode_count() == 5

    def test_unknown_subfolder_episodes(self, scanner, make_tree):
        root = make_tree("Show", ["[BD] Show/Show - 03.mkv", "Show - 01.mkv"])

        show = scanner.scan_show_dir(root)

        assert [ep.number for ep in show.episodes] == [1, 3]
        nested = show.episodes[1]
        assert nested.relative_path == "[BD] Show"
        assert nested.full_path(root) == root / "[BD] Show" / "Show - 03.mkv"

    def test_unparsable_episode_gets_zero(self, scanner, make_tree):
        root = make_tree("Show", ["Opening Theme.mkv"])

        show = scanner.scan_show_dir(root)

        assert show.episodes[0].number == 0

    def test_empty_show_dropped(self, scanner, make_tree):
        root = make_tree("Empty", ["notes.txt"], dirs=("Season 1",))

        assert scanner.scan_show_dir(root) is None

    def test_not_a_directory(self, scanner, tmp_path):
        assert scanner.scan_show_dir(tmp_path / "absent") is None


class TestScanMediaDir:
    """Tests du scan d'un repertoire de bibliotheque."""

    def test_shows_and_loose_files(self, scanner, make_tree):
        media = make_tree(
            "anime",
            [
                "frieren/Frieren - 01.mkv",
                "Bocchi/Bocchi - 01.mkv",
                "Akira.mkv",
                "Your.Name.mkv.zst",
            ],
            dirs=("Empty",),
        )

        shows = scanner.scan_media_dir(media)

        assert [s.title for s in shows] == ["Akira", "Bocchi", "frieren", "Your Name"]
        akira = shows[0]
        assert akira.path == media
        assert akira.episodes[0].number == 1
        assert akira.total_episodes == 1

    def test_missing_directory(self, scanner, tmp_path):
        assert scanner.scan_media_dir(tmp_path / "absent") == []


class TestScanAll:
    """Tests du scan de plusieurs repertoires."""

    def test_duplicates_keep_first(self, scanner, make_tree):
        first = make_tree("disk1", ["Frieren/Frieren - 01.mkv"])
        second = make_tree("disk2", ["Frieren/Frieren - 02.mkv", "Bocchi/Bocchi - 01.mkv"])

        shows = scanner.scan_all([first, second])

        assert [s.id for s in shows] == ["bocchi", "frieren"]
        assert shows[1].path == first / "Frieren"

    def test_refresh_keeps_watch_state(self, scanner, make_tree):
        media = make_tree(
            "anime", ["Frieren/Frieren - 01.mkv", "Frieren/Season 2/Frieren - 01.mkv"]
        )
        existing = scanner.scan_all([media])
        existing[0].episodes[0].watched = True
        existing[0].seasons[0].episodes[0].last_position = 120
        (media / "Frieren" / "Frieren - 02.mkv").write_bytes(b"")

        shows = scanner.refresh(existing, [media])

        show = shows[0]
        assert [ep.number for ep in show.episodes] == [1, 2]
        assert show.episodes[0].watched is True
        assert show.episodes[1].watched is False
        assert show.seasons[0].episodes[0].last_position == 120
        assert show.seasons[0].episodes[0].watched is False
