"""
Tests unitaires pour les commandes CLI de diagnostic.

Tests couvrant:
- parse / folder : affichage des extractions
- query / rank : requetes generees et classement
- analyze / scan : arborescences reelles sous tmp_path
- info / version
"""

from pathlib import Path

from typer.testing import CliRunner

from anitrack import __version__
from anitrack.main import app

runner = CliRunner()


class TestParsingCommands:
    """Tests de parse et folder."""

    def test_parse(self):
        result = runner.invoke(app, ["parse", "[Grp] Show S2 - 03 [720p].mkv"])

        assert result.exit_code == 0
        assert "Grp" in result.output
        assert "720p" in result.output
        assert "3" in result.output

    def test_parse_requires_argument(self):
        result = runner.invoke(app, ["parse"])

        assert result.exit_code != 0

    def test_folder(self):
        result = runner.invoke(app, ["folder", "Season 2", "OVAs", "Random"])

        assert result.exit_code == 0
        assert "Season 2" in result.output
        assert "ova" in result.output
        assert "unknown" in result.output


class TestSearchCommands:
    """Tests de query et rank."""

    def test_query(self):
        result = runner.invoke(app, ["query", "Frieren S01E09"])

        assert result.exit_code == 0
        assert "Frieren 09" in result.output
        assert "Frieren Episode 09" in result.output

    def test_rank_orders_titles(self):
        result = runner.invoke(
            app, ["rank", "Frieren S01E09", "Frieren Batch", "Frieren - 09"]
        )

        assert result.exit_code == 0
        assert result.output.index("Frieren - 09") < result.output.index("Frieren Batch")

    def test_rank_from_file(self, tmp_path: Path):
        titles = tmp_path / "titles.txt"
        titles.write_text("Frieren Batch\n\nFrieren - 09\n", encoding="utf-8")

        result = runner.invoke(app, ["rank", "Frieren S01E09", "--file", str(titles)])

        assert result.exit_code == 0
        assert result.output.index("Frieren - 09") < result.output.index("Frieren Batch")

    def test_rank_without_titles(self):
        result = runner.invoke(app, ["rank", "Frieren S01E09"])

        assert result.exit_code == 1


class TestFileSystemCommands:
    """Tests de analyze et scan."""

    def test_analyze(self, make_tree):
        root = make_tree("Show", ["Season 1/01.mkv", "Season 1/02.mkv", "OVA/ova.mkv"])

        result = runner.invoke(app, ["analyze", str(root)])

        assert result.exit_code == 0
        assert "Season 1" in result.output
        assert "1 season(s), 1 OVA(s)" in result.output

    def test_analyze_empty(self, tmp_path: Path):
        result = runner.invoke(app, ["analyze", str(tmp_path)])

        assert result.exit_code == 1

    def test_scan(self, make_tree):
        media = make_tree("anime", ["Frieren/Frieren - 01.mkv", "Bocchi/Bocchi - 01.mkv"])

        result = runner.invoke(app, ["scan", str(media)])

        assert result.exit_code == 0
        assert "Frieren" in result.output
        assert "Bocchi" in result.output

    def test_scan_empty(self, tmp_path: Path):
        result = runner.invoke(app, ["scan", str(tmp_path)])

        assert result.exit_code == 0
        assert "Aucune serie" in result.output


class TestInfoCommands:
    """Tests de info et version."""

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"AniTrack v{__version__}" in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "Seuil batch" in result.output
