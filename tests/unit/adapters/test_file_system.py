"""
Tests unitaires pour FileSystemAdapter.
"""

from pathlib import Path

from anitrack.adapters.file_system import FileSystemAdapter
from anitrack.core.ports.file_system import DirEntry


class TestListDir:
    """Tests du listing de repertoire."""

    def test_sorted_entries(self, tmp_path: Path):
        (tmp_path / "b.mkv").write_bytes(b"")
        (tmp_path / "a.mkv").write_bytes(b"")
        (tmp_path / "Season 1").mkdir()

        entries = FileSystemAdapter().list_dir(tmp_path)

        assert [e.name for e in entries] == ["Season 1", "a.mkv", "b.mkv"]
        assert entries[0] == DirEntry(path=tmp_path / "Season 1", name="Season 1", is_dir=True)
        assert entries[1].is_dir is False

    def test_not_recursive(self, tmp_path: Path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "deep.mkv").write_bytes(b"")

        entries = FileSystemAdapter().list_dir(tmp_path)

        assert [e.name for e in entries] == ["sub"]

    def test_missing_directory(self, tmp_path: Path):
        assert FileSystemAdapter().list_dir(tmp_path / "absent") == []

    def test_file_instead_of_directory(self, tmp_path: Path):
        video = tmp_path / "a.mkv"
        video.write_bytes(b"")

        assert FileSystemAdapter().list_dir(video) == []


class TestPathChecks:
    """Tests de is_dir / is_file / exists."""

    def test_checks(self, tmp_path: Path):
        adapter = FileSystemAdapter()
        video = tmp_path / "a.mkv"
        video.write_bytes(b"")

        assert adapter.is_dir(tmp_path) is True
        assert adapter.is_file(tmp_path) is False
        assert adapter.is_file(video) is True
        assert adapter.exists(video) is True
        assert adapter.exists(tmp_path / "absent") is False
