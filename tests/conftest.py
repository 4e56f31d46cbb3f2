"""
Fixtures pytest partagees pour les tests AniTrack.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports (IFileSystem, ITitleSearchSource)
- Constructeur d'arborescences reelles sous tmp_path
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock

import pytest

from anitrack.adapters.file_system import FileSystemAdapter
from anitrack.config import Settings
from anitrack.core.ports.file_system import IFileSystem
from anitrack.core.ports.search_source import ITitleSearchSource


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Par defaut tout chemin existe et est un repertoire vide.
    Configurer list_dir dans chaque test.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.exists.return_value = True
    mock.is_dir.return_value = True
    mock.is_file.return_value = False
    mock.list_dir.return_value = []
    return mock


@pytest.fixture
def mock_search_source() -> MagicMock:
    """Mock de ITitleSearchSource ; aucune release par defaut."""
    mock = MagicMock(spec=ITitleSearchSource)
    mock.search.return_value = []
    return mock


@pytest.fixture
def file_system() -> FileSystemAdapter:
    """Adaptateur reel du systeme de fichiers."""
    return FileSystemAdapter()


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """
    Cree une arborescence de fichiers vides sous tmp_path.

    Usage:
        root = make_tree("Show", ["Season 1/01.mkv", "OVA/ova.mkv"])
    """

    def _make(root_name: str, files: list[str], dirs: tuple[str, ...] = ()) -> Path:
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for relative in files:
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"")
        for relative in dirs:
            (root / relative).mkdir(parents=True, exist_ok=True)
        return root

    return _make


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    _env_file=None ignore un eventuel fichier .env local.
    """
    media_dir = tmp_path / "anime"
    media_dir.mkdir()

    return Settings(
        _env_file=None,
        media_dirs=[media_dir],
        log_file=tmp_path / "logs" / "test.log",
    )
