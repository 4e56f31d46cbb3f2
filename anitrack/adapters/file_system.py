"""
Adaptateur pour la lecture du systeme de fichiers.

Implementation concrete de IFileSystem : listings non recursifs tries par
nom, aucune exception propagee pour un repertoire illisible.
"""

import os
from pathlib import Path

from anitrack.core.ports.file_system import DirEntry, IFileSystem


class FileSystemAdapter(IFileSystem):
    """Implementation de IFileSystem pour le systeme de fichiers reel."""

    def list_dir(self, path: Path) -> list[DirEntry]:
        """
        Liste le contenu direct d'un repertoire.

        Les liens symboliques sont suivis ; une entree dont le type ne peut
        etre determine (lien casse, droits) est consideree comme un fichier.
        """
        try:
            with os.scandir(path) as it:
                entries = [
                    DirEntry(
                        path=Path(entry.path),
                        name=entry.name,
                        is_dir=self._entry_is_dir(entry),
                    )
                    for entry in it
                ]
        except OSError:
            return []

        entries.sort(key=lambda e: e.name)
        return entries

    def is_dir(self, path: Path) -> bool:
        """Verifie si un chemin est un repertoire."""
        try:
            return path.is_dir()
        except OSError:
            return False

    def is_file(self, path: Path) -> bool:
        """Verifie si un chemin est un fichier regulier."""
        try:
            return path.is_file()
        except OSError:
            return False

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    @staticmethod
    def _entry_is_dir(entry: os.DirEntry) -> bool:
        try:
            return entry.is_dir()
        except OSError:
            return False
