"""
Interfaces ports pour le système de fichiers.

Le coeur n'effectue aucune lecture disque lui-même : les listings de
répertoires lui sont fournis par une implémentation de IFileSystem.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirEntry:
    """
    Entrée d'un listing de répertoire.

    Attributs :
        path : Chemin complet de l'entrée
        name : Nom de l'entrée (dernier composant du chemin)
        is_dir : True pour un sous-répertoire
    """

    path: Path
    name: str
    is_dir: bool


class IFileSystem(ABC):
    """
    Interface de lecture de l'arborescence.

    Les implémentations ne lèvent pas d'exception pour un répertoire
    illisible ou absent : elles retournent un listing vide.
    """

    @abstractmethod
    def list_dir(self, path: Path) -> list[DirEntry]:
        """
        Liste le contenu direct d'un répertoire (non récursif).

        Args :
            path : Répertoire à lister

        Retourne :
            Entrées triées par nom, liste vide si le répertoire est illisible
        """
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Vérifie si un chemin est un répertoire."""
        ...

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """Vérifie si un chemin est un fichier régulier."""
        ...

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...
