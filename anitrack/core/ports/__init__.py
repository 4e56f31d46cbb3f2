"""
Ports (interfaces abstraites) du domaine.

Exports :
- IFileSystem, DirEntry : Listing de l'arborescence
- IFilenameParser : Parsing de noms de fichiers
- ITitleSearchSource, ReleaseCandidate : Source de recherche de releases
"""

from anitrack.core.ports.file_system import DirEntry, IFileSystem
from anitrack.core.ports.parser import IFilenameParser
from anitrack.core.ports.search_source import ITitleSearchSource, ReleaseCandidate

__all__ = [
    "DirEntry",
    "IFileSystem",
    "IFilenameParser",
    "ITitleSearchSource",
    "ReleaseCandidate",
]
