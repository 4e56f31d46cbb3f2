"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ParsedFilename : Informations extraites d'un nom de fichier / titre de release
- FolderKind, FolderCategory : Classification d'un repertoire
- SeasonInfo, SpecialsInfo, BatchAnalysis : Inventaire d'un telechargement
- ParsedQuery, SearchQuery, ScoredCandidate : Recherche de releases
"""

from anitrack.core.value_objects.batch_info import (
    BatchAnalysis,
    SeasonInfo,
    SpecialsInfo,
)
from anitrack.core.value_objects.parsed_info import (
    FolderCategory,
    FolderKind,
    ParsedFilename,
)
from anitrack.core.value_objects.search_info import (
    ParsedQuery,
    ScoredCandidate,
    SearchQuery,
)

__all__ = [
    "BatchAnalysis",
    "SeasonInfo",
    "SpecialsInfo",
    "FolderCategory",
    "FolderKind",
    "ParsedFilename",
    "ParsedQuery",
    "ScoredCandidate",
    "SearchQuery",
]
