"""
Classification des noms de repertoires.

Les marqueurs de saison sont testes en premier (ancres en debut de nom),
puis les marqueurs de contenus speciaux, ancres au debut ET a la fin pour
qu'un dossier "Season 1 Specials" reste une saison et qu'un dossier
"Special Edition" reste non classe.
"""

import re

from anitrack.core.value_objects.parsed_info import FolderCategory, FolderKind
from anitrack.services.filename_parser import MAX_SEASON

SEASON_FOLDER_PATTERNS: tuple[re.Pattern[str], ...] = (
    # "Season 1", "Season 02", "Season 1 - Arc Name"
    re.compile(r"^Season\s*(\d+)", re.IGNORECASE),
    # "S01", "S1", "S01 - Name"
    re.compile(r"^S(\d{1,2})(?:\s|$|-)", re.IGNORECASE),
    # "Part 1"
    re.compile(r"^Part\s*(\d+)", re.IGNORECASE),
    # "Cour 2"
    re.compile(r"^Cour\s*(\d+)", re.IGNORECASE),
)

SPECIAL_FOLDER_PATTERNS: tuple[tuple[FolderKind, re.Pattern[str]], ...] = (
    (FolderKind.OVA, re.compile(r"^(?:OVA|OAV|OAD)s?$", re.IGNORECASE)),
    (FolderKind.SPECIAL, re.compile(r"^Specials?$", re.IGNORECASE)),
    (FolderKind.MOVIE, re.compile(r"^Movies?$", re.IGNORECASE)),
    (FolderKind.EXTRA, re.compile(r"^Extras?$", re.IGNORECASE)),
    (FolderKind.EXTRA, re.compile(r"^Bonus$", re.IGNORECASE)),
    # NCOP / NCED
    (FolderKind.EXTRA, re.compile(r"^NC(?:OP|ED)s?$", re.IGNORECASE)),
)


def categorize_folder(name: str) -> FolderCategory:
    """
    Classe un nom de repertoire.

    Args:
        name: Nom du dossier (dernier composant du chemin)

    Returns:
        FolderCategory ; FolderKind.UNKNOWN si aucun pattern ne correspond
    """
    for pattern in SEASON_FOLDER_PATTERNS:
        match = pattern.search(name)
        if match is None:
            continue
        number = int(match.group(1))
        if 0 < number < MAX_SEASON:
            return FolderCategory.season_of(number)

    for kind, pattern in SPECIAL_FOLDER_PATTERNS:
        if pattern.search(name):
            return FolderCategory(kind)

    return FolderCategory.unknown()
