"""
Objets valeur pour les informations de parsing de noms de fichiers et de dossiers.

Objets valeur immutables representant les informations extraites d'un nom de
fichier video (ou d'un titre de release) et la classification d'un repertoire.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ParsedFilename:
    """
    Informations extraites du parsing d'un nom de fichier video.

    Tous les champs sont optionnels : un nom qui ne correspond a aucun pattern
    produit des champs absents, jamais une exception.

    Attributs:
        episode: Numero d'episode, toujours dans ]0, 1000[
        season: Numero de saison si le nom porte un marqueur explicite, dans ]0, 100[
        release_group: Groupe de release (premier token entre crochets)
        quality: Token de qualite normalise en minuscules (ex: "1080p", "4k")
    """

    episode: Optional[int] = None
    season: Optional[int] = None
    release_group: Optional[str] = None
    quality: Optional[str] = None


class FolderKind(Enum):
    """Type de contenu d'un repertoire.

    Valeurs:
        SEASON: Dossier de saison ("Season 1", "S02", "Part 2", "Cour 1")
        OVA: OVA / OAV / OAD
        SPECIAL: Episodes speciaux
        MOVIE: Films
        EXTRA: Bonus (NCOP, NCED, Extras)
        UNKNOWN: Dossier non classe
    """

    SEASON = "season"
    OVA = "ova"
    SPECIAL = "special"
    MOVIE = "movie"
    EXTRA = "extra"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class FolderCategory:
    """
    Categorie d'un repertoire.

    Le numero de saison n'est renseigne que pour FolderKind.SEASON.
    Construite par categorize_folder ; season_of et unknown pour les cas usuels.
    """

    kind: FolderKind
    season: Optional[int] = None

    @classmethod
    def season_of(cls, number: int) -> "FolderCategory":
        return cls(FolderKind.SEASON, number)

    @classmethod
    def unknown(cls) -> "FolderCategory":
        return cls(FolderKind.UNKNOWN)

    @property
    def is_season(self) -> bool:
        return self.kind == FolderKind.SEASON

    @property
    def is_unknown(self) -> bool:
        return self.kind == FolderKind.UNKNOWN

    def __str__(self) -> str:
        if self.is_season:
            return f"Season {self.season}"
        return self.kind.value
