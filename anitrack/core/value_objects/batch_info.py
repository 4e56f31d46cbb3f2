"""
Objets valeur pour l'analyse d'une arborescence telechargee.

BatchAnalysis est l'inventaire d'un dossier (saisons, speciaux, episodes en
vrac) produit par BatchAnalyzerService et consomme par le scanner de
bibliotheque.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SeasonInfo:
    """
    Dossier de saison detecte dans un lot.

    Attributs:
        number: Numero de saison (1-99)
        folder_name: Nom du dossier tel que sur le disque
        path: Chemin du dossier
        episodes: Fichiers video directement dans le dossier, tries par nom
    """

    number: int
    folder_name: str
    path: Path
    episodes: tuple[Path, ...] = ()


@dataclass(frozen=True)
class SpecialsInfo:
    """
    Contenus hors saison, regroupes par sous-type.

    Les bonus (NCOP, NCED, Extras) sont ranges avec les speciaux.
    """

    ovas: tuple[Path, ...] = ()
    movies: tuple[Path, ...] = ()
    specials: tuple[Path, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0

    @property
    def total_count(self) -> int:
        return len(self.ovas) + len(self.movies) + len(self.specials)


@dataclass(frozen=True)
class BatchAnalysis:
    """
    Inventaire structure d'un telechargement.

    total_videos est derive des autres champs, l'invariant
    total_videos == loose + episodes des saisons + speciaux tient donc toujours.

    Attributs:
        is_batch: True si le telechargement contient plusieurs episodes
        seasons: Saisons triees par numero croissant
        specials: OVA, films, speciaux et bonus
        loose_episodes: Videos hors dossier de saison
    """

    is_batch: bool = False
    seasons: tuple[SeasonInfo, ...] = ()
    specials: SpecialsInfo = field(default_factory=SpecialsInfo)
    loose_episodes: tuple[Path, ...] = ()

    @classmethod
    def empty(cls) -> "BatchAnalysis":
        return cls()

    @property
    def total_videos(self) -> int:
        return (
            len(self.loose_episodes)
            + sum(len(season.episodes) for season in self.seasons)
            + self.specials.total_count
        )

    def summary(self) -> str:
        """
        Resume lisible de l'analyse.

        Ex: "2 season(s), 1 OVA(s), 3 episode(s)" ou "Empty".
        """
        parts = []
        if self.seasons:
            parts.append(f"{len(self.seasons)} season(s)")
        if self.specials.ovas:
            parts.append(f"{len(self.specials.ovas)} OVA(s)")
        if self.specials.movies:
            parts.append(f"{len(self.specials.movies)} movie(s)")
        if self.specials.specials:
            parts.append(f"{len(self.specials.specials)} special(s)")
        if self.loose_episodes:
            parts.append(f"{len(self.loose_episodes)} episode(s)")

        return ", ".join(parts) if parts else "Empty"
