"""
Entités de la bibliothèque locale.

Représentent les séries présentes sur le disque telles que reconstruites par
le scanner de bibliothèque. Leur persistance est gérée hors de ce package.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class Episode:
    """
    Fichier épisode d'une série.

    Attributs :
        number : Numéro d'épisode (0 si inconnu, à réordonner manuellement)
        filename : Nom du fichier (sans le chemin)
        watched : Épisode déjà vu
        last_position : Dernière position de lecture en secondes (reprise)
        relative_path : Sous-dossier relatif au dossier de la série, si applicable
    """

    number: int
    filename: str
    watched: bool = False
    last_position: int = 0
    relative_path: Optional[str] = None

    def full_path(self, show_path: Path) -> Path:
        """Chemin complet du fichier à partir du dossier de la série."""
        if self.relative_path:
            return show_path / self.relative_path / self.filename
        return show_path / self.filename


@dataclass
class Season:
    """Saison rangée dans son propre dossier."""

    number: int
    folder_name: str
    path: Path
    episodes: list[Episode] = field(default_factory=list)

    def get_episode(self, number: int) -> Optional[Episode]:
        return next((ep for ep in self.episodes if ep.number == number), None)


@dataclass
class Show:
    """
    Série présente dans la bibliothèque.

    Attributs :
        id : Identifiant dérivé du nom du dossier (slug)
        title : Titre lisible
        path : Dossier de la série
        episodes : Épisodes à la racine ou dans des dossiers non classés
        seasons : Saisons triées par numéro
        specials : OVA, films, spéciaux et bonus
        total_episodes : Nombre total d'épisodes trouvés au scan
    """

    id: str
    title: str
    path: Path
    episodes: list[Episode] = field(default_factory=list)
    seasons: list[Season] = field(default_factory=list)
    specials: list[Episode] = field(default_factory=list)
    total_episodes: Optional[int] = None

    @property
    def is_seasonal(self) -> bool:
        return bool(self.seasons)

    def episode_count(self) -> int:
        return (
            len(self.episodes)
            + sum(len(season.episodes) for season in self.seasons)
            + len(self.specials)
        )

    def watched_count(self) -> int:
        return sum(1 for ep in self.all_episodes() if ep.watched)

    def all_episodes(self) -> list[Episode]:
        """Épisodes à plat : racine, puis saisons dans l'ordre, puis spéciaux."""
        result = list(self.episodes)
        for season in self.seasons:
            result.extend(season.episodes)
        result.extend(self.specials)
        return result

    def next_unwatched(self) -> Optional[Episode]:
        return next((ep for ep in self.all_episodes() if not ep.watched), None)

    def get_season(self, number: int) -> Optional[Season]:
        return next((s for s in self.seasons if s.number == number), None)

    def get_episode(self, number: int, season: Optional[int] = None) -> Optional[Episode]:
        """
        Cherche un épisode par numéro.

        Les épisodes à la racine sont toujours consultés. Si une saison est
        précisée et qu'un dossier de cette saison existe, il est consulté aussi ;
        sans saison, tous les dossiers de saison le sont.
        """
        found = next((ep for ep in self.episodes if ep.number == number), None)
        if found is not None:
            return found

        if season is not None:
            target = self.get_season(season)
            return target.get_episode(number) if target else None

        for s in self.seasons:
            found = s.get_episode(number)
            if found is not None:
                return found
        return None

    def has_episode(self, number: int, season: Optional[int] = None) -> bool:
        return self.get_episode(number, season) is not None
