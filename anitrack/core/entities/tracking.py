"""
Entités du suivi des nouvelles sorties.

TrackedSeries appartient au stockage de la bibliothèque ; le matcher de mises à
jour la lit sans en gérer le cycle de vie.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TrackedSeries:
    """
    Série suivie pour la détection de nouveaux épisodes.

    Attributs :
        id : Identifiant de la série (identique à Show.id quand elle est déjà présente)
        title : Titre affiché
        query : Requête envoyée à la source de recherche
        filter_group : Groupe de release exigé (sous-chaîne, insensible à la casse)
        filter_quality : Qualité exigée (ex: "1080p")
        min_episode : Seuil : seuls les épisodes de numéro strictement supérieur sont nouveaux
        season : Saison suivie, si la série en compte plusieurs
    """

    id: str
    title: str
    query: str
    filter_group: Optional[str] = None
    filter_quality: Optional[str] = None
    min_episode: int = 0
    season: Optional[int] = None


@dataclass(frozen=True)
class InFlightDownload:
    """Téléchargement en cours côté client torrent."""

    hash: str
    name: str


@dataclass(frozen=True)
class UpdateRecord:
    """
    Nouvel épisode disponible pour une série suivie.

    Attributs :
        series_title : Titre de la série suivie
        episode_number : Numéro de l'épisode
        source_id : Identifiant de la release (lien magnet) à transmettre au client
        title : Titre de la release retenue
    """

    series_title: str
    episode_number: int
    source_id: str
    title: str
