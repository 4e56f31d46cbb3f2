"""
Objets valeur pour la recherche de releases.

ParsedQuery represente l'intention extraite d'une requete libre, SearchQuery
les chaines de recherche generees a partir de cette intention.
"""

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ParsedQuery:
    """
    Requete utilisateur decomposee.

    Si episode est renseigne, season vaut au moins 1 (saison unique supposee).

    Attributs:
        show_name: Nom de la serie (texte precedant le marqueur saison/episode)
        season: Numero de saison demande
        episode: Numero d'episode demande
        is_batch_request: True pour une demande de saison complete / batch
        raw_query: Requete d'origine (sans espaces de bord), utilisee en fallback
    """

    show_name: str
    season: Optional[int] = None
    episode: Optional[int] = None
    is_batch_request: bool = False
    raw_query: str = ""


@dataclass(frozen=True)
class SearchQuery:
    """
    Chaines de recherche ordonnees pour une requete.

    Construite une fois par recherche, consommee immediatement.
    """

    primary: str
    alternatives: tuple[str, ...]
    parsed: ParsedQuery

    def all_queries(self) -> Iterator[str]:
        """Requete principale puis alternatives, dans l'ordre d'essai."""
        yield self.primary
        yield from self.alternatives


@dataclass(frozen=True)
class ScoredCandidate(Generic[T]):
    """Candidat accompagne de son score de pertinence (usage transitoire)."""

    item: T
    title: str
    score: int
