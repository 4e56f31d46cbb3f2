"""
Classement des resultats de recherche par pertinence.

score_result combine des signaux ponderes (somme simple, pas de modele) :
- nom de la serie present dans le titre, sinon mots du nom presents
- numero d'episode sous une des formes usuelles
- saison explicite (saisons 2+)
- resolution et groupe de release fiable
- penalite batch quand un episode precis est demande

rank_results trie de facon stable : a score egal, l'ordre de la source
(seeders decroissants) est conserve.
"""

from typing import Callable, Iterable, TypeVar

from anitrack.core.value_objects.search_info import ParsedQuery, ScoredCandidate
from anitrack.services.query_parser import format_episode, format_season
from anitrack.utils.constants import RELIABLE_GROUPS

T = TypeVar("T")


# ====================
# Poids des signaux
# ====================

WEIGHT_SHOW_MATCH = 100
WEIGHT_SHOW_WORD = 20
WEIGHT_EPISODE = 50
WEIGHT_SEASON = 30
WEIGHT_PREFERRED_QUALITY = 10
WEIGHT_LOW_QUALITY = -20
WEIGHT_RELIABLE_GROUP = 15
WEIGHT_BATCH_PENALTY = -50

PREFERRED_QUALITY_TOKEN = "1080p"
LOW_QUALITY_TOKENS = ("480p", "360p")
BATCH_TOKENS = ("batch", "complete", "1-", "01-")


def _episode_tokens(episode: int) -> tuple[str, ...]:
    """Formes d'un numero d'episode dans un titre (en minuscules)."""
    padded = format_episode(episode)
    return (
        f" {padded} ",
        f" {padded}",
        f"- {padded}",
        f"-{padded}",
        f"e{padded}",
        f" {episode} ",
        f"e{episode} ",
    )


def _season_tokens(season: int) -> tuple[str, ...]:
    """Formes d'un numero de saison dans un titre (en minuscules)."""
    padded = format_season(season)
    return (
        f"s{padded}",
        f"s{season}",
        f"season {season}",
        f"{season}nd season",
        f"{season}rd season",
        f"{season}th season",
        f"part {season}",
    )


def score_result(title: str, parsed: ParsedQuery) -> int:
    """
    Score de pertinence d'un titre pour une requete decomposee.

    Args:
        title: Titre du resultat
        parsed: Requete decomposee par parse_query

    Returns:
        Score entier, eventuellement negatif
    """
    title_lower = title.lower()
    show_lower = parsed.show_name.lower()
    score = 0

    if show_lower in title_lower:
        score += WEIGHT_SHOW_MATCH
    else:
        matched = sum(1 for word in show_lower.split() if word in title_lower)
        score += matched * WEIGHT_SHOW_WORD

    if parsed.episode is not None:
        if any(token in title_lower for token in _episode_tokens(parsed.episode)):
            score += WEIGHT_EPISODE

    if parsed.season is not None and parsed.season > 1:
        if any(token in title_lower for token in _season_tokens(parsed.season)):
            score += WEIGHT_SEASON

    if PREFERRED_QUALITY_TOKEN in title_lower:
        score += WEIGHT_PREFERRED_QUALITY

    if any(group in title_lower for group in RELIABLE_GROUPS):
        score += WEIGHT_RELIABLE_GROUP

    if parsed.episode is not None and not parsed.is_batch_request:
        if any(token in title_lower for token in BATCH_TOKENS):
            score += WEIGHT_BATCH_PENALTY

    if any(token in title_lower for token in LOW_QUALITY_TOKENS):
        score += WEIGHT_LOW_QUALITY

    return score


def score_candidates(
    items: Iterable[T],
    parsed: ParsedQuery,
    get_title: Callable[[T], str],
) -> list[ScoredCandidate[T]]:
    """Associe a chaque element son titre et son score, dans l'ordre d'entree."""
    candidates = []
    for item in items:
        title = get_title(item)
        candidates.append(
            ScoredCandidate(item=item, title=title, score=score_result(title, parsed))
        )
    return candidates


def rank_results(
    items: Iterable[T],
    parsed: ParsedQuery,
    get_title: Callable[[T], str] = str,
) -> list[T]:
    """
    Trie des resultats par score decroissant.

    Le tri est stable : a score egal l'ordre d'entree est conserve.

    Args:
        items: Resultats dans l'ordre de la source
        parsed: Requete decomposee
        get_title: Extraction du titre d'un element (identite pour des chaines)

    Returns:
        Nouvelle liste triee
    """
    scored = score_candidates(items, parsed, get_title)
    scored.sort(key=lambda c: c.score, reverse=True)
    return [c.item for c in scored]
