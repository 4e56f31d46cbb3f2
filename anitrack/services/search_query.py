"""
Generation des chaines de recherche a partir d'une requete libre.

La premiere chaine generee est la requete principale ; les suivantes sont des
alternatives que l'appelant essaie dans l'ordre jusqu'a obtenir assez de
resultats uniques.

Trois branches :
- batch : variantes "batch", "complete", saison explicite, saison ordinale
- episode : numero padde et non padde, formes "- NN", "ENN" et "Episode NN" ;
  pour la saison 2 et plus, formes avec saison et estimation du numero absolu
- nom seul : le nom, le nom + qualite, le nom + "complete"
"""

from anitrack.core.value_objects.search_info import ParsedQuery, SearchQuery
from anitrack.services.query_parser import (
    format_episode,
    format_season,
    ordinal_season,
    parse_query,
)

# Estimation grossiere : 12 episodes par saison, frequent mais sans garantie
EPISODES_PER_SEASON_ESTIMATE = 12

PREFERRED_QUALITY = "1080p"


def build_search_query(text: str) -> SearchQuery:
    """
    Construit les chaines de recherche pour une saisie utilisateur.

    Args:
        text: Requete libre

    Returns:
        SearchQuery ; si aucun nom de serie n'a pu etre extrait, la requete
        brute devient la requete principale, sans alternative.
    """
    parsed = parse_query(text)

    if not parsed.show_name:
        return SearchQuery(primary=parsed.raw_query, alternatives=(), parsed=parsed)

    if parsed.is_batch_request:
        queries = _batch_queries(parsed)
    elif parsed.episode is not None:
        queries = _episode_queries(parsed, parsed.episode)
    else:
        queries = _show_queries(parsed)

    # Dedoublonnage en conservant l'ordre d'essai
    queries = list(dict.fromkeys(queries))
    return SearchQuery(primary=queries[0], alternatives=tuple(queries[1:]), parsed=parsed)


def absolute_episode_estimate(season: int, episode: int) -> int:
    """
    Estime le numero absolu d'un episode de saison 2+.

    Simple alternative de recherche, jamais un identifiant fiable.
    """
    return (season - 1) * EPISODES_PER_SEASON_ESTIMATE + episode


def _batch_queries(parsed: ParsedQuery) -> list[str]:
    """Requetes pour une saison complete ou un batch."""
    show = parsed.show_name

    if parsed.season is None:
        return [f"{show} batch", f"{show} complete", show]

    if parsed.season == 1:
        return [
            f"{show} batch",
            f"{show} complete",
            f"{show} {PREFERRED_QUALITY} batch",
            f"{show} Season 1",
            f"{show} S01",
        ]

    season = parsed.season
    s_fmt = format_season(season)
    return [
        f"{show} S{s_fmt} batch",
        f"{show} Season {season} batch",
        f"{show} S{s_fmt}",
        f"{show} Season {season}",
        f"{show} {ordinal_season(season)}",
    ]


def _episode_queries(parsed: ParsedQuery, episode: int) -> list[str]:
    """Requetes pour un episode precis."""
    show = parsed.show_name
    ep = format_episode(episode)

    if parsed.season is None or parsed.season == 1:
        # La saison 1 utilise presque toujours la numerotation absolue
        return [
            f"{show} {ep}",
            f"{show} {episode}",
            f"{show} - {ep}",
            f"{show} E{ep}",
            f"{show} Episode {ep}",
            f"{show} {ep} {PREFERRED_QUALITY}",
        ]

    season = parsed.season
    s_fmt = format_season(season)
    absolute = absolute_episode_estimate(season, episode)
    return [
        f"{show} S{s_fmt} - {ep}",
        f"{show} S{s_fmt} {ep}",
        f"{show} S{s_fmt} {episode}",
        f"{show} Season {season} - {ep}",
        f"{show} {ordinal_season(season)} {ep}",
        f"{show} Part {season} {ep}",
        f"{show} {format_episode(absolute)}",
    ]


def _show_queries(parsed: ParsedQuery) -> list[str]:
    """Requetes pour un nom de serie seul."""
    show = parsed.show_name
    return [show, f"{show} {PREFERRED_QUALITY}", f"{show} complete"]
