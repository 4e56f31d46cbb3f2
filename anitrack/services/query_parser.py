"""
Parser de requetes de recherche libres.

Decompose une saisie utilisateur ("Frieren S01E09", "One Piece S02",
"Kaguya-sama: Love is War 2x03") en nom de serie, saison, episode et
intention de batch.

Les patterns saison+episode sont essayes d'abord, puis les patterns saison
seule. Dans les deux cas tout ce qui precede la premiere correspondance est
le nom de la serie.
"""

import re

from anitrack.core.value_objects.search_info import ParsedQuery

SEASON_EPISODE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # S01E09, s1e9, S01 E09
    re.compile(r"\bS(\d{1,2})\s*E(\d{1,3})\b", re.IGNORECASE),
    # 1x09, 01x09
    re.compile(r"\b(\d{1,2})x(\d{1,3})\b", re.IGNORECASE),
    # Season 1 Episode 9
    re.compile(r"\bSeason\s*(\d{1,2})\s*Episode\s*(\d{1,3})\b", re.IGNORECASE),
    # S01 Ep09, S1 Episode 9
    re.compile(r"\bS(\d{1,2})\s*(?:Ep|Episode|E)\s*(\d{1,3})\b", re.IGNORECASE),
    # Ep 09, Episode 09 : saison 1 implicite
    re.compile(r"\b(?:Ep|Episode)\s*(\d{1,3})\b", re.IGNORECASE),
)

SEASON_ONLY_PATTERNS: tuple[re.Pattern[str], ...] = (
    # S01, S1
    re.compile(r"\bS(\d{1,2})\b", re.IGNORECASE),
    # Season 1
    re.compile(r"\bSeason\s*(\d{1,2})\b", re.IGNORECASE),
)

BATCH_INDICATORS = re.compile(
    r"\b(batch|complete|full|all\s*episodes?|1-\d+|\d+-\d+)\b", re.IGNORECASE
)

# Ponctuation retiree en fin de nom ("Show Name -", "Show:")
_TRAILING_SEPARATORS = "-:_|~ \t"


def parse_query(query: str) -> ParsedQuery:
    """
    Decompose une requete libre.

    Args:
        query: Saisie utilisateur

    Returns:
        ParsedQuery ; is_batch_request est vrai si la requete contient un
        indicateur de batch ou une saison sans episode.
    """
    query = query.strip()
    show_name = query
    season = None
    episode = None

    for pattern in SEASON_EPISODE_PATTERNS:
        match = pattern.search(query)
        if match is None:
            continue
        show_name = query[: match.start()]
        if pattern.groups == 1:
            season = 1
            episode = int(match.group(1))
        else:
            season = int(match.group(1))
            episode = int(match.group(2))
        break

    if episode is None:
        for pattern in SEASON_ONLY_PATTERNS:
            match = pattern.search(query)
            if match is None:
                continue
            show_name = query[: match.start()]
            season = int(match.group(1))
            break

    is_batch = BATCH_INDICATORS.search(query) is not None

    return ParsedQuery(
        show_name=normalize_show_name(show_name),
        season=season,
        episode=episode,
        is_batch_request=is_batch or (season is not None and episode is None),
        raw_query=query,
    )


def normalize_show_name(name: str) -> str:
    """Retire la ponctuation de fin et normalise les espaces internes."""
    return " ".join(name.rstrip(_TRAILING_SEPARATORS).split())


def format_episode(episode: int) -> str:
    """Numero d'episode sur deux chiffres minimum (5 -> "05", 100 -> "100")."""
    return f"{episode:02d}"


def format_season(season: int) -> str:
    """Numero de saison sur deux chiffres minimum."""
    return f"{season:02d}"


def ordinal_season(number: int) -> str:
    """
    Forme ordinale d'une saison.

    Ex: 1 -> "1st Season", 2 -> "2nd Season", 11 -> "11th Season"
    """
    if number % 100 in (11, 12, 13):
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix} Season"
