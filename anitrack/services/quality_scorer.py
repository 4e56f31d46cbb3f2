"""
Score de qualite d'une release, deduit de son titre.

Utilise par le matcher de mises a jour pour departager plusieurs releases
d'un meme episode. Seule la resolution est prise en compte.
"""

from typing import Optional

from anitrack.services.filename_parser import parse_quality


# ====================
# Scores par resolution
# ====================

QUALITY_SCORES: dict[str, int] = {
    "1080p": 10,
    "720p": 5,
}

DEFAULT_QUALITY_SCORE = 0


def score_quality(quality: Optional[str]) -> int:
    """Score d'une resolution normalisee ("1080p", "720p"...), 0 si inconnue."""
    if quality is None:
        return DEFAULT_QUALITY_SCORE
    return QUALITY_SCORES.get(quality.lower(), DEFAULT_QUALITY_SCORE)


def score_release_quality(title: str) -> int:
    """
    Score de qualite d'un titre de release.

    Ex: "[SubsPlease] Show - 05 (1080p)" -> 10, "Show - 05 [480p]" -> 0
    """
    return score_quality(parse_quality(title))
