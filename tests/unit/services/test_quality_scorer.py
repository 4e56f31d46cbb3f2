"""
Tests unitaires pour le score de qualite des releases.
"""

from anitrack.services.quality_scorer import (
    DEFAULT_QUALITY_SCORE,
    score_quality,
    score_release_quality,
)


class TestScoreQuality:
    """Tests du score par resolution."""

    def test_known_resolutions(self):
        assert score_quality("1080p") == 10
        assert score_quality("720p") == 5

    def test_case_insensitive(self):
        assert score_quality("1080P") == 10

    def test_unknown_or_missing(self):
        assert score_quality("480p") == DEFAULT_QUALITY_SCORE
        assert score_quality("4k") == DEFAULT_QUALITY_SCORE
        assert score_quality(None) == DEFAULT_QUALITY_SCORE


class TestScoreReleaseQuality:
    """Tests du score deduit d'un titre."""

    def test_from_title(self):
        assert score_release_quality("[SubsPlease] Show - 05 (1080p) [ABC].mkv") == 10
        assert score_release_quality("[Group] Show - 05 [720p].mkv") == 5
        assert score_release_quality("Show - 05 [480p].mkv") == 0
        assert score_release_quality("Show - 05.mkv") == 0
