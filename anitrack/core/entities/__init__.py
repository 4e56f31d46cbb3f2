"""
Entités du domaine.

Exports :
- Show, Season, Episode : Bibliothèque locale
- TrackedSeries, InFlightDownload, UpdateRecord : Suivi des nouvelles sorties
"""

from anitrack.core.entities.library import Episode, Season, Show
from anitrack.core.entities.tracking import InFlightDownload, TrackedSeries, UpdateRecord

__all__ = [
    "Episode",
    "Season",
    "Show",
    "InFlightDownload",
    "TrackedSeries",
    "UpdateRecord",
]
