"""
Detection des nouveaux episodes pour les series suivies.

Pour chaque serie suivie, sa requete est envoyee telle quelle a la source
(SearchService.fetch, sans expansion ni classement) ; les releases sont
filtrees puis regroupees par episode :
- episode deja present dans la bibliotheque
- episode au niveau ou sous le seuil min_episode de la serie
- groupe de release ou qualite ne correspondant pas aux filtres
- titre identique a un telechargement en cours
- saison explicite differente de la saison suivie

Dans chaque groupe la release de meilleure qualite l'emporte ; a qualite
egale la premiere vue (la mieux seedee) est conservee.
"""

from typing import Iterable, Optional

from loguru import logger
from rapidfuzz import fuzz, utils

from anitrack.core.entities.library import Show
from anitrack.core.entities.tracking import InFlightDownload, TrackedSeries, UpdateRecord
from anitrack.core.ports.search_source import ReleaseCandidate
from anitrack.services.filename_parser import (
    parse_episode_number,
    parse_quality,
    parse_release_group,
    parse_season_number,
)
from anitrack.services.quality_scorer import score_release_quality
from anitrack.services.search import SearchService

DEFAULT_SHOW_MATCH_THRESHOLD = 90


def _title_similarity(left: str, right: str) -> float:
    """Similarite de titres (0-100), independante de l'ordre des mots."""
    return fuzz.token_sort_ratio(left, right, processor=utils.default_process)


class UpdateMatcherService:
    """
    Service de detection des mises a jour.

    match_updates est pur ; check_for_updates enchaine recherche et matching
    pour chaque serie suivie, sequentiellement.
    """

    def __init__(
        self,
        search_service: SearchService,
        show_match_threshold: int = DEFAULT_SHOW_MATCH_THRESHOLD,
    ) -> None:
        """
        Initialise le service.

        Args:
            search_service: Service de recherche utilise par check_for_updates
            show_match_threshold: Score minimum de similarite pour rattacher
                une serie suivie a une serie de la bibliotheque par son titre
        """
        self._search_service = search_service
        self._show_match_threshold = show_match_threshold

    def check_for_updates(
        self,
        tracked: Iterable[TrackedSeries],
        library: list[Show],
        in_flight: list[InFlightDownload],
    ) -> list[UpdateRecord]:
        """
        Cherche les nouveaux episodes de toutes les series suivies.

        La requete de chaque serie est envoyee litteralement et les resultats
        gardent l'ordre de la source. Une recherche en echec (OSError) est
        journalisee et la serie ignoree.
        """
        updates: list[UpdateRecord] = []

        for series in tracked:
            logger.info(f"Verification des mises a jour: {series.title}")
            try:
                results = self._search_service.fetch(series.query)
            except OSError as e:
                logger.warning(f"Echec de la recherche pour {series.title}: {e}")
                continue

            found = self.match_updates(series, results, library, in_flight)
            if found:
                logger.info(f"{series.title}: {len(found)} nouvel(s) episode(s)")
            updates.extend(found)

        return updates

    def match_updates(
        self,
        series: TrackedSeries,
        results: Iterable[ReleaseCandidate],
        library: list[Show],
        in_flight: list[InFlightDownload],
    ) -> list[UpdateRecord]:
        """
        Retient les releases correspondant a des episodes nouveaux.

        Args:
            series: Serie suivie
            results: Releases dans l'ordre de la source (seeders decroissants)
            library: Series deja presentes sur le disque
            in_flight: Telechargements en cours

        Returns:
            Un UpdateRecord par episode nouveau, trie par numero d'episode
        """
        show = self.find_show(series, library)
        downloading = {download.name.lower() for download in in_flight}
        best: dict[int, tuple[int, ReleaseCandidate]] = {}

        for result in results:
            title = result.title

            episode = parse_episode_number(title)
            if episode is None:
                continue

            if episode <= series.min_episode:
                continue

            if series.season is not None:
                season = parse_season_number(title)
                if season is not None and season != series.season:
                    continue

            if show is not None and show.has_episode(episode, series.season):
                continue

            if title.lower() in downloading:
                logger.debug(
                    f"{series.title} - episode {episode} deja en telechargement"
                )
                continue

            if not self._passes_filters(series, title):
                continue

            score = score_release_quality(title)
            current = best.get(episode)
            if current is None or score > current[0]:
                best[episode] = (score, result)

        return [
            UpdateRecord(
                series_title=series.title,
                episode_number=episode,
                source_id=result.source_id,
                title=result.title,
            )
            for episode, (_, result) in sorted(best.items())
        ]

    def find_show(self, series: TrackedSeries, library: list[Show]) -> Optional[Show]:
        """
        Rattache une serie suivie a une serie de la bibliotheque.

        Par identifiant, puis par inclusion de titre (dans un sens ou
        l'autre), puis par similarite floue au-dessus du seuil.
        """
        for show in library:
            if show.id == series.id:
                return show

        wanted = series.title.lower()
        if wanted:
            for show in library:
                current = show.title.lower()
                if current and (wanted in current or current in wanted):
                    return show

        best_show = None
        best_score = 0.0
        for show in library:
            score = _title_similarity(series.title, show.title)
            if score >= self._show_match_threshold and score > best_score:
                best_show = show
                best_score = score
        return best_show

    @staticmethod
    def _passes_filters(series: TrackedSeries, title: str) -> bool:
        """Filtres de groupe et de qualite ; un titre sans l'information echoue."""
        if series.filter_group:
            group = parse_release_group(title)
            if group is None or series.filter_group.lower() not in group.lower():
                return False

        if series.filter_quality:
            quality = parse_quality(title)
            if quality is None or quality != series.filter_quality.lower():
                return False

        return True
