"""
Orchestration d'une recherche de releases.

SearchService transforme une saisie libre en chaines de recherche
(build_search_query), les soumet une a une a la source, deduplique les
releases par identifiant, marque les batchs et classe le tout. fetch
envoie une requete litterale et garde l'ordre de la source.
"""

import re
from dataclasses import replace

from loguru import logger

from anitrack.core.ports.search_source import ITitleSearchSource, ReleaseCandidate
from anitrack.core.value_objects.search_info import SearchQuery
from anitrack.services.ranker import rank_results
from anitrack.services.search_query import build_search_query

DEFAULT_TARGET_RESULTS = 15
DEFAULT_MAX_RESULTS = 30
DEFAULT_BATCH_SIZE_THRESHOLD_MB = 5120.0

BATCH_TITLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\[batch\]", re.IGNORECASE),
    re.compile(r"\bcomplete\b", re.IGNORECASE),
    re.compile(r"\bseason\s+\d+\b", re.IGNORECASE),
    # Sensible a la casse : "s01" seul apparait dans trop de noms
    re.compile(r"\bS\d{2}\b"),
    re.compile(r"\d+-\d+\s*(?:END|FINAL)", re.IGNORECASE),
)

# Facteurs de conversion vers le MiB
SIZE_UNITS_MB: dict[str, float] = {
    "KIB": 1 / 1024,
    "MIB": 1.0,
    "GIB": 1024.0,
    "TIB": 1024.0 * 1024.0,
}


def parse_size_mb(size: str) -> float:
    """
    Convertit une taille affichee ("1.4 GiB", "700 MiB") en MiB.

    Retourne 0.0 pour une taille illisible ou une unite inconnue.
    """
    parts = size.split()
    if len(parts) != 2:
        return 0.0

    try:
        value = float(parts[0])
    except ValueError:
        return 0.0

    return value * SIZE_UNITS_MB.get(parts[1].upper(), 0.0)


def is_batch_release(
    title: str,
    size: str = "",
    threshold_mb: float = DEFAULT_BATCH_SIZE_THRESHOLD_MB,
) -> bool:
    """Une release est un batch si son titre l'indique ou si elle est tres volumineuse."""
    if any(pattern.search(title) for pattern in BATCH_TITLE_PATTERNS):
        return True
    return parse_size_mb(size) > threshold_mb


class SearchService:
    """
    Service de recherche multi-requetes.

    Les requetes sont essayees dans l'ordre (principale puis alternatives).
    La boucle s'arrete des qu'une requete a apporte des resultats nouveaux
    et que target_results releases uniques sont reunies, ou des que
    max_results est atteint.
    """

    def __init__(
        self,
        source: ITitleSearchSource,
        target_results: int = DEFAULT_TARGET_RESULTS,
        max_results: int = DEFAULT_MAX_RESULTS,
        batch_size_threshold_mb: float = DEFAULT_BATCH_SIZE_THRESHOLD_MB,
    ) -> None:
        self._source = source
        self._target_results = target_results
        self._max_results = max_results
        self._batch_size_threshold_mb = batch_size_threshold_mb

    def search(self, text: str) -> list[ReleaseCandidate]:
        """
        Recherche des releases pour une saisie libre.

        Args:
            text: Requete utilisateur ("Frieren S01E09", "One Piece S02"...)

        Returns:
            Releases uniques, marquees batch si besoin, classees par pertinence
        """
        query = build_search_query(text)
        results = self._collect(query)
        logger.info(f"Recherche '{text}': {len(results)} resultat(s) unique(s)")
        return rank_results(results, query.parsed, get_title=lambda r: r.title)

    def fetch(self, query: str) -> list[ReleaseCandidate]:
        """
        Envoie une requete litterale a la source, sans expansion ni classement.

        L'ordre de la source (seeders decroissants) est conserve ; seul le
        marquage batch est applique. Une OSError de la source est propagee.
        """
        logger.debug(f"Requete litterale: {query}")
        return [self._mark_batch(candidate) for candidate in self._source.search(query)]

    def _collect(self, query: SearchQuery) -> list[ReleaseCandidate]:
        """Interroge la source requete par requete et deduplique par source_id."""
        collected: list[ReleaseCandidate] = []
        seen: set[str] = set()

        for query_text in query.all_queries():
            logger.debug(f"Requete: {query_text}")
            try:
                found = self._source.search(query_text)
            except OSError as e:
                logger.warning(f"Echec de la requete '{query_text}': {e}")
                continue

            added = 0
            for candidate in found:
                if candidate.source_id in seen:
                    continue
                seen.add(candidate.source_id)
                collected.append(self._mark_batch(candidate))
                added += 1

            if (added > 0 and len(collected) >= self._target_results) or (
                len(collected) >= self._max_results
            ):
                break

        return collected

    def _mark_batch(self, candidate: ReleaseCandidate) -> ReleaseCandidate:
        if candidate.is_batch:
            return candidate
        if is_batch_release(candidate.title, candidate.size, self._batch_size_threshold_mb):
            return replace(candidate, is_batch=True)
        return candidate
