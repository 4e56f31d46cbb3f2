"""
Tests d'integration avec les vrais adaptateurs.

Ces tests utilisent le FileSystemAdapter reel et le container DI : analyse
d'un lot telecharge, scan de bibliotheque, puis detection des episodes
nouveaux a partir d'une source de recherche en memoire.
"""

from pathlib import Path

import pytest
from dependency_injector import providers

from anitrack.config import Settings
from anitrack.container import Container
from anitrack.core.entities.tracking import InFlightDownload, TrackedSeries
from anitrack.core.ports.search_source import ITitleSearchSource, ReleaseCandidate


class InMemorySearchSource(ITitleSearchSource):
    """Source retournant les memes releases pour toute requete."""

    def __init__(self, releases: list[ReleaseCandidate]) -> None:
        self.releases = releases
        self.queries: list[str] = []

    def search(self, query: str) -> list[ReleaseCandidate]:
        self.queries.append(query)
        return list(self.releases)


def _release(title: str, size: str = "1.4 GiB") -> ReleaseCandidate:
    return ReleaseCandidate(title=title, source_id=f"magnet:{title}", size=size)


@pytest.fixture
def media_dir(test_settings: Settings) -> Path:
    """Bibliotheque contenant Frieren (episodes 1-2) et Bocchi en saisons."""
    root = test_settings.media_dirs[0]
    files = [
        "Frieren/[SubsPlease] Frieren - 01 (1080p).mkv",
        "Frieren/[SubsPlease] Frieren - 02 (1080p).mkv",
        "Bocchi the Rock/Season 1/Bocchi - 01.mkv",
        "Bocchi the Rock/Season 1/Bocchi - 02.mkv",
        "Bocchi the Rock/OVA/Bocchi OVA.mkv",
        "notes.txt",
    ]
    for relative in files:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
    return root


@pytest.fixture
def container(test_settings: Settings) -> Container:
    container = Container()
    container.config.override(providers.Object(test_settings))
    return container


class TestBatchAnalysisIntegration:
    """Analyse d'un telechargement reel."""

    def test_analyze_batch_download(self, container, make_tree):
        root = make_tree(
            "[Grp] Show (S1-S2)",
            [
                "Season 1/Show - 01.mkv",
                "Season 1/Show - 02.mkv",
                "Season 2/Show S2 - 01.mkv",
                "Season 2/Show S2 - 02.mkv",
                "Movies/Show Movie.mkv",
                "NCOP/NCOP1.mkv",
                "readme.nfo",
            ],
        )

        analysis = container.batch_analyzer().analyze(root)

        assert analysis.is_batch
        assert [s.number for s in analysis.seasons] == [1, 2]
        assert len(analysis.specials.movies) == 1
        assert len(analysis.specials.specials) == 1
        assert analysis.total_videos == 6

    def test_analyze_single_file(self, container, make_tree):
        root = make_tree("downloads", ["Show - 05.mkv"])

        analysis = container.batch_analyzer().analyze(root / "Show - 05.mkv")

        assert not analysis.is_batch
        assert analysis.total_videos == 1


class TestLibraryIntegration:
    """Scan de bibliotheque et detection des mises a jour."""

    def test_scan_library(self, container, media_dir):
        shows = container.library_scanner().scan_all(container.config().media_dirs)

        assert [show.title for show in shows] == ["Bocchi the Rock", "Frieren"]
        bocchi = shows[0]
        assert bocchi.seasons[0].number == 1
        assert len(bocchi.specials) == 1
        assert shows[1].has_episode(2)

    def test_check_for_updates(self, container, media_dir):
        source = InMemorySearchSource(
            [
                _release("[SubsPlease] Frieren - 02 (1080p).mkv"),
                _release("[SubsPlease] Frieren - 03 (720p).mkv"),
                _release("[SubsPlease] Frieren - 03 (1080p).mkv"),
                _release("[Erai-raws] Frieren - 04 [1080p].mkv"),
                _release("[SubsPlease] Frieren - 05 (1080p).mkv"),
            ]
        )
        container.search_source.override(providers.Object(source))
        library = container.library_scanner().scan_all(container.config().media_dirs)
        tracked = [
            TrackedSeries(
                id="frieren",
                title="Frieren",
                query="Frieren",
                filter_group="SubsPlease",
                filter_quality="1080p",
            )
        ]
        in_flight = [
            InFlightDownload(hash="abc", name="[SubsPlease] Frieren - 05 (1080p).mkv")
        ]

        updates = container.update_matcher().check_for_updates(tracked, library, in_flight)

        assert [u.episode_number for u in updates] == [3]
        assert updates[0].title == "[SubsPlease] Frieren - 03 (1080p).mkv"
        assert source.queries[0] == "Frieren"
