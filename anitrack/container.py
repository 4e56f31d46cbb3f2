"""
Container d'injection de dependances via dependency-injector.

Assemble adaptateurs et services a partir de Settings. La source de
recherche n'a pas d'implementation dans ce package : l'appelant la fournit
avec container.search_source.override(...).
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .config import Settings
from .core.ports.search_source import ITitleSearchSource
from .services.batch_analyzer import BatchAnalyzerService
from .services.filename_parser import RegexFilenameParser
from .services.library_scanner import LibraryScannerService
from .services.search import SearchService
from .services.update_matcher import UpdateMatcherService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        analyzer = container.batch_analyzer()
        container.search_source.override(providers.Object(my_source))
        matcher = container.update_matcher()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    filename_parser = providers.Singleton(RegexFilenameParser)
    search_source = providers.Dependency(instance_of=ITitleSearchSource)

    # Services
    batch_analyzer = providers.Factory(
        BatchAnalyzerService,
        file_system=file_system,
        batch_min_videos=config.provided.batch_min_videos,
    )

    library_scanner = providers.Factory(
        LibraryScannerService,
        file_system=file_system,
        filename_parser=filename_parser,
    )

    search_service = providers.Factory(
        SearchService,
        source=search_source,
        target_results=config.provided.search_target_results,
        max_results=config.provided.search_max_results,
        batch_size_threshold_mb=config.provided.batch_size_threshold_mb,
    )

    update_matcher = providers.Factory(
        UpdateMatcherService,
        search_service=search_service,
        show_match_threshold=config.provided.show_match_threshold,
    )
