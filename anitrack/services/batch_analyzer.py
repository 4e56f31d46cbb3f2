"""
Service d'analyse des arborescences telechargees.

Produit un inventaire (BatchAnalysis) d'un telechargement : saisons,
contenus speciaux et episodes en vrac. Les lectures de repertoires passent
par le port IFileSystem ; l'analyse elle-meme est sans etat et peut etre
appelee en parallele sur des chemins independants.
"""

from dataclasses import replace
from pathlib import Path

from loguru import logger

from anitrack.core.ports.file_system import IFileSystem
from anitrack.core.value_objects import BatchAnalysis, FolderKind, SeasonInfo, SpecialsInfo
from anitrack.services.filename_parser import is_video_file
from anitrack.services.folder_categorizer import categorize_folder

# Nombre de videos a partir duquel un telechargement sans saison est un batch
DEFAULT_BATCH_MIN_VIDEOS = 4


class BatchAnalyzerService:
    """
    Service d'inventaire d'un dossier telecharge.

    Algorithme :
    - les videos a la racine sont des episodes en vrac
    - chaque sous-dossier est classe par categorize_folder
    - saison -> SeasonInfo ; OVA / special / film -> bucket correspondant ;
      bonus -> bucket des speciaux
    - dossier non classe -> analyse recursive : les saisons trouvees remontent,
      sinon ses videos directes rejoignent les episodes en vrac
    """

    def __init__(
        self,
        file_system: IFileSystem,
        batch_min_videos: int = DEFAULT_BATCH_MIN_VIDEOS,
    ) -> None:
        """
        Initialise le service d'analyse.

        Args:
            file_system: Implementation de IFileSystem pour les listings
            batch_min_videos: Seuil de videos au-dela duquel on parle de batch
        """
        self._file_system = file_system
        self._batch_min_videos = batch_min_videos

    def analyze(self, path: Path) -> BatchAnalysis:
        """
        Analyse un telechargement (dossier ou fichier video isole).

        Args:
            path: Racine du telechargement

        Returns:
            BatchAnalysis ; un fichier video isole donne un episode unique
            non batch, tout autre non-repertoire une analyse vide.
        """
        if not self._file_system.is_dir(path):
            if self._file_system.is_file(path) and is_video_file(path.name):
                return BatchAnalysis(is_batch=False, loose_episodes=(path,))
            return BatchAnalysis.empty()

        loose: list[Path] = []
        seasons: list[SeasonInfo] = []
        ovas: list[Path] = []
        movies: list[Path] = []
        specials: list[Path] = []

        entries = self._file_system.list_dir(path)
        loose.extend(e.path for e in entries if not e.is_dir and is_video_file(e.name))

        for entry in entries:
            if not entry.is_dir:
                continue

            category = categorize_folder(entry.name)
            videos = self._collect_videos(entry.path)
            logger.debug(
                f"Dossier classe: {entry.name} -> {category} ({len(videos)} videos)"
            )

            if category.kind == FolderKind.SEASON:
                seasons.append(
                    SeasonInfo(
                        number=category.season,
                        folder_name=entry.name,
                        path=entry.path,
                        episodes=tuple(videos),
                    )
                )
            elif category.kind == FolderKind.OVA:
                ovas.extend(videos)
            elif category.kind == FolderKind.MOVIE:
                movies.extend(videos)
            elif category.kind in (FolderKind.SPECIAL, FolderKind.EXTRA):
                specials.extend(videos)
            else:
                nested = self.analyze(entry.path)
                if nested.seasons:
                    # Show/Sous-dossier/Season 1/... : la structure remonte
                    seasons.extend(nested.seasons)
                    ovas.extend(nested.specials.ovas)
                    movies.extend(nested.specials.movies)
                    specials.extend(nested.specials.specials)
                    loose.extend(nested.loose_episodes)
                else:
                    loose.extend(videos)

        seasons.sort(key=lambda s: s.number)

        specials_info = SpecialsInfo(
            ovas=tuple(ovas),
            movies=tuple(movies),
            specials=tuple(specials),
        )
        analysis = BatchAnalysis(
            seasons=tuple(seasons),
            specials=specials_info,
            loose_episodes=tuple(loose),
        )
        is_batch = (
            bool(seasons)
            or analysis.total_videos >= self._batch_min_videos
            or not specials_info.is_empty
        )

        logger.debug(f"Analyse de {path.name}: {analysis.summary()} (batch={is_batch})")
        return replace(analysis, is_batch=is_batch)

    def is_batch_folder(self, path: Path) -> bool:
        """
        Test rapide sans analyse complete.

        Un dossier est un batch s'il contient un sous-dossier classe, au moins
        batch_min_videos videos, ou un sous-dossier quelconque.
        """
        if not self._file_system.is_dir(path):
            return False

        video_count = 0
        subdir_count = 0
        for entry in self._file_system.list_dir(path):
            if entry.is_dir:
                if not categorize_folder(entry.name).is_unknown:
                    return True
                subdir_count += 1
            elif is_video_file(entry.name):
                video_count += 1

        return video_count >= self._batch_min_videos or subdir_count > 0

    def _collect_videos(self, path: Path) -> list[Path]:
        """Videos directement dans un dossier (non recursif), triees par nom."""
        return [
            entry.path
            for entry in self._file_system.list_dir(path)
            if not entry.is_dir and is_video_file(entry.name)
        ]
