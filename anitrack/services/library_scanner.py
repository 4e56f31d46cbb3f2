"""
Service de scan de la bibliotheque locale.

Reconstruit les series (Show) a partir des repertoires de la bibliotheque :
un sous-repertoire par serie, ou une video isolee directement dans le
repertoire de la bibliotheque.
"""

from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from anitrack.core.entities.library import Episode, Season, Show
from anitrack.core.ports.file_system import IFileSystem
from anitrack.core.ports.parser import IFilenameParser
from anitrack.core.value_objects import FolderKind
from anitrack.services.filename_parser import (
    is_video_file,
    make_show_id,
    make_show_title,
    strip_compressed_suffix,
)
from anitrack.services.folder_categorizer import categorize_folder

# Numero attribue a un episode dont le nom n'a pas pu etre parse
UNKNOWN_EPISODE_NUMBER = 0


def _sort_shows(shows: list[Show]) -> list[Show]:
    return sorted(shows, key=lambda show: show.title.lower())


class LibraryScannerService:
    """
    Service reconstruisant la bibliotheque depuis le disque.

    Structure reconnue pour un dossier de serie :
    - videos a la racine -> episodes
    - dossier de saison contenant au moins une video -> Season
    - OVA / special / film / bonus -> speciaux
    - dossier non classe -> ses videos directes rejoignent les episodes
    """

    def __init__(self, file_system: IFileSystem, filename_parser: IFilenameParser) -> None:
        """
        Initialise le scanner.

        Args:
            file_system: Implementation de IFileSystem pour les listings
            filename_parser: Implementation de IFilenameParser pour les numeros d'episode
        """
        self._file_system = file_system
        self._filename_parser = filename_parser

    def scan_show_dir(self, path: Path) -> Optional[Show]:
        """
        Scanne le dossier d'une serie.

        Returns:
            Show, ou None si le chemin n'est pas un dossier ou ne contient
            aucune video
        """
        if not self._file_system.is_dir(path):
            return None

        show = Show(
            id=make_show_id(path.name),
            title=make_show_title(path.name),
            path=path,
        )
        show.episodes = self._collect_episodes(path)

        for entry in self._file_system.list_dir(path):
            if not entry.is_dir:
                continue

            category = categorize_folder(entry.name)
            episodes = self._collect_episodes(entry.path, relative_path=entry.name)

            if category.kind == FolderKind.SEASON:
                if episodes:
                    logger.debug(
                        f"{show.title}: saison {category.season} ({len(episodes)} episodes)"
                    )
                    show.seasons.append(
                        Season(
                            number=category.season,
                            folder_name=entry.name,
                            path=entry.path,
                            episodes=episodes,
                        )
                    )
            elif category.is_unknown:
                if episodes:
                    logger.debug(f"{show.title}: {len(episodes)} episodes dans {entry.name}")
                    show.episodes.extend(episodes)
            else:
                logger.debug(f"{show.title}: {len(episodes)} {category} dans {entry.name}")
                show.specials.extend(episodes)

        show.episodes.sort(key=lambda ep: ep.number)
        show.seasons.sort(key=lambda s: s.number)

        total = show.episode_count()
        if total == 0:
            return None
        show.total_episodes = total
        return show

    def scan_media_dir(self, path: Path) -> list[Show]:
        """
        Scanne un repertoire de bibliotheque.

        Chaque sous-repertoire est une serie ; chaque video isolee devient une
        serie d'un seul episode (numero 1 par defaut).

        Returns:
            Series triees par titre, liste vide si le repertoire n'existe pas
        """
        if not self._file_system.exists(path):
            logger.debug(f"Repertoire de bibliotheque absent: {path}")
            return []

        shows: list[Show] = []
        loose_files: list[str] = []

        for entry in self._file_system.list_dir(path):
            if entry.is_dir:
                show = self.scan_show_dir(entry.path)
                if show is not None:
                    logger.debug(
                        f"Serie trouvee: {show.title} ({show.episode_count()} episodes, "
                        f"{len(show.seasons)} saisons)"
                    )
                    shows.append(show)
            elif is_video_file(entry.name):
                loose_files.append(entry.name)

        for filename in loose_files:
            base = strip_compressed_suffix(filename).rpartition(".")[0] or filename
            number = self._filename_parser.parse(filename).episode or 1
            shows.append(
                Show(
                    id=make_show_id(base),
                    title=make_show_title(base),
                    path=path,
                    episodes=[Episode(number=number, filename=filename)],
                    total_episodes=1,
                )
            )

        return _sort_shows(shows)

    def scan_all(self, dirs: Iterable[Path]) -> list[Show]:
        """
        Scanne plusieurs repertoires de bibliotheque.

        Une serie presente dans plusieurs repertoires n'est gardee qu'une
        fois (premiere occurrence).
        """
        seen: set[str] = set()
        shows: list[Show] = []
        for directory in dirs:
            for show in self.scan_media_dir(directory):
                if show.id in seen:
                    continue
                seen.add(show.id)
                shows.append(show)

        logger.info(f"Bibliotheque scannee: {len(shows)} serie(s)")
        return _sort_shows(shows)

    def refresh(self, existing: Iterable[Show], dirs: Iterable[Path]) -> list[Show]:
        """
        Rescanne la bibliotheque en conservant l'etat de visionnage.

        watched et last_position sont reportes depuis les series existantes,
        par identifiant de serie puis emplacement du fichier (sous-dossier et
        nom). Les numeros d'episode ne servent pas de cle : plusieurs fichiers
        non parses partagent le numero 0.
        """
        previous = {show.id: show for show in existing}
        shows = self.scan_all(dirs)

        for show in shows:
            old = previous.get(show.id)
            if old is None:
                continue
            state = {
                (ep.relative_path, ep.filename): ep for ep in old.all_episodes()
            }
            for episode in show.all_episodes():
                known = state.get((episode.relative_path, episode.filename))
                if known is not None:
                    episode.watched = known.watched
                    episode.last_position = known.last_position

        return shows

    def _collect_episodes(
        self, path: Path, relative_path: Optional[str] = None
    ) -> list[Episode]:
        """Videos directes d'un dossier, triees par numero d'episode."""
        episodes = []
        for entry in self._file_system.list_dir(path):
            if entry.is_dir or not is_video_file(entry.name):
                continue
            number = self._filename_parser.parse(entry.name).episode
            if number is None:
                logger.debug(f"Numero d'episode introuvable, 0 utilise: {entry.name}")
                number = UNKNOWN_EPISODE_NUMBER
            episodes.append(
                Episode(number=number, filename=entry.name, relative_path=relative_path)
            )

        episodes.sort(key=lambda ep: ep.number)
        return episodes
