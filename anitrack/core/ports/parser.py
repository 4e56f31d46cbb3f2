"""
Interface port pour le parsing de noms de fichiers.
"""

from abc import ABC, abstractmethod

from anitrack.core.value_objects.parsed_info import ParsedFilename


class IFilenameParser(ABC):
    """
    Interface pour le parsing de noms de fichiers et titres de releases.

    Definit le contrat pour extraire episode, saison, groupe et qualite
    depuis une chaine non structuree.
    """

    @abstractmethod
    def parse(self, filename: str) -> ParsedFilename:
        """
        Parse un nom de fichier ou un titre de release.

        Args:
            filename: Nom du fichier (sans le chemin) ou titre de release

        Retourne:
            ParsedFilename ; les champs non reconnus sont None.
        """
        ...
