"""
Interface port pour la source de recherche de releases.

La source (site de torrents, indexeur...) est un collaborateur externe : ce
package lui envoie des chaines de requete et classe ce qu'elle retourne.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ReleaseCandidate:
    """
    Release retournee par la source de recherche.

    Attributs :
        title : Titre de la release
        source_id : Identifiant unique de la release (lien magnet)
        size : Taille telle qu'affichee par la source (ex: "1.4 GiB")
        seeders : Nombre de seeders
        is_trusted : Release marquee comme fiable par la source
        is_batch : Release regroupant plusieurs episodes
    """

    title: str
    source_id: str
    size: str = ""
    seeders: int = 0
    is_trusted: bool = False
    is_batch: bool = False


class ITitleSearchSource(ABC):
    """
    Interface d'une source de recherche par titre.

    Les resultats sont attendus tries par pertinence amont (seeders
    decroissants) ; cet ordre sert de departage au classement.
    Une implementation reseau signale un echec par une OSError
    (ConnectionError, TimeoutError...).
    """

    @abstractmethod
    def search(self, query: str) -> list[ReleaseCandidate]:
        """
        Execute une requete litterale.

        Args :
            query : Chaine de recherche

        Retourne :
            Releases trouvees, eventuellement vide
        """
        ...
