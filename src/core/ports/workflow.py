"""
Interfaces ports pour les collaborateurs du workflow.

Interfaces abstraites (ports) definissant les contrats consommes par
l'orchestrateur du workflow. Chaque operation est asynchrone : son
resultat (ou son exception) declenche la transition suivante de la machine
a etats. Les implementations (adaptateurs) fournissent l'acces concret au
systeme de fichiers, a mediainfo et au canal de notification.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence, Set

from src.core.value_objects.workflow import EvaluationResult, PermissionCheckResult


class IDirectoryScanner(ABC):
    """
    Interface de decouverte des repertoires candidats.

    Definit l'operation de scan de la bibliotheque source.
    """

    @abstractmethod
    async def scan_directories(self, base_path: str) -> list[str]:
        """
        Liste les repertoires a verifier sous la racine de la bibliotheque.

        Args :
            base_path : Racine de la bibliotheque source

        Retourne :
            Liste des chemins de repertoires (eventuellement vide)

        Leve :
            ScanError (ou toute exception) si la racine est illisible ou absente
        """
        ...


class IPermissionChecker(ABC):
    """
    Interface de verification des droits d'acces.

    Separe les repertoires accessibles en lecture/ecriture de ceux a signaler.
    """

    @abstractmethod
    async def check_file_permissions(
        self, directories: Sequence[str]
    ) -> PermissionCheckResult:
        """
        Verifie les permissions de chaque repertoire.

        Args :
            directories : Repertoires issus du scan

        Retourne :
            PermissionCheckResult avec dirs_to_evaluate et dirs_to_report

        Leve :
            PermissionCheckError avec dirs_to_report si aucun repertoire
            n'est exploitable
        """
        ...


class IFileEvaluator(ABC):
    """
    Interface d'evaluation des fichiers media.

    Selectionne les fichiers a deplacer vers la bibliotheque de destination
    (type accepte, critere de resolution).
    """

    @abstractmethod
    async def evaluate_files(
        self, directories: Sequence[str], accepted_file_types: Set[str]
    ) -> EvaluationResult:
        """
        Evalue les fichiers contenus dans les repertoires.

        Args :
            directories : Repertoires autorises en lecture/ecriture
            accepted_file_types : Extensions acceptees (minuscules, sans point)

        Retourne :
            EvaluationResult avec dirs_to_move
        """
        ...


class IFileMover(ABC):
    """
    Interface de deplacement des fichiers vers la destination.
    """

    @abstractmethod
    async def move_files(self, files: Sequence[str], destination_path: str) -> None:
        """
        Deplace les fichiers vers la racine de destination.

        Args :
            files : Chemins des fichiers a deplacer
            destination_path : Racine de la bibliotheque de destination

        Leve :
            MoveError (ou toute exception) si un deplacement echoue
        """
        ...


class IErrorNotifier(ABC):
    """
    Interface de notification des erreurs a l'operateur.

    Appelee une seule fois a l'entree de l'etat ReportingErrors.
    """

    @abstractmethod
    async def notify(self, dirs_to_report: Sequence[str]) -> None:
        """Signale les repertoires/fichiers en echec."""
        ...
