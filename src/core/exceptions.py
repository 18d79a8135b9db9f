"""
Exceptions du domaine media-scanner.

Les collaborateurs du workflow levent ces exceptions pour signaler un echec.
L'orchestrateur les traduit en transitions vers l'etat ReportingErrors.
"""

from typing import Iterable, Optional


class MediaScannerError(Exception):
    """Exception de base pour toutes les erreurs de media-scanner."""


class ScanError(MediaScannerError):
    """
    Exception levee quand le repertoire source ne peut pas etre scanne.

    Attributes:
        base_path: Chemin du repertoire source en echec
    """

    def __init__(self, base_path: str, reason: Optional[str] = None) -> None:
        self.base_path = base_path
        message = f"Scan impossible: {base_path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PermissionCheckError(MediaScannerError):
    """
    Exception levee quand aucun repertoire n'a les droits lecture/ecriture.

    Attributes:
        dirs_to_report: Repertoires en echec, a signaler a l'operateur
    """

    def __init__(self, dirs_to_report: Iterable[str]) -> None:
        self.dirs_to_report = tuple(dirs_to_report)
        super().__init__(
            f"Permissions insuffisantes sur {len(self.dirs_to_report)} repertoire(s)"
        )


class EvaluationError(MediaScannerError):
    """Exception levee quand l'evaluation des fichiers echoue."""


class MoveError(MediaScannerError):
    """
    Exception levee quand un ou plusieurs deplacements ont echoue.

    Attributes:
        failed_files: Fichiers qui n'ont pas pu etre deplaces
    """

    def __init__(self, failed_files: Iterable[str], reason: Optional[str] = None) -> None:
        self.failed_files = tuple(failed_files)
        message = f"Echec du deplacement de {len(self.failed_files)} fichier(s)"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidTransitionError(MediaScannerError):
    """Exception levee quand un resultat d'effet arrive dans un etat sans effet."""


class WorkflowHaltedError(MediaScannerError):
    """
    Exception levee quand l'orchestrateur s'est arrete sur une faute interne.

    La faute d'origine est chainee via __cause__.
    """
