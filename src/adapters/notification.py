"""
Adaptateur de notification des erreurs du workflow.

Le signalement passe par les logs (loguru) : la sortie fichier JSON peut
etre surveillee par l'outillage d'exploitation.
"""

from collections.abc import Sequence

from loguru import logger

from src.core.ports.workflow import IErrorNotifier


class LoggingErrorNotifier(IErrorNotifier):
    """Signale les chemins en echec dans les logs, niveau WARNING."""

    async def notify(self, dirs_to_report: Sequence[str]) -> None:
        """Ecrit un resume puis une ligne par chemin a signaler."""
        if not dirs_to_report:
            logger.warning("Workflow en erreur, aucun chemin en echec a signaler")
            return

        logger.bind(report=list(dirs_to_report)).warning(
            "{} chemin(s) en echec a signaler a l'operateur", len(dirs_to_report)
        )
        for path in dirs_to_report:
            logger.warning("En echec: {}", path)
