"""
Point d'entrée de media-scanner.

Initialise le container DI, configure le logging et exécute un cycle du
workflow de maintenance : python -m src.main
"""

import asyncio
import sys

from loguru import logger

from .container import Container
from .logging_config import configure_logging_from_settings
from .services.workflow import WorkflowState

container = Container()


async def run_once(container: Container) -> WorkflowState:
    """Exécute un cycle complet et retourne l'état de repos atteint."""
    async with container.workflow_orchestrator() as orchestrator:
        final_state = await orchestrator.run_cycle()
        if final_state is WorkflowState.REPORTING_ERRORS:
            logger.error("Cycle en échec: {}", orchestrator.last_error or "voir rapport")
        return final_state


def main() -> int:
    """Point d'entrée de l'application.

    Returns:
        0 si le cycle revient à idle, 1 sinon
    """
    settings = container.config()
    configure_logging_from_settings(settings)

    logger.info(
        "Démarrage de media-scanner",
        base_path=str(settings.base_path),
        destination_path=str(settings.destination_path),
    )

    try:
        final_state = asyncio.run(run_once(container))
    except Exception:
        logger.exception("Erreur lors du workflow")
        return 1

    return 0 if final_state is WorkflowState.IDLE else 1


if __name__ == "__main__":
    sys.exit(main())
