"""
Container d'injection de dependances via dependency-injector.

Assemble les collaborateurs du workflow et fournit des orchestrateurs
configures depuis les Settings.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .adapters.notification import LoggingErrorNotifier
from .adapters.parsing.mediainfo_extractor import MediaInfoExtractor
from .config import Settings
from .services.evaluator import FileEvaluatorService
from .services.workflow import WorkflowOrchestrator


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        orchestrator = container.workflow_orchestrator()
        # Autre paire source/destination :
        other = container.workflow_orchestrator(
            base_path="/mnt/a", destination_path="/mnt/b"
        )
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports (sans etat, Singletons)
    file_system = providers.Singleton(FileSystemAdapter)
    media_info_extractor = providers.Singleton(MediaInfoExtractor)
    error_notifier = providers.Singleton(LoggingErrorNotifier)

    # Service d'evaluation - depend du palier de resolution configure
    file_evaluator = providers.Singleton(
        FileEvaluatorService,
        media_info_extractor=media_info_extractor,
        min_resolution=config.provided.min_resolution,
    )

    # Orchestrateur - Factory : chaque instance possede son propre contexte
    # FileSystemAdapter implemente scanner, permissions et deplacement
    workflow_orchestrator = providers.Factory(
        WorkflowOrchestrator,
        base_path=config.provided.base_path,
        destination_path=config.provided.destination_path,
        scanner=file_system,
        permission_checker=file_system,
        evaluator=file_evaluator,
        mover=file_system,
        notifier=error_notifier,
        effect_timeout=config.provided.effect_timeout_seconds,
    )
