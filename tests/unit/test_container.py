"""
Tests unitaires pour le container d'injection de dependances.
"""

from src.adapters.file_system import FileSystemAdapter
from src.config import Settings
from src.container import Container
from src.services.evaluator import FileEvaluatorService
from src.services.workflow import WorkflowOrchestrator, WorkflowState


class TestContainer:
    """Tests de l'assemblage des collaborateurs."""

    def test_orchestrator_built_from_settings(self, test_settings: Settings):
        container = Container()
        container.config.override(test_settings)

        orchestrator = container.workflow_orchestrator()

        assert isinstance(orchestrator, WorkflowOrchestrator)
        assert orchestrator.state is WorkflowState.IDLE
        assert orchestrator.context.base_path == str(test_settings.base_path)
        assert orchestrator.context.destination_path == str(test_settings.destination_path)

    def test_each_orchestrator_owns_its_context(self, test_settings: Settings):
        container = Container()
        container.config.override(test_settings)

        first = container.workflow_orchestrator()
        second = container.workflow_orchestrator(base_path="/other", destination_path="/other-4k")

        assert first is not second
        assert second.context.base_path == "/other"

    def test_adapters_are_shared(self, test_settings: Settings):
        container = Container()
        container.config.override(test_settings)

        assert isinstance(container.file_system(), FileSystemAdapter)
        assert container.file_system() is container.file_system()
        assert isinstance(container.file_evaluator(), FileEvaluatorService)
