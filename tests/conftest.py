"""
Fixtures pytest partagees pour les tests media-scanner.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des collaborateurs du workflow (ports async)
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config import Settings
from src.core.ports.media_info import IMediaInfoExtractor
from src.core.ports.workflow import (
    IDirectoryScanner,
    IErrorNotifier,
    IFileEvaluator,
    IFileMover,
    IPermissionChecker,
)
from src.core.value_objects.workflow import EvaluationResult, PermissionCheckResult
from src.services.workflow import WorkflowOrchestrator


@pytest.fixture
def mock_scanner() -> MagicMock:
    """
    Mock de IDirectoryScanner.

    Ne trouve aucun repertoire par defaut.
    """
    mock = MagicMock(spec=IDirectoryScanner)
    mock.scan_directories = AsyncMock(return_value=[])
    return mock


@pytest.fixture
def mock_permission_checker() -> MagicMock:
    """Mock de IPermissionChecker, resultat vide par defaut."""
    mock = MagicMock(spec=IPermissionChecker)
    mock.check_file_permissions = AsyncMock(return_value=PermissionCheckResult())
    return mock


@pytest.fixture
def mock_evaluator() -> MagicMock:
    """Mock de IFileEvaluator, aucun fichier selectionne par defaut."""
    mock = MagicMock(spec=IFileEvaluator)
    mock.evaluate_files = AsyncMock(return_value=EvaluationResult())
    return mock


@pytest.fixture
def mock_mover() -> MagicMock:
    """Mock de IFileMover, deplacement reussi par defaut."""
    mock = MagicMock(spec=IFileMover)
    mock.move_files = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def mock_notifier() -> MagicMock:
    """Mock de IErrorNotifier."""
    mock = MagicMock(spec=IErrorNotifier)
    mock.notify = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def mock_media_info_extractor() -> MagicMock:
    """
    Mock de IMediaInfoExtractor.

    Retourne None par defaut (resolution inconnue).
    """
    mock = MagicMock(spec=IMediaInfoExtractor)
    mock.extract_resolution.return_value = None
    return mock


@pytest.fixture
def orchestrator(
    mock_scanner: MagicMock,
    mock_permission_checker: MagicMock,
    mock_evaluator: MagicMock,
    mock_mover: MagicMock,
    mock_notifier: MagicMock,
) -> WorkflowOrchestrator:
    """Orchestrateur branche sur les mocks des collaborateurs."""
    return WorkflowOrchestrator(
        "/library",
        "/library-4k",
        scanner=mock_scanner,
        permission_checker=mock_permission_checker,
        evaluator=mock_evaluator,
        mover=mock_mover,
        notifier=mock_notifier,
        name="test",
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour creer une structure de repertoires
    isolee pour chaque test.
    """
    base_path = tmp_path / "library"
    destination_path = tmp_path / "library-4k"
    base_path.mkdir(parents=True)

    return Settings(
        base_path=base_path,
        destination_path=destination_path,
        min_resolution="4K",
        log_file=tmp_path / "test.log",
    )
