"""
Etats et evenements de la machine a etats du workflow.
"""

from enum import Enum


class WorkflowState(str, Enum):
    """Etats du workflow de maintenance de la bibliotheque."""

    IDLE = "idle"
    SCANNING = "Scanning"
    CHECKING_FILE_PERMISSIONS = "CheckingFilePermissions"
    EVALUATING_FILES = "EvaluatingFiles"
    MOVING_FILES = "MovingFiles"
    REPORTING_ERRORS = "ReportingErrors"


class WorkflowEvent(str, Enum):
    """Evenements externes acceptes par la machine."""

    START_SCAN = "START_SCAN"
    RESTART = "RESTART"


# Etats qui invoquent un effet asynchrone a l'entree
EFFECT_STATES = frozenset({
    WorkflowState.SCANNING,
    WorkflowState.CHECKING_FILE_PERMISSIONS,
    WorkflowState.EVALUATING_FILES,
    WorkflowState.MOVING_FILES,
})
