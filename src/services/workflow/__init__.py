"""
Package du workflow de maintenance de la bibliotheque media.

Reexporte les symboles principaux (from src.services.workflow import ...).
"""

from .context import WorkflowContext
from .orchestrator import WorkflowOrchestrator
from .states import EFFECT_STATES, WorkflowEvent, WorkflowState
from .transitions import Transition, on_effect_done, on_effect_error, on_event

__all__ = [
    "EFFECT_STATES",
    "Transition",
    "WorkflowContext",
    "WorkflowEvent",
    "WorkflowOrchestrator",
    "WorkflowState",
    "on_effect_done",
    "on_effect_error",
    "on_event",
]
