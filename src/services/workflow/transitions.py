"""
Fonctions de transition de la machine a etats du workflow.

Fonctions pures : elles recoivent l'etat courant, le contexte et un
evenement (ou le resultat d'un effet), et retournent la transition a
appliquer. Elles ne font aucune entree/sortie et ne modifient jamais le
contexte recu.

Table des transitions :

    idle                     START_SCAN -> Scanning
    Scanning                 succes -> CheckingFilePermissions (directories_to_check)
                             echec  -> ReportingErrors
    CheckingFilePermissions  succes -> EvaluatingFiles (dirs_to_evaluate, dirs_to_report)
                             echec  -> ReportingErrors (dirs_to_report)
    EvaluatingFiles          succes -> MovingFiles (dirs_to_move)
                             echec  -> ReportingErrors
    MovingFiles              succes -> idle
                             echec  -> ReportingErrors
    ReportingErrors          RESTART -> idle
"""

from dataclasses import dataclass
from typing import Any, Optional

from src.core.exceptions import InvalidTransitionError

from .context import WorkflowContext
from .states import WorkflowEvent, WorkflowState

# Evenements manuels : (etat, evenement) -> etat cible
EVENT_TRANSITIONS: dict[tuple[WorkflowState, WorkflowEvent], WorkflowState] = {
    (WorkflowState.IDLE, WorkflowEvent.START_SCAN): WorkflowState.SCANNING,
    (WorkflowState.REPORTING_ERRORS, WorkflowEvent.RESTART): WorkflowState.IDLE,
}


@dataclass(frozen=True)
class Transition:
    """Transition a appliquer : etat cible et nouveau contexte."""

    target: WorkflowState
    context: WorkflowContext


def on_event(
    state: WorkflowState, context: WorkflowContext, event: WorkflowEvent
) -> Optional[Transition]:
    """
    Resout un evenement externe.

    Retourne None si l'evenement n'est pas applicable dans cet etat :
    l'etat et le contexte restent alors inchanges.
    """
    target = EVENT_TRANSITIONS.get((state, event))
    if target is None:
        return None
    # RESTART conserve le contexte accumule (dirs_to_report compris)
    return Transition(target, context)


def on_effect_done(
    state: WorkflowState, context: WorkflowContext, output: Any
) -> Transition:
    """
    Resout la reussite de l'effet de l'etat courant.

    Raises:
        InvalidTransitionError: Si l'etat n'invoque pas d'effet
    """
    if state is WorkflowState.SCANNING:
        return Transition(
            WorkflowState.CHECKING_FILE_PERMISSIONS,
            context.with_updates(directories_to_check=output),
        )
    if state is WorkflowState.CHECKING_FILE_PERMISSIONS:
        return Transition(
            WorkflowState.EVALUATING_FILES,
            context.with_updates(
                dirs_to_evaluate=output.dirs_to_evaluate,
                dirs_to_report=output.dirs_to_report,
            ),
        )
    if state is WorkflowState.EVALUATING_FILES:
        return Transition(
            WorkflowState.MOVING_FILES,
            context.with_updates(dirs_to_move=output.dirs_to_move),
        )
    if state is WorkflowState.MOVING_FILES:
        return Transition(WorkflowState.IDLE, context)
    raise InvalidTransitionError(f"Aucun effet associe a l'etat {state.value}")


def on_effect_error(
    state: WorkflowState, context: WorkflowContext, error: BaseException
) -> Transition:
    """
    Resout l'echec de l'effet de l'etat courant.

    Seul l'echec de la verification des permissions alimente le contexte
    (dirs_to_report). Les autres echecs passent en ReportingErrors sans
    modifier le contexte.

    Raises:
        InvalidTransitionError: Si l'etat n'invoque pas d'effet
    """
    if state is WorkflowState.CHECKING_FILE_PERMISSIONS:
        dirs_to_report = getattr(error, "dirs_to_report", None) or ()
        return Transition(
            WorkflowState.REPORTING_ERRORS,
            context.with_updates(dirs_to_report=dirs_to_report),
        )
    if state in (
        WorkflowState.SCANNING,
        WorkflowState.EVALUATING_FILES,
        WorkflowState.MOVING_FILES,
    ):
        return Transition(WorkflowState.REPORTING_ERRORS, context)
    raise InvalidTransitionError(f"Aucun effet associe a l'etat {state.value}")
