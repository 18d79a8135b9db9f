"""
Tests unitaires pour les fonctions de transition du workflow.

Les fonctions sont pures : on verifie l'etat cible et le contexte produit,
sans orchestrateur ni boucle asyncio.
"""

import pytest

from src.core.exceptions import InvalidTransitionError, PermissionCheckError, ScanError
from src.core.value_objects.workflow import EvaluationResult, PermissionCheckResult
from src.services.workflow import (
    EFFECT_STATES,
    WorkflowContext,
    WorkflowEvent,
    WorkflowState,
    on_effect_done,
    on_effect_error,
    on_event,
)


@pytest.fixture
def context() -> WorkflowContext:
    """Contexte avec un rapport d'erreurs deja present."""
    return WorkflowContext.initial("/library", "/library-4k").with_updates(
        dirs_to_report=("old",)
    )


class TestOnEvent:
    """Tests pour on_event."""

    def test_start_scan_from_idle(self, context: WorkflowContext):
        """START_SCAN depuis idle cible Scanning sans toucher au contexte."""
        transition = on_event(WorkflowState.IDLE, context, WorkflowEvent.START_SCAN)

        assert transition.target is WorkflowState.SCANNING
        assert transition.context is context

    def test_restart_from_reporting_errors(self, context: WorkflowContext):
        """RESTART depuis ReportingErrors cible idle et conserve le contexte."""
        transition = on_event(WorkflowState.REPORTING_ERRORS, context, WorkflowEvent.RESTART)

        assert transition.target is WorkflowState.IDLE
        assert transition.context.dirs_to_report == ("old",)

    @pytest.mark.parametrize("state", list(WorkflowState))
    @pytest.mark.parametrize("event", list(WorkflowEvent))
    def test_non_applicable_events_are_noops(
        self, state: WorkflowState, event: WorkflowEvent, context: WorkflowContext
    ):
        """Tout couple (etat, evenement) hors table retourne None."""
        applicable = {
            (WorkflowState.IDLE, WorkflowEvent.START_SCAN),
            (WorkflowState.REPORTING_ERRORS, WorkflowEvent.RESTART),
        }
        if (state, event) in applicable:
            pytest.skip("transition definie")

        assert on_event(state, context, event) is None


class TestOnEffectDone:
    """Tests pour on_effect_done."""

    def test_scan_done_sets_directories_to_check(self, context: WorkflowContext):
        transition = on_effect_done(WorkflowState.SCANNING, context, ["A", "B"])

        assert transition.target is WorkflowState.CHECKING_FILE_PERMISSIONS
        assert transition.context.directories_to_check == ("A", "B")
        assert transition.context.dirs_to_report == ("old",)

    def test_permissions_done_sets_evaluate_and_report(self, context: WorkflowContext):
        output = PermissionCheckResult(dirs_to_evaluate=("A",), dirs_to_report=("B",))

        transition = on_effect_done(WorkflowState.CHECKING_FILE_PERMISSIONS, context, output)

        assert transition.target is WorkflowState.EVALUATING_FILES
        assert transition.context.dirs_to_evaluate == ("A",)
        assert transition.context.dirs_to_report == ("B",)

    def test_evaluation_done_sets_dirs_to_move(self, context: WorkflowContext):
        output = EvaluationResult(dirs_to_move=("A/1.mp4",))

        transition = on_effect_done(WorkflowState.EVALUATING_FILES, context, output)

        assert transition.target is WorkflowState.MOVING_FILES
        assert transition.context.dirs_to_move == ("A/1.mp4",)

    def test_move_done_returns_to_idle_unchanged(self, context: WorkflowContext):
        transition = on_effect_done(WorkflowState.MOVING_FILES, context, None)

        assert transition.target is WorkflowState.IDLE
        assert transition.context is context

    def test_input_context_is_not_modified(self, context: WorkflowContext):
        """La fonction retourne un nouveau contexte, l'original reste intact."""
        on_effect_done(WorkflowState.SCANNING, context, ["A"])

        assert context.directories_to_check == ()

    @pytest.mark.parametrize(
        "state", [WorkflowState.IDLE, WorkflowState.REPORTING_ERRORS]
    )
    def test_state_without_effect_raises(self, state: WorkflowState, context: WorkflowContext):
        with pytest.raises(InvalidTransitionError):
            on_effect_done(state, context, [])


class TestOnEffectError:
    """Tests pour on_effect_error."""

    def test_scan_error_keeps_context(self, context: WorkflowContext):
        """L'echec du scan ne modifie pas le contexte."""
        transition = on_effect_error(WorkflowState.SCANNING, context, ScanError("/library"))

        assert transition.target is WorkflowState.REPORTING_ERRORS
        assert transition.context is context

    def test_permission_error_sets_dirs_to_report(self, context: WorkflowContext):
        """L'echec des permissions remplace dirs_to_report par la charge de l'erreur."""
        transition = on_effect_error(
            WorkflowState.CHECKING_FILE_PERMISSIONS, context, PermissionCheckError(["C"])
        )

        assert transition.target is WorkflowState.REPORTING_ERRORS
        assert transition.context.dirs_to_report == ("C",)

    def test_permission_error_without_payload_clears_report(self, context: WorkflowContext):
        """Une erreur sans dirs_to_report vide le rapport."""
        transition = on_effect_error(
            WorkflowState.CHECKING_FILE_PERMISSIONS, context, OSError("boom")
        )

        assert transition.context.dirs_to_report == ()

    @pytest.mark.parametrize(
        "state", [WorkflowState.EVALUATING_FILES, WorkflowState.MOVING_FILES]
    )
    def test_evaluation_and_move_errors_keep_context(
        self, state: WorkflowState, context: WorkflowContext
    ):
        transition = on_effect_error(state, context, RuntimeError("boom"))

        assert transition.target is WorkflowState.REPORTING_ERRORS
        assert transition.context is context

    def test_every_effect_state_has_an_error_edge(self, context: WorkflowContext):
        for state in EFFECT_STATES:
            transition = on_effect_error(state, context, RuntimeError("boom"))
            assert transition.target is WorkflowState.REPORTING_ERRORS

    def test_state_without_effect_raises(self, context: WorkflowContext):
        with pytest.raises(InvalidTransitionError):
            on_effect_error(WorkflowState.IDLE, context, RuntimeError("boom"))
