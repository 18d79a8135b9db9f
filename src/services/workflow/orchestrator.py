"""
Orchestrateur du workflow de maintenance de la bibliotheque media.

Machine a etats cooperative qui enchaine les etapes :
- Scan des repertoires de la bibliotheque source
- Verification des permissions lecture/ecriture
- Evaluation des fichiers (type, resolution)
- Deplacement vers la bibliotheque de destination
- Signalement des erreurs a l'operateur

Chaque etat a effet lance une seule tache asyncio a son entree. Le resultat
de la tache declenche la transition suivante, sauf si la machine a quitte
l'etat entre-temps (compteur de generation incremente a chaque entree).

Un effet qui depasse le delai configure fait passer la machine en
ReportingErrors, mais son travail (souvent un thread) n'est pas interruptible :
il reste suivi jusqu'a sa fin et bloque START_SCAN tant qu'il tourne.
"""

import asyncio
import itertools
from collections import deque
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger

from src.core.exceptions import WorkflowHaltedError
from src.core.ports.workflow import (
    IDirectoryScanner,
    IErrorNotifier,
    IFileEvaluator,
    IFileMover,
    IPermissionChecker,
)

from .context import WorkflowContext
from .states import EFFECT_STATES, WorkflowEvent, WorkflowState
from .transitions import Transition, on_effect_done, on_effect_error, on_event

StateListener = Callable[[WorkflowState, WorkflowContext], None]

_instance_ids = itertools.count(1)


class WorkflowOrchestrator:
    """
    Machine a etats du workflow de maintenance.

    Un orchestrateur possede son contexte en exclusivite. Plusieurs instances
    (paires source/destination differentes) peuvent tourner en parallele
    dans la meme boucle asyncio sans rien partager.

    Utilisation typique:
        orchestrator = container.workflow_orchestrator()
        final_state = await orchestrator.run_cycle()
        if final_state is WorkflowState.REPORTING_ERRORS:
            orchestrator.send(WorkflowEvent.RESTART)
    """

    def __init__(
        self,
        base_path: str | Path,
        destination_path: str | Path,
        *,
        scanner: IDirectoryScanner,
        permission_checker: IPermissionChecker,
        evaluator: IFileEvaluator,
        mover: IFileMover,
        notifier: IErrorNotifier,
        effect_timeout: Optional[float] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Initialise l'orchestrateur dans l'etat idle.

        Args:
            base_path: Racine de la bibliotheque source
            destination_path: Racine de la bibliotheque de destination
            scanner: Collaborateur de scan des repertoires
            permission_checker: Collaborateur de verification des permissions
            evaluator: Collaborateur d'evaluation des fichiers
            mover: Collaborateur de deplacement des fichiers
            notifier: Collaborateur de notification des erreurs
            effect_timeout: Delai maximum d'un effet en secondes (None = illimite).
                            Un depassement est traite comme un echec de l'effet.
            name: Identifiant de l'instance dans les logs
        """
        self._scanner = scanner
        self._permission_checker = permission_checker
        self._evaluator = evaluator
        self._mover = mover
        self._notifier = notifier
        self._effect_timeout = effect_timeout

        self._state = WorkflowState.IDLE
        self._context = WorkflowContext.initial(base_path, destination_path)
        self._generation = 0
        self._effect_task: Optional[asyncio.Task] = None
        self._notification_tasks: set[asyncio.Task] = set()
        # Travaux d'effets expires, encore en cours dans leur thread
        self._expired_effects: set[asyncio.Future] = set()
        self._listeners: list[StateListener] = []
        self._dispatching = False
        self._queued_events: deque[WorkflowEvent] = deque()
        self._last_error: Optional[str] = None
        self._fault: Optional[BaseException] = None
        self._closed = False

        self._name = name or f"workflow-{next(_instance_ids)}"
        self._log = logger.bind(workflow=self._name)

    # Observabilite

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> WorkflowState:
        """Etat courant de la machine."""
        return self._state

    @property
    def context(self) -> WorkflowContext:
        """Instantane immutable du contexte courant."""
        return self._context

    @property
    def last_error(self) -> Optional[str]:
        """Detail du dernier echec d'effet du cycle en cours (None si aucun)."""
        return self._last_error

    @property
    def fault(self) -> Optional[BaseException]:
        """Faute interne ayant arrete la machine (None si aucune)."""
        return self._fault

    @property
    def is_settled(self) -> bool:
        """True si aucun effet (expire compris) ni aucune notification n'est en cours."""
        effect_pending = self._effect_task is not None and not self._effect_task.done()
        return not effect_pending and not self._pending_background()

    def _pending_background(self) -> set[asyncio.Future]:
        """Notifications et effets expires non termines."""
        return {
            task
            for task in self._notification_tasks | self._expired_effects
            if not task.done()
        }

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Abonne un observateur aux transitions.

        Le listener recoit (etat, contexte) apres chaque transition.

        Returns:
            Fonction de desabonnement
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Evenements externes

    def send(self, event: Union[WorkflowEvent, str]) -> bool:
        """
        Envoie un evenement externe a la machine.

        Un evenement non applicable dans l'etat courant est ignore : l'etat et
        le contexte restent inchanges. START_SCAN doit etre envoye depuis une
        boucle asyncio en cours d'execution (il demarre l'effet de scan) et
        est refuse tant qu'un effet expire n'a pas termine son travail.

        Envoye par un observateur pendant une transition, l'evenement est mis
        en file et traite une fois la transition en cours terminee.

        Args:
            event: START_SCAN ou RESTART (enum ou valeur texte)

        Returns:
            True si l'evenement a provoque une transition (ou a ete mis en file)
        """
        if self._closed or self._fault is not None:
            self._log.debug("Evenement {} ignore: orchestrateur arrete", event)
            return False

        try:
            event = WorkflowEvent(event)
        except ValueError:
            self._log.warning("Evenement inconnu ignore: {}", event)
            return False

        if self._dispatching:
            self._queued_events.append(event)
            self._log.debug("Evenement {} mis en file", event.value)
            return True
        return self._dispatch(event)

    def _dispatch(self, event: WorkflowEvent) -> bool:
        if event is WorkflowEvent.START_SCAN and any(
            not work.done() for work in self._expired_effects
        ):
            self._log.warning("START_SCAN refuse: un effet expire est encore en cours")
            return False

        transition = on_event(self._state, self._context, event)
        if transition is None:
            self._log.debug(
                "Evenement {} ignore dans l'etat {}", event.value, self._state.value
            )
            return False

        if event is WorkflowEvent.START_SCAN:
            self._last_error = None
        self._apply(transition, cause=event.value)
        return True

    async def wait_until_settled(self) -> None:
        """
        Attend que la machine soit au repos.

        Retourne quand aucun effet n'est en vol, que les effets expires ont
        termine leur travail et que les notifications d'erreurs sont terminees.

        Raises:
            WorkflowHaltedError: Si une faute interne a arrete la machine
        """
        while True:
            task = self._effect_task
            if task is not None and not task.done():
                await asyncio.wait({task})
                continue
            pending = self._pending_background()
            if pending:
                await asyncio.wait(pending)
                continue
            break

        if self._fault is not None:
            raise WorkflowHaltedError(
                f"Workflow {self._name} arrete dans l'etat {self._state.value}"
            ) from self._fault

    async def run_cycle(self) -> WorkflowState:
        """
        Lance un cycle complet et attend sa fin.

        Si la machine n'est pas dans l'etat idle, START_SCAN est ignore et la
        methode attend simplement le repos.

        Returns:
            Etat de repos atteint (IDLE en cas de succes, REPORTING_ERRORS sinon)
        """
        self.send(WorkflowEvent.START_SCAN)
        await self.wait_until_settled()
        return self._state

    async def aclose(self) -> None:
        """
        Arrete l'orchestrateur.

        Annule l'effet en vol (son resultat est ignore), attend la fin des
        notifications et des effets expires, puis refuse tout nouvel evenement.
        """
        if self._closed:
            return
        self._closed = True
        self._generation += 1
        self._queued_events.clear()

        task, self._effect_task = self._effect_task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})

        pending = self._pending_background()
        if pending:
            await asyncio.wait(pending)
        self._log.debug("Orchestrateur ferme dans l'etat {}", self._state.value)

    async def __aenter__(self) -> "WorkflowOrchestrator":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # Transitions

    def _apply(self, transition: Transition, cause: str) -> None:
        """
        Applique une transition puis traite les evenements mis en file.

        Les evenements envoyes par les observateurs pendant la transition ne
        sont traites qu'une fois celle-ci publiee a tous les observateurs.
        """
        self._dispatching = True
        try:
            self._enter(transition, cause)
        finally:
            self._dispatching = False

        while self._queued_events and not self._closed and self._fault is None:
            self._dispatch(self._queued_events.popleft())

    def _enter(self, transition: Transition, cause: str) -> None:
        """Change d'etat et execute l'action d'entree du nouvel etat."""
        target = transition.target
        loop = None
        if target in EFFECT_STATES or target is WorkflowState.REPORTING_ERRORS:
            # Leve RuntimeError hors boucle, avant toute modification de l'etat
            loop = asyncio.get_running_loop()

        previous = self._state
        self._state = target
        self._context = transition.context
        self._generation += 1
        self._effect_task = None

        self._log.bind(context=transition.context.as_dict()).debug(
            "Transition {} -> {} ({})", previous.value, target.value, cause
        )

        if target is WorkflowState.REPORTING_ERRORS:
            self._schedule_notification(loop)
        elif target is WorkflowState.IDLE and previous is WorkflowState.MOVING_FILES:
            self._log.info(
                "Cycle termine: {} fichier(s) deplace(s) vers {}",
                len(transition.context.dirs_to_move),
                transition.context.destination_path,
            )

        if target in EFFECT_STATES:
            self._start_effect(loop, target)

        self._publish(target, transition.context)

    def _publish(self, state: WorkflowState, context: WorkflowContext) -> None:
        for listener in list(self._listeners):
            try:
                listener(state, context)
            except Exception:
                self._log.exception("Erreur dans un observateur du workflow")

    def _halt(self, state: WorkflowState, fault: BaseException) -> None:
        """Arrete la machine sur une faute interne, sans transition."""
        self._fault = fault
        self._log.opt(exception=fault).error(
            "Faute interne, workflow arrete dans l'etat {}", state.value
        )

    # Effets

    def _effect_for(
        self, state: WorkflowState, context: WorkflowContext
    ) -> Callable[[], Awaitable[Any]]:
        """Retourne l'effet de l'etat, avec la projection du contexte capturee a l'entree."""
        if state is WorkflowState.SCANNING:
            base_path = context.base_path
            return lambda: self._scanner.scan_directories(base_path)
        if state is WorkflowState.CHECKING_FILE_PERMISSIONS:
            directories = list(context.directories_to_check)
            return lambda: self._permission_checker.check_file_permissions(directories)
        if state is WorkflowState.EVALUATING_FILES:
            directories = list(context.dirs_to_evaluate)
            accepted = context.accepted_file_types
            return lambda: self._evaluator.evaluate_files(directories, accepted)
        if state is WorkflowState.MOVING_FILES:
            files = list(context.dirs_to_move)
            destination = context.destination_path
            return lambda: self._mover.move_files(files, destination)
        raise ValueError(f"Aucun effet associe a l'etat {state.value}")

    def _start_effect(self, loop: asyncio.AbstractEventLoop, state: WorkflowState) -> None:
        effect = self._effect_for(state, self._context)
        self._effect_task = loop.create_task(
            self._run_effect(self._generation, state, effect),
            name=f"{self._name}:{state.value}",
        )

    async def _run_effect(
        self,
        generation: int,
        state: WorkflowState,
        effect: Callable[[], Awaitable[Any]],
    ) -> None:
        self._log.debug("Effet demarre: {}", state.value)
        try:
            work = asyncio.ensure_future(effect())
        except Exception as error:
            self._settle_error(generation, state, error)
            return

        try:
            done, _ = await asyncio.wait({work}, timeout=self._effect_timeout)
        except asyncio.CancelledError:
            work.cancel()
            self._log.debug("Effet annule: {}", state.value)
            raise

        if not done:
            # Le travail continue (thread non interruptible) : suivi jusqu'a sa fin
            self._track_expired(work, state)
            self._settle_error(
                generation,
                state,
                asyncio.TimeoutError(f"delai de {self._effect_timeout}s depasse"),
            )
            return

        try:
            output = work.result()
        except Exception as error:
            self._settle_error(generation, state, error)
        else:
            self._settle_done(generation, state, output)

    def _track_expired(self, work: asyncio.Future, state: WorkflowState) -> None:
        self._expired_effects.add(work)

        def forget(finished: asyncio.Future) -> None:
            self._expired_effects.discard(finished)
            error = None if finished.cancelled() else finished.exception()
            self._log.debug(
                "Effet expire termine: {} ({})", state.value, repr(error) if error else "ok"
            )

        work.add_done_callback(forget)

    def _is_current(self, generation: int, state: WorkflowState) -> bool:
        """Verifie que le resultat appartient a l'occupation courante de l'etat."""
        if self._closed or generation != self._generation or state is not self._state:
            self._log.debug("Resultat obsolete ignore: {}", state.value)
            return False
        return True

    def _settle_done(self, generation: int, state: WorkflowState, output: Any) -> None:
        if not self._is_current(generation, state):
            return
        try:
            transition = on_effect_done(state, self._context, output)
        except Exception as fault:
            self._halt(state, fault)
            return
        self._apply(transition, cause="succes")

    def _settle_error(
        self, generation: int, state: WorkflowState, error: BaseException
    ) -> None:
        if not self._is_current(generation, state):
            return
        try:
            transition = on_effect_error(state, self._context, error)
        except Exception as fault:
            self._halt(state, fault)
            return
        self._last_error = f"{state.value}: {error!r}"
        self._log.warning("Echec de l'etape {}: {!r}", state.value, error)
        self._apply(transition, cause="echec")

    # Notification

    def _schedule_notification(self, loop: asyncio.AbstractEventLoop) -> None:
        """Action d'entree de ReportingErrors : une notification par entree."""
        dirs_to_report = list(self._context.dirs_to_report)
        task = loop.create_task(
            self._notify(dirs_to_report), name=f"{self._name}:notify"
        )
        self._notification_tasks.add(task)
        task.add_done_callback(self._notification_tasks.discard)

    async def _notify(self, dirs_to_report: list[str]) -> None:
        try:
            await self._notifier.notify(dirs_to_report)
        except Exception:
            self._log.exception("Echec de la notification des erreurs")
