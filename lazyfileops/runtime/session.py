"""Owner of the single live ``WorkflowContext`` and its follow-up effects.

The session applies events through the machine and interprets the effects it
returns. The result-screen timer and user input both feed the same quit path:
whichever reaches ``dispatch`` first ends the session.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..workflow import (
    EventKind,
    QuitSession,
    RunExecution,
    ScheduleQuit,
    Transition,
    WorkflowContext,
    WorkflowMachine,
)

logger = logging.getLogger(__name__)


class WorkflowSession:
    """Mutable shell around immutable workflow contexts."""

    def __init__(
        self,
        machine: WorkflowMachine,
        context: WorkflowContext,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.machine = machine
        self.context = context
        self._clock = clock
        self.quit_deadline: float | None = None
        self.pending_execution = False
        self.dirty = True

    @property
    def finished(self) -> bool:
        return self.context.finished

    def dispatch(self, event: EventKind) -> None:
        """Apply one input event."""
        self._apply(self.machine.handle(self.context, event))

    def run_pending_execution(self) -> None:
        """Perform the file operation requested by the last transition, if any."""
        if not self.pending_execution:
            return
        self.pending_execution = False
        self._apply(self.machine.execute(self.context))

    def seconds_until_deadline(self) -> float | None:
        if self.quit_deadline is None:
            return None
        return max(0.0, self.quit_deadline - self._clock())

    def expire_deadline(self) -> bool:
        """Fire the result-screen timeout when its deadline has passed."""
        if self.finished or self.quit_deadline is None:
            return False
        if self._clock() < self.quit_deadline:
            return False
        self.quit_deadline = None
        self.dispatch(EventKind.TIMEOUT)
        return True

    def _apply(self, transition: Transition) -> None:
        if transition.context != self.context:
            self.dirty = True
        self.context = transition.context
        for effect in transition.effects:
            if isinstance(effect, RunExecution):
                self.pending_execution = True
            elif isinstance(effect, ScheduleQuit):
                self.quit_deadline = self._clock() + max(0.0, effect.delay_seconds)
            elif isinstance(effect, QuitSession):
                self.quit_deadline = None
                self.pending_execution = False
                logger.debug("session finished on %s", self.context.screen.value)


__all__ = [
    "WorkflowSession",
]
