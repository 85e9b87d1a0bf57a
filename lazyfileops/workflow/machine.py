"""Screen-sequence state machine for the choose/confirm/execute workflow.

Each handler maps ``(WorkflowContext, EventKind)`` to a new context plus a
tuple of follow-up effects. Dispatch goes through a closed table keyed by
``(Screen, EventKind)``; pairs missing from the table are ignored.

Directory listings and the file operation run inline on the caller's thread.
Any listing failure ends the session on the result screen.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Protocol

from ..errors import ListingError
from .context import WorkflowContext
from .navigation import (
    Lister,
    NavigationState,
    ascend,
    current_entry,
    descend,
    entry_path,
    load_navigation,
    move_cursor,
)
from .selection import selected_paths, toggle
from .types import (
    ACTION_CHOICES,
    ActionKind,
    Effect,
    EventKind,
    ExecutionOutcome,
    NO_SELECTION_MESSAGE,
    QuitSession,
    RunExecution,
    ScheduleQuit,
    Screen,
)

logger = logging.getLogger(__name__)

DEFAULT_RESULT_DELAY_SECONDS = 2.0


class Executor(Protocol):
    def run(
        self,
        action: ActionKind,
        sources: Sequence[Path],
        destination: Path | None,
    ) -> ExecutionOutcome: ...


@dataclass(frozen=True)
class Transition:
    """Result of handling one event."""

    context: WorkflowContext
    effects: tuple[Effect, ...] = ()


Handler = Callable[[WorkflowContext], Transition]


class WorkflowMachine:
    """Stateless dispatcher; the caller owns the ``WorkflowContext``."""

    def __init__(
        self,
        lister: Lister,
        executor: Executor,
        result_delay_seconds: float = DEFAULT_RESULT_DELAY_SECONDS,
    ) -> None:
        self.lister = lister
        self.executor = executor
        self.result_delay_seconds = result_delay_seconds
        self._table = self._build_table()

    def _build_table(self) -> dict[tuple[Screen, EventKind], Handler]:
        table: dict[tuple[Screen, EventKind], Handler] = {
            (Screen.CHOOSE_ACTION, EventKind.UP): lambda ctx: self._move_action_cursor(ctx, -1),
            (Screen.CHOOSE_ACTION, EventKind.DOWN): lambda ctx: self._move_action_cursor(ctx, 1),
            (Screen.CHOOSE_ACTION, EventKind.OPEN): self._choose_action,
            (Screen.CHOOSE_ACTION, EventKind.CONFIRM): self._choose_action,
            (Screen.CHOOSE_SOURCES, EventKind.TOGGLE): self._toggle_selection,
            (Screen.CHOOSE_SOURCES, EventKind.ADVANCE): self._finish_sources,
            (Screen.CHOOSE_DESTINATION, EventKind.ADVANCE): self._finish_destination,
            (Screen.CONFIRM_REMOVAL, EventKind.CONFIRM): self._enter_executing,
            (Screen.CONFIRM_REMOVAL, EventKind.OPEN): self._enter_executing,
        }
        for screen in (Screen.CHOOSE_SOURCES, Screen.CHOOSE_DESTINATION):
            table[(screen, EventKind.UP)] = lambda ctx: self._move_nav_cursor(ctx, -1)
            table[(screen, EventKind.DOWN)] = lambda ctx: self._move_nav_cursor(ctx, 1)
            table[(screen, EventKind.OPEN)] = self._open_entry
            table[(screen, EventKind.BACK)] = self._go_up
        for screen in Screen:
            if screen not in {Screen.EXECUTING, Screen.SHOW_RESULT}:
                table[(screen, EventKind.QUIT)] = self._quit
        for event in EventKind:
            table[(Screen.SHOW_RESULT, event)] = self._quit
        return table

    def handle(self, context: WorkflowContext, event: EventKind) -> Transition:
        """Apply ``event`` to ``context`` and return the follow-up transition."""
        if context.finished:
            return Transition(context)
        handler = self._table.get((context.screen, event))
        if handler is None:
            return Transition(context)
        try:
            transition = handler(context)
        except ListingError as exc:
            transition = self._listing_failed(context, exc)
        if transition.context.screen is not context.screen:
            logger.debug(
                "screen %s -> %s on %s",
                context.screen.value,
                transition.context.screen.value,
                event.value,
            )
        return transition

    def execute(self, context: WorkflowContext) -> Transition:
        """Run the pending file operation once and move to the result screen."""
        if context.screen is not Screen.EXECUTING or context.action is None:
            return Transition(context)
        sources = selected_paths(context.selection)
        if not sources:
            return self._nothing_selected(context)
        outcome = self.executor.run(context.action, sources, context.destination_path)
        return self._show_result(context, outcome)

    def _move_action_cursor(self, context: WorkflowContext, delta: int) -> Transition:
        cursor = max(0, min(len(ACTION_CHOICES) - 1, context.action_cursor + delta))
        return Transition(replace(context, action_cursor=cursor))

    def _choose_action(self, context: WorkflowContext) -> Transition:
        action = ACTION_CHOICES[context.action_cursor]
        source_nav = load_navigation(context.start_path, self.lister)
        logger.info("action %s chosen, browsing %s", action.value, source_nav.current_path)
        return Transition(
            replace(
                context,
                action=action,
                source_nav=source_nav,
                screen=Screen.CHOOSE_SOURCES,
            )
        )

    def _with_active_nav(self, context: WorkflowContext, nav: NavigationState) -> WorkflowContext:
        if context.screen is Screen.CHOOSE_SOURCES:
            return replace(context, source_nav=nav)
        return replace(context, dest_nav=nav)

    def _move_nav_cursor(self, context: WorkflowContext, delta: int) -> Transition:
        nav = context.active_nav
        if nav is None:
            return Transition(context)
        return Transition(self._with_active_nav(context, move_cursor(nav, delta)))

    def _open_entry(self, context: WorkflowContext) -> Transition:
        nav = context.active_nav
        entry = current_entry(nav) if nav is not None else None
        if entry is None or not entry.is_dir:
            return Transition(context)
        return Transition(self._with_active_nav(context, descend(nav, entry.name, self.lister)))

    def _go_up(self, context: WorkflowContext) -> Transition:
        nav = context.active_nav
        if nav is None:
            return Transition(context)
        return Transition(self._with_active_nav(context, ascend(nav, self.lister)))

    def _toggle_selection(self, context: WorkflowContext) -> Transition:
        nav = context.source_nav
        entry = current_entry(nav) if nav is not None else None
        if entry is None:
            return Transition(context)
        path = entry_path(nav, entry.name)
        return Transition(replace(context, selection=toggle(context.selection, path)))

    def _finish_sources(self, context: WorkflowContext) -> Transition:
        if context.action is ActionKind.REMOVE:
            return Transition(replace(context, screen=Screen.CONFIRM_REMOVAL))
        if not selected_paths(context.selection):
            return self._nothing_selected(context)
        # Destination browsing always restarts at the session's start directory.
        dest_nav = load_navigation(context.start_path, self.lister)
        return Transition(replace(context, dest_nav=dest_nav, screen=Screen.CHOOSE_DESTINATION))

    def _finish_destination(self, context: WorkflowContext) -> Transition:
        if context.dest_nav is None:
            return Transition(context)
        chosen = replace(context, destination_path=context.dest_nav.current_path)
        return self._enter_executing(chosen)

    def _enter_executing(self, context: WorkflowContext) -> Transition:
        return Transition(replace(context, screen=Screen.EXECUTING), (RunExecution(),))

    def _show_result(self, context: WorkflowContext, outcome: ExecutionOutcome) -> Transition:
        return Transition(
            replace(context, screen=Screen.SHOW_RESULT, outcome=outcome),
            (ScheduleQuit(self.result_delay_seconds),),
        )

    def _nothing_selected(self, context: WorkflowContext) -> Transition:
        logger.info("%s skipped: nothing selected", context.action.value)
        return self._show_result(context, ExecutionOutcome(succeeded=False, message=NO_SELECTION_MESSAGE))

    def _listing_failed(self, context: WorkflowContext, error: ListingError) -> Transition:
        return self._show_result(context, ExecutionOutcome(succeeded=False, message=str(error)))

    def _quit(self, context: WorkflowContext) -> Transition:
        return Transition(replace(context, finished=True), (QuitSession(),))


__all__ = [
    "DEFAULT_RESULT_DELAY_SECONDS",
    "Executor",
    "Transition",
    "WorkflowMachine",
]
