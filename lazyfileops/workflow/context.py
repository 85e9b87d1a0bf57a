"""The single per-session aggregate threaded through every event handler."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..file_listing import absolute_path
from .navigation import NavigationState
from .selection import SelectionSet
from .types import ActionKind, ExecutionOutcome, Screen


@dataclass(frozen=True)
class WorkflowContext:
    """Immutable snapshot of one interactive session.

    ``dest_nav`` is only populated once the session reaches the destination
    screen; ``destination_path`` is only set when that screen completes.
    """

    start_path: Path
    screen: Screen = Screen.CHOOSE_ACTION
    action: ActionKind | None = None
    action_cursor: int = 0
    source_nav: NavigationState | None = None
    dest_nav: NavigationState | None = None
    selection: SelectionSet = field(default_factory=SelectionSet)
    destination_path: Path | None = None
    outcome: ExecutionOutcome | None = None
    finished: bool = False

    @property
    def active_nav(self) -> NavigationState | None:
        if self.screen is Screen.CHOOSE_SOURCES:
            return self.source_nav
        if self.screen is Screen.CHOOSE_DESTINATION:
            return self.dest_nav
        return None


def initial_context(start_path: Path | str) -> WorkflowContext:
    return WorkflowContext(start_path=absolute_path(start_path))


__all__ = [
    "WorkflowContext",
    "initial_context",
]
