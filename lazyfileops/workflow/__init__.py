"""Navigation/selection workflow core.

Pure state: no terminal or subprocess access happens in this package beyond
the injected lister and executor.
"""

from __future__ import annotations

from .context import WorkflowContext, initial_context
from .machine import DEFAULT_RESULT_DELAY_SECONDS, Executor, Transition, WorkflowMachine
from .navigation import NavigationState, ascend, descend, load_navigation, move_cursor
from .selection import SelectionSet, selected_paths, toggle
from .types import (
    ACTION_CHOICES,
    ActionKind,
    EventKind,
    ExecutionOutcome,
    NO_SELECTION_MESSAGE,
    QuitSession,
    RunExecution,
    ScheduleQuit,
    Screen,
)
from .view import EntryView, ScreenView, build_view

__all__ = [
    "ACTION_CHOICES",
    "ActionKind",
    "DEFAULT_RESULT_DELAY_SECONDS",
    "EntryView",
    "EventKind",
    "ExecutionOutcome",
    "Executor",
    "NO_SELECTION_MESSAGE",
    "NavigationState",
    "QuitSession",
    "RunExecution",
    "ScheduleQuit",
    "Screen",
    "ScreenView",
    "SelectionSet",
    "Transition",
    "WorkflowContext",
    "WorkflowMachine",
    "ascend",
    "build_view",
    "descend",
    "initial_context",
    "load_navigation",
    "move_cursor",
    "selected_paths",
    "toggle",
]
