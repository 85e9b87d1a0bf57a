"""Closed enumerations and small value types for the workflow state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Screen(Enum):
    """Interactive mode the session is currently in."""

    CHOOSE_ACTION = "choose_action"
    CHOOSE_SOURCES = "choose_sources"
    CHOOSE_DESTINATION = "choose_destination"
    CONFIRM_REMOVAL = "confirm_removal"
    EXECUTING = "executing"
    SHOW_RESULT = "show_result"

    @property
    def is_navigation(self) -> bool:
        return self in {Screen.CHOOSE_SOURCES, Screen.CHOOSE_DESTINATION}


class ActionKind(Enum):
    """File operation the session will perform."""

    COPY = "Copy"
    MOVE = "Move"
    REMOVE = "Remove"

    @property
    def requires_destination(self) -> bool:
        return self is not ActionKind.REMOVE


ACTION_CHOICES: tuple[ActionKind, ...] = (ActionKind.COPY, ActionKind.MOVE, ActionKind.REMOVE)


class EventKind(Enum):
    """Abstract input events; key bindings live in the input layer."""

    UP = "up"
    DOWN = "down"
    OPEN = "open"
    BACK = "back"
    TOGGLE = "toggle"
    ADVANCE = "advance"
    CONFIRM = "confirm"
    QUIT = "quit"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class ExecutionOutcome:
    """Final result shown on the result screen.

    ``output`` carries the executor's combined stdout/stderr verbatim.
    """

    succeeded: bool
    message: str
    output: str = ""


NO_SELECTION_MESSAGE = "No files selected."


@dataclass(frozen=True)
class QuitSession:
    """Effect: end the session now."""


@dataclass(frozen=True)
class ScheduleQuit:
    """Effect: end the session after ``delay_seconds`` unless input arrives first."""

    delay_seconds: float


@dataclass(frozen=True)
class RunExecution:
    """Effect: perform the pending file operation on the next step."""


Effect = QuitSession | ScheduleQuit | RunExecution


__all__ = [
    "ACTION_CHOICES",
    "ActionKind",
    "Effect",
    "EventKind",
    "ExecutionOutcome",
    "NO_SELECTION_MESSAGE",
    "QuitSession",
    "RunExecution",
    "ScheduleQuit",
    "Screen",
]
