"""Main interactive event loop for the terminal UI.

One key is read, translated, and fully processed before the next is read.
The loop is wiring only: transitions live in the workflow machine.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import EOF_TOKEN, event_for_key, read_key
from ..workflow import EventKind
from .session import WorkflowSession

IDLE_POLL_MS = 250


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``.

    ``render`` draws one frame for the given terminal ``(columns, lines)``.
    ``read_key`` defaults to the raw stdin decoder.
    """

    render: Callable[[WorkflowSession, int, int], None]
    read_key: Callable[[int, int | None], str] = read_key


def _poll_timeout_ms(session: WorkflowSession) -> int:
    remaining = session.seconds_until_deadline()
    if remaining is None:
        return IDLE_POLL_MS
    return max(0, min(IDLE_POLL_MS, int(remaining * 1000)))


def run_main_loop(
    session: WorkflowSession,
    terminal,
    stdin_fd: int,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive loop until the session finishes.

    Each iteration renders when dirty, performs a pending file operation
    after its "running" frame is shown, and waits for a key no longer than
    the pending result-screen deadline.
    """
    skip_next_lf = False
    with terminal.raw_mode():
        while not session.finished:
            if session.dirty:
                term = shutil.get_terminal_size((80, 24))
                callbacks.render(session, term.columns, term.lines)
                session.dirty = False

            if session.pending_execution:
                session.run_pending_execution()
                continue

            try:
                raw_key = callbacks.read_key(stdin_fd, _poll_timeout_ms(session))
            except KeyboardInterrupt:
                session.dispatch(EventKind.QUIT)
                continue

            if raw_key == EOF_TOKEN:
                # stdin closed: no further input can arrive.
                session.dispatch(EventKind.QUIT)
                break

            if raw_key == "":
                session.expire_deadline()
                continue

            if skip_next_lf and raw_key == "ENTER_LF":
                skip_next_lf = False
                continue
            skip_next_lf = raw_key == "ENTER_CR"
            key = "ENTER" if raw_key in {"ENTER_CR", "ENTER_LF"} else raw_key
            event = event_for_key(session.context.screen, key)
            if event is not None:
                session.dispatch(event)


__all__ = [
    "IDLE_POLL_MS",
    "RuntimeLoopCallbacks",
    "run_main_loop",
]
