"""Composition root for one interactive session.

Builds the lister, executor, machine, and session, then hands control to the
event loop inside a raw-mode terminal.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..execution import ExecutionAdapter
from ..file_listing import DirectoryLister
from ..render import RenderContext, render_frame
from ..ui_theme import resolve_theme
from ..workflow import DEFAULT_RESULT_DELAY_SECONDS, WorkflowMachine, build_view, initial_context
from .loop import RuntimeLoopCallbacks, run_main_loop
from .session import WorkflowSession
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_session(
    start_path: Path,
    result_delay_seconds: float = DEFAULT_RESULT_DELAY_SECONDS,
    lister=None,
    executor=None,
) -> WorkflowSession:
    """Wire a fresh session rooted at ``start_path``."""
    machine = WorkflowMachine(
        lister=lister if lister is not None else DirectoryLister(),
        executor=executor if executor is not None else ExecutionAdapter(),
        result_delay_seconds=result_delay_seconds,
    )
    return WorkflowSession(machine, initial_context(start_path))


def run_app(
    start_path: Path,
    theme_name: str | None = None,
    no_color: bool = False,
    result_delay_seconds: float = DEFAULT_RESULT_DELAY_SECONDS,
) -> int:
    """Run the interactive workflow and return the process exit code.

    Raises ``termios.error`` when stdin is not a terminal.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    theme = resolve_theme(theme_name, no_color=no_color)
    session = build_session(start_path, result_delay_seconds)
    logger.info("session started in %s", session.context.start_path)

    def render(current: WorkflowSession, columns: int, lines: int) -> None:
        render_frame(
            RenderContext(
                view=build_view(current.context),
                theme=theme,
                width=columns,
                height=lines,
                result_delay_seconds=result_delay_seconds,
            ),
            write=terminal.write,
        )

    run_main_loop(session, terminal, stdin_fd, RuntimeLoopCallbacks(render=render))
    outcome = session.context.outcome
    if outcome is not None:
        logger.info("session ended: succeeded=%s %s", outcome.succeeded, outcome.message)
    else:
        logger.info("session ended without running an action")
    return 0


__all__ = [
    "build_session",
    "run_app",
]
