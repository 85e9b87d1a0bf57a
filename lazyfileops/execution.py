"""Boundary that turns a chosen action into one external file-operation command.

This is the only module that mutates the filesystem. Failures of any kind are
folded into an ``ExecutionOutcome`` and never raised to the caller.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from .errors import ExecutionError
from .workflow.types import ActionKind, ExecutionOutcome

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess[str]]


def build_command(
    action: ActionKind,
    sources: Sequence[Path],
    destination: Path | None,
) -> list[str]:
    """Return argv for ``action``.

    Copy and Move need a destination; Remove ignores it.
    """
    if not sources:
        raise ExecutionError("no source paths given")
    source_args = [os.fspath(path) for path in sources]
    if not action.requires_destination:
        return ["rm", "-rf", *source_args]
    if destination is None:
        raise ExecutionError(f"{action.value} requires a destination directory")
    if action is ActionKind.COPY:
        return ["cp", "-r", *source_args, os.fspath(destination)]
    return ["mv", *source_args, os.fspath(destination)]


class ExecutionAdapter:
    """Run copy/move/remove through the system ``cp``/``mv``/``rm`` tools."""

    def __init__(self, runner: Runner | None = None) -> None:
        self._runner = runner if runner is not None else subprocess.run

    def run(
        self,
        action: ActionKind,
        sources: Sequence[Path],
        destination: Path | None,
    ) -> ExecutionOutcome:
        try:
            argv = build_command(action, sources, destination)
        except ExecutionError as exc:
            logger.warning("%s not run: %s", action.value, exc)
            return ExecutionOutcome(succeeded=False, message=str(exc))

        logger.info("running %s", shlex.join(argv))
        try:
            proc = self._runner(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.warning("%s failed to start: %s", argv[0], exc)
            return ExecutionOutcome(succeeded=False, message=str(exc))

        output = proc.stdout or ""
        if proc.returncode != 0:
            logger.warning("%s exited with status %d", argv[0], proc.returncode)
            return ExecutionOutcome(
                succeeded=False,
                message=f"exit status {proc.returncode}",
                output=output,
            )
        logger.info("%s completed", action.value)
        return ExecutionOutcome(succeeded=True, message="", output=output)


__all__ = [
    "ExecutionAdapter",
    "Runner",
    "build_command",
]
