"""Display model handed to renderers; no presentation strings are built here."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .context import WorkflowContext
from .selection import is_selected, selected_paths
from .types import ACTION_CHOICES, ActionKind, ExecutionOutcome, Screen


@dataclass(frozen=True)
class EntryView:
    name: str
    is_dir: bool
    size_bytes: int | None
    cursor_here: bool
    selected: bool


@dataclass(frozen=True)
class ScreenView:
    """Everything a renderer needs to draw the current screen."""

    screen: Screen
    action: ActionKind | None
    actions: tuple[ActionKind, ...] = ACTION_CHOICES
    action_cursor: int = 0
    current_path: Path | None = None
    entries: tuple[EntryView, ...] = ()
    selected: tuple[Path, ...] = ()
    destination_path: Path | None = None
    outcome: ExecutionOutcome | None = None


def build_view(context: WorkflowContext) -> ScreenView:
    """Project ``context`` onto the per-screen display model."""
    nav = context.active_nav
    current_path: Path | None = None
    entries: tuple[EntryView, ...] = ()
    if nav is not None:
        current_path = nav.current_path
        marks_selection = context.screen is Screen.CHOOSE_SOURCES
        entries = tuple(
            EntryView(
                name=entry.name,
                is_dir=entry.is_dir,
                size_bytes=entry.size_bytes,
                cursor_here=idx == nav.cursor,
                selected=marks_selection and is_selected(context.selection, nav.current_path / entry.name),
            )
            for idx, entry in enumerate(nav.entries)
        )
    return ScreenView(
        screen=context.screen,
        action=context.action,
        action_cursor=context.action_cursor,
        current_path=current_path,
        entries=entries,
        selected=selected_paths(context.selection),
        destination_path=context.destination_path,
        outcome=context.outcome,
    )


__all__ = [
    "EntryView",
    "ScreenView",
    "build_view",
]
