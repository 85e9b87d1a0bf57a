"""Rendering engine for the workflow screens.

Turns a ``ScreenView`` into ANSI lines and writes fully composed frames.
Rendering never mutates workflow state.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from dataclasses import dataclass

from ..ui_theme import UITheme
from ..workflow.types import NO_SELECTION_MESSAGE, Screen
from ..workflow.view import EntryView, ScreenView
from .ansi import clip_ansi_line, sanitize_terminal_text, selected_with_ansi
from .help import help_line

CURSOR_MARKER = "> "
SELECTED_MARKER = "[x] "
UNSELECTED_MARKER = "[ ] "


@dataclass(frozen=True)
class RenderContext:
    view: ScreenView
    theme: UITheme
    width: int
    height: int
    result_delay_seconds: float = 2.0


def format_size(size_bytes: int | None) -> str:
    if size_bytes is None:
        return ""
    noun = "byte" if size_bytes == 1 else "bytes"
    return f" ({size_bytes:,} {noun})"


def format_entry(entry: EntryView, theme: UITheme, show_selection: bool) -> str:
    """Format one file-list row: cursor, checkbox, name, dir tag, size."""
    cursor = f"{theme.cursor}{CURSOR_MARKER}{theme.reset}" if entry.cursor_here else " " * len(CURSOR_MARKER)
    check = ""
    if show_selection:
        check = f"{theme.selected}{SELECTED_MARKER}{theme.reset}" if entry.selected else UNSELECTED_MARKER
    name = sanitize_terminal_text(entry.name)
    if entry.is_dir:
        body = f"{theme.dir}{name}/{theme.reset} {theme.hint}[DIR]{theme.reset}"
    else:
        body = f"{theme.file}{name}{theme.reset}{theme.size}{format_size(entry.size_bytes)}{theme.reset}"
    if entry.cursor_here:
        body = selected_with_ansi(body) if theme.reverse else body
    return f"{cursor}{check}{body}"


def _list_window_start(cursor: int, total: int, rows: int) -> int:
    """First visible row so the cursor stays on screen."""
    if rows <= 0 or total <= rows:
        return 0
    if cursor < rows:
        return 0
    return min(cursor - rows + 1, total - rows)


def _action_menu_lines(view: ScreenView, theme: UITheme) -> list[str]:
    lines = [f"{theme.title}Choose Action{theme.reset}", ""]
    for idx, action in enumerate(view.actions):
        if idx == view.action_cursor:
            lines.append(f"{theme.cursor}{CURSOR_MARKER}{theme.reset}{theme.reverse}{action.value}{theme.reset}")
        else:
            lines.append(f"{' ' * len(CURSOR_MARKER)}{action.value}")
    return lines


def _file_list_lines(view: ScreenView, theme: UITheme, rows: int) -> list[str]:
    choosing_sources = view.screen is Screen.CHOOSE_SOURCES
    action = view.action.value if view.action is not None else ""
    if choosing_sources:
        title = f"{action}: choose files ({len(view.selected)} selected)"
    else:
        title = f"{action} {len(view.selected)} item(s): choose destination directory"
    current = sanitize_terminal_text(str(view.current_path)) if view.current_path is not None else ""
    lines = [
        f"Current Path: {theme.path}{current}{theme.reset}",
        f"{theme.title}{title}{theme.reset}",
        "",
    ]
    if not view.entries:
        lines.append(f"{theme.hint}(empty directory){theme.reset}")
        return lines
    list_rows = max(1, rows - len(lines))
    cursor = next((idx for idx, entry in enumerate(view.entries) if entry.cursor_here), 0)
    start = _list_window_start(cursor, len(view.entries), list_rows)
    for entry in view.entries[start : start + list_rows]:
        lines.append(format_entry(entry, theme, show_selection=choosing_sources))
    return lines


def _confirm_lines(view: ScreenView, theme: UITheme, rows: int) -> list[str]:
    count = len(view.selected)
    lines = [f"{theme.warning}Remove {count} selected item(s)?{theme.reset}", ""]
    shown = view.selected[: max(0, rows - 4)]
    lines.extend(f"  {sanitize_terminal_text(str(path))}" for path in shown)
    if len(shown) < count:
        lines.append(f"  {theme.hint}... and {count - len(shown)} more{theme.reset}")
    lines.extend(["", "Press Enter to confirm removal, or q to cancel."])
    return lines


def _result_lines(view: ScreenView, theme: UITheme, delay_seconds: float) -> list[str]:
    outcome = view.outcome
    lines = [f"{theme.title}== Result =={theme.reset}"]
    if outcome is None:
        return lines
    if outcome.succeeded:
        lines.append(f"{theme.success}Success!{theme.reset}")
    elif outcome.message == NO_SELECTION_MESSAGE:
        lines.append(f"{theme.warning}{outcome.message}{theme.reset}")
    else:
        lines.append(f"{theme.error}Error: {sanitize_terminal_text(outcome.message)}{theme.reset}")
    if outcome.output:
        lines.append("")
        lines.extend(sanitize_terminal_text(line) for line in outcome.output.splitlines())
    lines.extend(["", f"{theme.hint}Exiting in {delay_seconds:g} seconds...{theme.reset}"])
    return lines


def render_screen_lines(context: RenderContext) -> list[str]:
    """Return clipped ANSI lines for the current screen, footer included."""
    view = context.view
    theme = context.theme
    footer = help_line(view.screen, theme)
    body_rows = max(1, context.height - (2 if footer else 0))

    if view.screen is Screen.CHOOSE_ACTION:
        body = _action_menu_lines(view, theme)
    elif view.screen.is_navigation:
        body = _file_list_lines(view, theme, body_rows)
    elif view.screen is Screen.CONFIRM_REMOVAL:
        body = _confirm_lines(view, theme, body_rows)
    elif view.screen is Screen.EXECUTING:
        action = view.action.value if view.action is not None else "operation"
        body = [f"{theme.title}Running {action}...{theme.reset}"]
    else:
        body = _result_lines(view, theme, context.result_delay_seconds)

    lines = body[:body_rows]
    if footer:
        lines.extend([""] * (body_rows - len(lines)))
        lines.extend(["", footer])
    width = max(1, context.width)
    return [clip_ansi_line(line, width) if line else "" for line in lines]


def render_frame(context: RenderContext, write: Callable[[str], None] | None = None) -> None:
    """Clear the screen and draw one full frame."""
    rows: list[str] = []
    for line in render_screen_lines(context):
        rows.append(line + "\033[0m" if "\033" in line else line)
    frame = "\033[H\033[J" + "\r\n".join(rows)
    if write is not None:
        write(frame)
        return
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "format_entry",
    "format_size",
    "render_frame",
    "render_screen_lines",
]
