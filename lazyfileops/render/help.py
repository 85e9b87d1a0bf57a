"""Contextual key-hint footer text per screen."""

from __future__ import annotations

from ..ui_theme import UITheme
from ..workflow.types import Screen

_HINTS: dict[Screen, tuple[tuple[str, str], ...]] = {
    Screen.CHOOSE_ACTION: (
        ("↑/↓", "choose"),
        ("Enter", "select"),
        ("q", "quit"),
    ),
    Screen.CHOOSE_SOURCES: (
        ("↑/↓", "navigate"),
        ("Space", "select"),
        ("→/Enter", "open"),
        ("←/Backspace", "up"),
        ("Tab", "proceed"),
        ("q", "quit"),
    ),
    Screen.CHOOSE_DESTINATION: (
        ("↑/↓", "navigate"),
        ("→/Enter", "open"),
        ("←/Backspace", "up"),
        ("Tab", "confirm destination"),
        ("q", "quit"),
    ),
    Screen.CONFIRM_REMOVAL: (
        ("Enter", "confirm removal"),
        ("q/Esc", "cancel"),
    ),
    Screen.SHOW_RESULT: (("any key", "exit now"),),
}


def help_line(screen: Screen, theme: UITheme) -> str:
    """Return the themed one-line key hint for ``screen`` ("" when none)."""
    hints = _HINTS.get(screen, ())
    return "  ".join(
        f"{theme.path}{key}{theme.reset} {theme.hint}{label}{theme.reset}"
        for key, label in hints
    )


__all__ = [
    "help_line",
]
