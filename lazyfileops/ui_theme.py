"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the screen chrome and file lists.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    title: str
    path: str
    cursor: str
    selected: str
    dir: str
    file: str
    size: str
    hint: str
    success: str
    error: str
    warning: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    title="\033[1;38;5;81m",
    path="\033[38;5;229m",
    cursor="\033[38;5;44m",
    selected="\033[38;5;42m",
    dir="\033[1;34m",
    file="\033[38;5;252m",
    size="\033[38;5;109m",
    hint="\033[2;38;5;250m",
    success="\033[1;38;5;42m",
    error="\033[1;38;5;203m",
    warning="\033[1;38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    title="\033[1;38;5;45m",
    path="\033[38;5;153m",
    cursor="\033[38;5;39m",
    selected="\033[38;5;84m",
    dir="\033[1;38;5;45m",
    file="\033[38;5;252m",
    size="\033[38;5;73m",
    hint="\033[2;38;5;110m",
    success="\033[1;38;5;84m",
    error="\033[1;38;5;210m",
    warning="\033[1;38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    title="",
    path="",
    cursor="",
    selected="",
    dir="",
    file="",
    size="",
    hint="",
    success="",
    error="",
    warning="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
