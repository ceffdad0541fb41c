"""ANSI palettes for listing output.

Themes only color listing rows and titles; with ``no_color`` every escape is
dropped.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by listing renderers."""

    name: str
    reset: str
    title: str
    row_marker: str
    row_go_up: str
    row_dir: str
    row_group: str
    row_file: str
    row_badge: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;38;5;81m",
    row_marker="\033[38;5;44m",
    row_go_up="\033[2;38;5;250m",
    row_dir="\033[1;34m",
    row_group="\033[1;38;5;214m",
    row_file="\033[38;5;252m",
    row_badge="\033[38;5;109m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    row_marker="\033[38;5;39m",
    row_go_up="\033[2;38;5;110m",
    row_dir="\033[1;38;5;45m",
    row_group="\033[1;38;5;117m",
    row_file="\033[38;5;252m",
    row_badge="\033[38;5;73m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    row_marker="",
    row_go_up="",
    row_dir="",
    row_group="",
    row_file="",
    row_badge="",
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
