"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the selector chrome: title, rows, match
highlights, the create row, and the delete prompt.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    title: str
    query: str
    cursor_marker: str
    entry_selected: str
    match_highlight: str
    age: str
    create_row: str
    danger: str
    prompt: str
    confirm_text: str
    help_key: str
    help_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    title="\033[1;38;5;205m",
    query="\033[1;38;5;213m",
    cursor_marker="\033[1;38;5;86m",
    entry_selected="\033[1m",
    match_highlight="\033[1;38;5;229m",
    age="\033[38;5;241m",
    create_row="\033[38;5;42m",
    danger="\033[1;38;5;196m",
    prompt="\033[38;5;220m",
    confirm_text="\033[1;38;5;213m",
    help_key="\033[38;5;229m",
    help_dim="\033[38;5;241m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    title="\033[1;38;5;45m",
    query="\033[1;38;5;153m",
    cursor_marker="\033[1;38;5;39m",
    entry_selected="\033[1m",
    match_highlight="\033[1;38;5;117m",
    age="\033[2;38;5;110m",
    create_row="\033[38;5;84m",
    danger="\033[1;38;5;203m",
    prompt="\033[38;5;215m",
    confirm_text="\033[1;38;5;153m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    title="",
    query="",
    cursor_marker="",
    entry_selected="",
    match_highlight="",
    age="",
    create_row="",
    danger="",
    prompt="",
    confirm_text="",
    help_key="",
    help_dim="",
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
