"""Key-hint footer content for each selector mode.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..ui_theme import UITheme

BROWSING_HINTS: tuple[tuple[str, str], ...] = (
    ("↑/ctrl+p", "up"),
    ("↓/ctrl+n", "down"),
    ("enter", "select"),
    ("ctrl+d", "delete"),
    ("esc", "cancel"),
)

CONFIRM_DELETE_HINTS: tuple[tuple[str, str], ...] = (
    ("YES", "confirm delete"),
    ("backspace", "erase"),
    ("esc", "back"),
)


def format_hints(hints: tuple[tuple[str, str], ...], theme: UITheme) -> str:
    """Join ``(key, action)`` pairs into one styled footer row."""
    parts = [
        f"{theme.help_key}{key}{theme.reset} {theme.help_dim}{action}{theme.reset}" for key, action in hints
    ]
    separator = f" {theme.help_dim}•{theme.reset} "
    return separator.join(parts)


def help_text(prog: str = "try", version: str = "") -> str:
    """Plain-language usage text printed by ``--help``."""
    title = f"{prog} v{version}" if version else prog
    return f"""{title} - ephemeral workspace manager

Usage:
  {prog} [query]           Interactive directory selector
  {prog} clone <url>       Clone repo into dated directory
  {prog} init [path]       Output shell function definition
  {prog} --help            Show this help

Environment:
  TRY_PATH          Tries directory (default: ~/src/tries)

Keyboard:
  ↑/↓, Ctrl-P/N     Navigate
  Enter              Select / Create new
  Ctrl-D             Delete selected try (confirm with YES)
  Backspace          Delete character
  Esc                Cancel
"""
