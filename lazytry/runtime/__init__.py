"""Public runtime entry points.

``run_selector`` lists the catalog, builds the controller, and drives the
interactive loop on the real terminal.
"""

from __future__ import annotations

import sys
import termios
from pathlib import Path
from typing import TYPE_CHECKING

from ..ui_theme import DEFAULT_THEME, UITheme

if TYPE_CHECKING:
    from ..selector import SelectorResult


def run_selector(
    root: Path,
    initial_query: str = "",
    theme: UITheme = DEFAULT_THEME,
    stdin_fd: int | None = None,
    screen_fd: int | None = None,
) -> SelectorResult:
    """Run one interactive selection over the tries under ``root``.

    The catalog is listed before the terminal is touched, so a listing failure
    raises ``CatalogError`` without drawing anything.
    """
    from ..catalog import list_entries
    from ..selector import SelectorController
    from .loop import run_main_loop
    from .terminal import TerminalController

    entries = list_entries(root)
    selector = SelectorController(root, entries, initial_query)
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if screen_fd is None:
        screen_fd = sys.stderr.fileno()
    try:
        terminal = TerminalController(stdin_fd, screen_fd)
    except termios.error as exc:
        raise OSError(f"interactive selector needs a terminal on stdin: {exc}") from exc
    return run_main_loop(selector, terminal, stdin_fd, theme)


__all__ = ["run_selector"]
