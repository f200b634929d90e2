"""Interactive event loop for the selector.

Draws a frame whenever something changed, then blocks for the next key and
hands it to the controller. Each key is fully applied before the next read.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from ..input import KEY_EOF, read_key
from ..render import RenderContext, render_frame
from ..selector import SelectorController, SelectorResult
from ..ui_theme import DEFAULT_THEME, UITheme
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    resize_poll_ms: int = 200


def screen_size(fd: int, fallback: tuple[int, int] = (80, 24)) -> tuple[int, int]:
    """Return ``(columns, lines)`` of the terminal behind ``fd``."""
    try:
        size = os.get_terminal_size(fd)
    except OSError:
        return fallback
    return size.columns, size.lines


def normalize_key(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Fold terminal-specific tokens into controller events.

    Returns ``(event, skip_next_lf)``; ``event`` is ``None`` when the token
    should be dropped (the LF half of a CR/LF pair).
    """
    if skip_next_lf and key == "ENTER_LF":
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    if key == KEY_EOF:
        return "CTRL_C", False
    return key, False


def run_main_loop(
    selector: SelectorController,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme = DEFAULT_THEME,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
    read: Callable[..., str] = read_key,
) -> SelectorResult:
    """Run the selector until it produces a result and return that result."""
    dirty = True
    last_size: tuple[int, int] | None = None
    skip_next_lf = False

    with terminal.raw_mode():
        while not selector.done:
            size = screen_size(terminal.screen_fd)
            if size != last_size:
                last_size = size
                dirty = True
            if dirty:
                context = RenderContext.from_selector(selector, size[0], size[1], theme)
                terminal.write(render_frame(context))
                dirty = False

            try:
                key = read(stdin_fd, timeout_ms=timing.resize_poll_ms)
            except KeyboardInterrupt:
                key = "CTRL_C"
            if key == "":
                continue

            event, skip_next_lf = normalize_key(key, skip_next_lf)
            if event is None:
                continue
            selector.handle_key(event)
            dirty = True

    logger.debug("selector result: %s", selector.result.kind)
    return selector.result
