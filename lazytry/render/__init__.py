"""Screen rendering for the selector.

Rendering reads a frozen snapshot of the selector and returns rows; it never
touches the controller, so it is safe to call as often as the loop likes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..ranking import ScoredEntry
from ..selector.state import MODE_CONFIRMING_DELETE
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import clip_ansi_line, display_width
from .help import BROWSING_HINTS, CONFIRM_DELETE_HINTS, format_hints

CURSOR_MARKER = "→ "
ROW_INDENT = "  "
CREATE_LABEL = "+ Create new"
CHROME_ROWS = 3


@dataclass(frozen=True)
class RenderContext:
    """Everything the renderer needs for one frame."""

    mode: str
    query: str
    cursor: int
    filtered: tuple[ScoredEntry, ...]
    delete_target: Path | None
    confirm_buffer: str
    now: datetime
    width: int = 80
    height: int = 24
    theme: UITheme = DEFAULT_THEME

    @classmethod
    def from_selector(cls, selector, width: int, height: int, theme: UITheme = DEFAULT_THEME) -> RenderContext:
        """Snapshot a ``SelectorController`` for rendering."""
        return cls(
            mode=selector.mode,
            query=selector.query,
            cursor=selector.cursor,
            filtered=tuple(selector.filtered),
            delete_target=selector.delete_target,
            confirm_buffer=selector.confirm_buffer,
            now=selector.now,
            width=width,
            height=height,
            theme=theme,
        )


def format_relative_age(then: datetime, now: datetime) -> str:
    """Compact human age such as ``5m ago`` or ``3d ago``."""
    seconds = (now - then).total_seconds()
    if seconds < 60:
        return "just now"
    minutes = int(seconds // 60)
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 7:
        return f"{days}d ago"
    return f"{days // 7}w ago"


def highlight_name(name: str, highlights: tuple[int, ...], theme: UITheme, base_style: str = "") -> str:
    """Style matched character offsets of ``name``."""
    marked = set(highlights)
    out: list[str] = [base_style]
    for idx, ch in enumerate(name):
        if idx in marked:
            out.append(f"{theme.match_highlight}{ch}{theme.reset}{base_style}")
        else:
            out.append(ch)
    out.append(theme.reset)
    return "".join(out)


def list_window(cursor: int, total: int, rows: int) -> tuple[int, int]:
    """Return ``(start, end)`` of entry rows to draw so the cursor stays visible."""
    rows = max(1, rows)
    if total <= rows:
        return 0, total
    start = 0
    if cursor >= rows:
        start = min(cursor, total) - rows + 1
    start = max(0, min(start, total - rows))
    return start, start + rows


def _entry_row(scored: ScoredEntry, selected: bool, context: RenderContext) -> str:
    theme = context.theme
    prefix = f"{theme.cursor_marker}{CURSOR_MARKER}{theme.reset}" if selected else ROW_INDENT
    base_style = theme.entry_selected if selected else ""
    name = highlight_name(scored.name, scored.highlights, theme, base_style)
    age = format_relative_age(scored.entry.touched, context.now)
    left = f"{prefix}{name}"
    gap = context.width - display_width(left) - len(age) - 1
    if gap < 1:
        return left
    return f"{left}{' ' * gap}{theme.age}{age}{theme.reset}"


def _render_browsing(context: RenderContext) -> list[str]:
    theme = context.theme
    rows = [f"{theme.title}try » {theme.reset}{theme.query}{context.query}{theme.reset}"]

    total = len(context.filtered)
    start, end = list_window(context.cursor, total, context.height - CHROME_ROWS)
    for idx in range(start, end):
        rows.append(_entry_row(context.filtered[idx], idx == context.cursor, context))

    label = CREATE_LABEL
    if context.query:
        label += f": {context.query}"
    prefix = ROW_INDENT
    if context.cursor == total:
        prefix = f"{theme.cursor_marker}{CURSOR_MARKER}{theme.reset}"
    rows.append(f"{prefix}{theme.create_row}{label}{theme.reset}")
    rows.append(format_hints(BROWSING_HINTS, theme))
    return rows


def _render_confirm_delete(context: RenderContext) -> list[str]:
    theme = context.theme
    target = context.delete_target.name if context.delete_target is not None else ""
    return [
        f"{theme.danger}Delete try: {target}{theme.reset}",
        f"{theme.prompt}Type YES to confirm: {theme.reset}{theme.confirm_text}{context.confirm_buffer}{theme.reset}",
        format_hints(CONFIRM_DELETE_HINTS, theme),
    ]


def render_selector(context: RenderContext) -> list[str]:
    """Return styled screen rows for the current selector state."""
    if context.mode == MODE_CONFIRMING_DELETE:
        rows = _render_confirm_delete(context)
    else:
        rows = _render_browsing(context)
    return [clip_ansi_line(row, context.width) for row in rows]


def render_frame(context: RenderContext) -> str:
    """Full-screen frame: home cursor, draw rows, clear what is left below."""
    rows = render_selector(context)
    body = "\x1b[K\r\n".join(rows)
    return f"\x1b[H{body}\x1b[K\x1b[J"


__all__ = [
    "RenderContext",
    "format_relative_age",
    "highlight_name",
    "list_window",
    "render_frame",
    "render_selector",
]
