"""Naming helpers for freshly created tries."""

from __future__ import annotations

from datetime import date
from pathlib import Path

DEFAULT_TRY_NAME = "new-try"


def sanitize_name(name: str) -> str:
    """Collapse whitespace runs to single hyphens and trim the ends."""
    return "-".join(name.split())


def dated_name(name: str, today: date | None = None) -> str:
    """Prefix a sanitized ``name`` with today's ISO date."""
    if today is None:
        today = date.today()
    stem = sanitize_name(name) or DEFAULT_TRY_NAME
    return f"{today.isoformat()}-{stem}"


def unique_path(path: Path) -> Path:
    """Return ``path`` or the first free ``path-2``, ``path-3``, ... sibling."""
    if not path.exists():
        return path
    suffix = 2
    while True:
        candidate = path.with_name(f"{path.name}-{suffix}")
        if not candidate.exists():
            return candidate
        suffix += 1
