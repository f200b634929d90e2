"""Workspace catalog scanning.

Lists the immediate subdirectories of the tries root together with their
creation and modification timestamps. Listing is best-effort per child:
one unreadable directory never aborts the scan.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    """Raised when the tries root cannot be created or scanned."""


@dataclass(frozen=True)
class Entry:
    """One workspace directory discovered under the tries root."""

    name: str
    path: Path
    created: datetime
    touched: datetime


def _created_timestamp(stat: os.stat_result) -> float:
    """Return birth time where the platform records it, else ``st_mtime``."""
    birthtime = getattr(stat, "st_birthtime", None)
    if birthtime is None:
        return stat.st_mtime
    return float(birthtime)


def entry_from_stat(path: Path, stat: os.stat_result) -> Entry:
    """Build an ``Entry`` for ``path`` from an already-fetched stat result."""
    return Entry(
        name=path.name,
        path=path,
        created=datetime.fromtimestamp(_created_timestamp(stat)),
        touched=datetime.fromtimestamp(stat.st_mtime),
    )


def ensure_root(root: Path) -> Path:
    """Create ``root`` (and parents) if missing and return it."""
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CatalogError(f"cannot create tries directory {root}: {exc}") from exc
    return root


def list_entries(root: Path) -> list[Entry]:
    """Return directory children of ``root`` as entries.

    Non-directory children are ignored and children whose metadata cannot be
    read are skipped. Order is whatever the filesystem yields; callers sort.
    """
    ensure_root(root)
    entries: list[Entry] = []
    skipped = 0
    try:
        with os.scandir(root) as children:
            for child in children:
                try:
                    if not child.is_dir(follow_symlinks=False):
                        continue
                    stat = child.stat()
                except OSError:
                    skipped += 1
                    continue
                entries.append(entry_from_stat(root / child.name, stat))
    except OSError as exc:
        raise CatalogError(f"cannot list tries directory {root}: {exc}") from exc

    logger.debug("catalog %s: %d entries, %d skipped", root, len(entries), skipped)
    return entries
