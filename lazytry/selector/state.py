"""Selector session state.

The session is either browsing the ranked list or confirming a deletion.
Each mode carries only the fields that are meaningful for it, so a delete
target can never exist outside of delete confirmation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..ranking import ScoredEntry

MODE_BROWSING = "browsing"
MODE_CONFIRMING_DELETE = "confirming-delete"
DELETE_CONFIRMATION = "YES"


@dataclass
class Browsing:
    """Live query, ranked rows, and cursor over ``[0, len(filtered)]``."""

    query: str = ""
    cursor: int = 0
    filtered: list[ScoredEntry] = field(default_factory=list)

    @property
    def create_row(self) -> int:
        """Cursor index of the synthetic "create new" row."""
        return len(self.filtered)

    def clamp_cursor(self) -> None:
        self.cursor = max(0, min(self.cursor, self.create_row))

    def entry_at_cursor(self) -> ScoredEntry | None:
        if 0 <= self.cursor < len(self.filtered):
            return self.filtered[self.cursor]
        return None


@dataclass
class ConfirmingDelete:
    """Pending deletion of ``target`` awaiting the literal ``YES``.

    ``previous`` is the browsing state restored when the deletion is abandoned.
    """

    target: Path
    previous: Browsing
    buffer: str = ""

    @property
    def confirmed(self) -> bool:
        return self.buffer == DELETE_CONFIRMATION


@dataclass(frozen=True)
class SelectorResult:
    """Terminal outcome of one selector session."""

    selected: Path | None = None
    deleted: Path | None = None
    cancelled: bool = False

    def __post_init__(self) -> None:
        outcomes = sum((self.selected is not None, self.deleted is not None, self.cancelled))
        if outcomes > 1:
            raise ValueError("selector result must have at most one outcome")

    @property
    def kind(self) -> str:
        if self.selected is not None:
            return "selected"
        if self.deleted is not None:
            return "deleted"
        return "cancelled"
