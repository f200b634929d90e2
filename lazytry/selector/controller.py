"""Selector state machine.

Consumes one key token at a time and settles completely (re-rank, clamp
cursor) before returning. The controller decides what should happen to a
try; it never deletes anything and only creates the directory for a
"create new" selection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date, datetime
from pathlib import Path

from ..catalog import Entry
from ..input.key_registry import KeyComboBinding, KeyComboRegistry
from ..ranking import ScoredEntry, rank_entries
from .naming import dated_name, unique_path
from .state import (
    MODE_BROWSING,
    MODE_CONFIRMING_DELETE,
    Browsing,
    ConfirmingDelete,
    SelectorResult,
)

logger = logging.getLogger(__name__)

UP_KEYS = ("UP", "CTRL_P")
DOWN_KEYS = ("DOWN", "CTRL_N")
CANCEL_KEYS = ("ESC", "CTRL_C")


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is one printable character."""
    return len(key) == 1 and key.isprintable()


def _make_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


class SelectorController:
    """Interactive picker session over one catalog snapshot."""

    def __init__(
        self,
        root: Path,
        entries: Sequence[Entry],
        initial_query: str = "",
        *,
        now: datetime | None = None,
        today: date | None = None,
        make_directory: Callable[[Path], None] = _make_directory,
    ) -> None:
        self.root = root
        self.entries = list(entries)
        self.now = now if now is not None else datetime.now()
        self._today = today
        self._make_directory = make_directory
        self.result: SelectorResult | None = None

        browsing = Browsing(query=initial_query)
        self.state: Browsing | ConfirmingDelete = browsing
        self._refilter(browsing)

        self._browsing_keys = KeyComboRegistry(fallback=self._type_query).register_bindings(
            KeyComboBinding(UP_KEYS, lambda: self._move_cursor(-1)),
            KeyComboBinding(DOWN_KEYS, lambda: self._move_cursor(1)),
            KeyComboBinding(("BACKSPACE",), self._erase_query),
            KeyComboBinding(("ENTER",), self._select),
            KeyComboBinding(("CTRL_D",), self._request_delete),
            KeyComboBinding(CANCEL_KEYS, self._cancel),
        )
        self._confirm_keys = KeyComboRegistry(fallback=self._type_confirmation).register_bindings(
            KeyComboBinding(CANCEL_KEYS, self._abandon_delete),
            KeyComboBinding(("BACKSPACE",), self._erase_confirmation),
            KeyComboBinding(("ENTER",), self._confirm_delete),
        )

    @property
    def done(self) -> bool:
        return self.result is not None

    @property
    def mode(self) -> str:
        if isinstance(self.state, ConfirmingDelete):
            return MODE_CONFIRMING_DELETE
        return MODE_BROWSING

    @property
    def browsing(self) -> Browsing:
        """Browsing state, including the one suspended under a delete prompt."""
        if isinstance(self.state, ConfirmingDelete):
            return self.state.previous
        return self.state

    @property
    def query(self) -> str:
        return self.browsing.query

    @property
    def cursor(self) -> int:
        return self.browsing.cursor

    @property
    def filtered(self) -> list[ScoredEntry]:
        return self.browsing.filtered

    @property
    def delete_target(self) -> Path | None:
        if isinstance(self.state, ConfirmingDelete):
            return self.state.target
        return None

    @property
    def confirm_buffer(self) -> str:
        if isinstance(self.state, ConfirmingDelete):
            return self.state.buffer
        return ""

    def handle_key(self, key: str) -> bool:
        """Apply one key token and return whether the session has finished."""
        if self.result is not None:
            return True
        if isinstance(self.state, ConfirmingDelete):
            self._confirm_keys.dispatch(key)
        else:
            self._browsing_keys.dispatch(key)
        return self.result is not None

    def _finish(self, result: SelectorResult) -> None:
        logger.debug("selector finished: %s", result)
        self.result = result

    def _refilter(self, browsing: Browsing) -> None:
        browsing.filtered = rank_entries(self.entries, browsing.query, self.now)
        browsing.clamp_cursor()

    # Browsing transitions.

    def _type_query(self, key: str) -> None:
        if not is_text_key(key):
            return
        browsing = self.browsing
        browsing.query += key
        self._refilter(browsing)

    def _erase_query(self) -> None:
        browsing = self.browsing
        if not browsing.query:
            return
        browsing.query = browsing.query[:-1]
        self._refilter(browsing)

    def _move_cursor(self, direction: int) -> None:
        browsing = self.browsing
        browsing.cursor += direction
        browsing.clamp_cursor()

    def _select(self) -> None:
        browsing = self.browsing
        if browsing.cursor == browsing.create_row:
            self._finish(SelectorResult(selected=self.create_new_try(browsing.query)))
            return
        picked = browsing.entry_at_cursor()
        if picked is not None:
            self._finish(SelectorResult(selected=picked.path))

    def create_new_try(self, query: str) -> Path:
        """Create a dated, collision-free directory for ``query``.

        Creation failure is logged and the intended path is still returned; the
        caller's later ``cd`` surfaces the problem.
        """
        target = unique_path(self.root / dated_name(query, self._today))
        try:
            self._make_directory(target)
        except OSError as exc:
            logger.warning("could not create %s: %s", target, exc)
        return target

    def _request_delete(self) -> None:
        browsing = self.browsing
        picked = browsing.entry_at_cursor()
        if picked is None:
            return
        self.state = ConfirmingDelete(target=picked.path, previous=browsing)

    def _cancel(self) -> None:
        self._finish(SelectorResult(cancelled=True))

    # Delete-confirmation transitions.

    def _abandon_delete(self) -> None:
        self.state = self.browsing

    def _type_confirmation(self, key: str) -> None:
        if not is_text_key(key) or not isinstance(self.state, ConfirmingDelete):
            return
        self.state.buffer += key

    def _erase_confirmation(self) -> None:
        if isinstance(self.state, ConfirmingDelete) and self.state.buffer:
            self.state.buffer = self.state.buffer[:-1]

    def _confirm_delete(self) -> None:
        if isinstance(self.state, ConfirmingDelete) and self.state.confirmed:
            self._finish(SelectorResult(deleted=self.state.target))
