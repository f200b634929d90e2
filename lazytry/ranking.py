from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from collections.abc import Iterable
from pathlib import Path

from .catalog import Entry

DATE_PREFIX_FORMAT = "%Y-%m-%d"
DATE_PREFIX_LEN = len("2006-01-02-")
DATE_PREFIX_BONUS = 2.0
CREATED_WEIGHT = 2.0
TOUCHED_WEIGHT = 3.0


@dataclass(frozen=True)
class ScoredEntry:
    """Entry ranked against one query, with matched character offsets."""

    entry: Entry
    score: float
    highlights: tuple[int, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def path(self) -> Path:
        return self.entry.path


def has_date_prefix(name: str) -> bool:
    """Return whether ``name`` starts with a valid ``YYYY-MM-DD-`` prefix."""
    if len(name) < DATE_PREFIX_LEN or name[10] != "-":
        return False
    try:
        datetime.strptime(name[:10], DATE_PREFIX_FORMAT)
    except ValueError:
        return False
    return True


def base_score(entry: Entry, now: datetime | None = None) -> float:
    """Query-independent recency prior for ``entry``.

    Rewards the dated naming convention, young directories, and recently
    touched ones. Negative ages from clock skew are clamped to zero.
    """
    if now is None:
        now = datetime.now()
    score = 0.0
    if has_date_prefix(entry.name):
        score += DATE_PREFIX_BONUS

    days = max(0.0, (now - entry.created).total_seconds() / 86_400.0)
    score += CREATED_WEIGHT / math.sqrt(days + 1)

    hours = max(0.0, (now - entry.touched).total_seconds() / 3_600.0)
    score += TOUCHED_WEIGHT / math.sqrt(hours + 1)
    return score


def _is_word_char(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("0" <= ch <= "9")


def fuzzy_score(text: str, query: str, initial: float = 0.0) -> tuple[float, list[int]] | None:
    """Score ``text`` as an in-order subsequence match of ``query``.

    Returns ``None`` when some query character cannot be found, otherwise
    ``(score, highlights)`` where highlights are the matched offsets. An empty
    query matches everything with ``initial`` as the score.
    """
    if not query:
        return initial, []
    text_lower = text.lower()
    query_lower = query.lower()

    pos = 0
    last = -1
    score = initial
    highlights: list[int] = []
    for needle in query_lower:
        found = text_lower.find(needle, pos)
        if found < 0:
            return None
        highlights.append(found)
        score += 1.0
        if found == 0 or not _is_word_char(text_lower[found - 1]):
            score += 1.0
        if last >= 0:
            gap = found - last - 1
            score += 1.0 / math.sqrt(gap + 1)
        last = found
        pos = found + 1

    score *= len(query_lower) / (last + 1)
    score *= 10.0 / (len(text) + 10.0)
    return score, highlights


def score_entry(entry: Entry, query: str, now: datetime | None = None) -> ScoredEntry | None:
    """Rank one entry, or return ``None`` when the query excludes it."""
    matched = fuzzy_score(entry.name, query, base_score(entry, now))
    if matched is None:
        return None
    score, highlights = matched
    return ScoredEntry(entry=entry, score=score, highlights=tuple(highlights))


def rank_entries(entries: Iterable[Entry], query: str, now: datetime | None = None) -> list[ScoredEntry]:
    """Filter and sort entries for ``query``: best score first, then by name."""
    if now is None:
        now = datetime.now()
    scored: list[ScoredEntry] = []
    for entry in entries:
        ranked = score_entry(entry, query, now)
        if ranked is None:
            continue
        scored.append(ranked)
    scored.sort(key=lambda item: (-item.score, item.name))
    return scored
