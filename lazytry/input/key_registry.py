"""Key-token dispatch table used by the selector modes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], None]


class KeyComboRegistry:
    """Exact-match key dispatch with a fallback for unbound tokens."""

    def __init__(self, fallback: Callable[[str], None] | None = None) -> None:
        self._fallback = fallback
        self._handlers: dict[str, Callable[[], None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool:
        """Invoke the handler bound to ``key``; return whether one ran.

        Unbound keys go to the fallback (used for text entry) when set.
        """
        handler = self._handlers.get(key)
        if handler is not None:
            handler()
            return True
        if self._fallback is not None:
            self._fallback(key)
            return True
        return False
