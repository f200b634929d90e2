"""Input-layer public API for key decoding and dispatch."""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, KEY_EOF, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KEY_EOF",
    "KeyComboBinding",
    "KeyComboRegistry",
]
