"""Interactive selection state machine and its state types."""

from .controller import SelectorController, is_text_key
from .naming import DEFAULT_TRY_NAME, dated_name, sanitize_name, unique_path
from .state import (
    DELETE_CONFIRMATION,
    MODE_BROWSING,
    MODE_CONFIRMING_DELETE,
    Browsing,
    ConfirmingDelete,
    SelectorResult,
)

__all__ = [
    "SelectorController",
    "SelectorResult",
    "Browsing",
    "ConfirmingDelete",
    "MODE_BROWSING",
    "MODE_CONFIRMING_DELETE",
    "DELETE_CONFIRMATION",
    "DEFAULT_TRY_NAME",
    "dated_name",
    "sanitize_name",
    "unique_path",
    "is_text_key",
]
