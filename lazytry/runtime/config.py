"""Persistent JSON config and tries-root resolution.

Stores the preferred tries directory and UI theme. All access is defensive:
malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazytry"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
TRY_PATH_ENV = "TRY_PATH"
DEFAULT_TRIES_PATH = "~/src/tries"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON, ignoring write errors."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_string(key: str, value: str) -> None:
    stripped = str(value).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def save_theme_name(theme_name: str) -> None:
    _save_string("theme", theme_name)


def load_tries_path() -> str | None:
    """Load the persisted tries directory, returning ``None`` when unset/invalid."""
    return _load_string("tries_path")


def expand_path(path: str) -> Path:
    """Expand ``~`` and make ``path`` absolute without resolving symlinks."""
    return Path(os.path.abspath(os.path.expanduser(path)))


def resolve_tries_path(option: str | None = None) -> Path:
    """Pick the tries root: ``--path``, then ``$TRY_PATH``, then config, then default."""
    if option:
        return expand_path(option)
    env_value = os.environ.get(TRY_PATH_ENV, "").strip()
    if env_value:
        return expand_path(env_value)
    configured = load_tries_path()
    if configured:
        return expand_path(configured)
    return expand_path(DEFAULT_TRIES_PATH)
