"""Persistent JSON config helpers.

Stores the preferred connector symbol set, theme name, and hidden-file
preference for the viewer. All access is defensive: malformed or missing
config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .symbols import available_symbol_names
from .theme import available_theme_names

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


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
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never breaks the
    viewer.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_choice(key: str, allowed: tuple[str, ...]) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    value = value.strip().lower()
    return value if value in allowed else None


def _save_value(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_symbols_name() -> str | None:
    """Return the persisted symbol-set name, or ``None`` when unset/unknown."""
    return _load_choice("symbols", available_symbol_names())


def save_symbols_name(name: str) -> None:
    _save_value("symbols", name)


def load_theme_name() -> str | None:
    """Return the persisted theme name, or ``None`` when unset/unknown."""
    return _load_choice("theme", available_theme_names())


def save_theme_name(name: str) -> None:
    _save_value("theme", name)


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return value if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    """Persist hidden-file visibility preference as a boolean."""
    _save_value("show_hidden", bool(show_hidden))


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_symbols_name",
    "save_symbols_name",
    "load_theme_name",
    "save_theme_name",
    "load_show_hidden",
    "save_show_hidden",
]
