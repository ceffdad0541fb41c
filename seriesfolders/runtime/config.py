"""Persistent JSON config helpers.

Stores the grouping toggle, active collation, mixed-collation flag, listing
page size, and cover style. All access is defensive: malformed or missing
config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..grouping.sorting import Collation

APP_NAME = "seriesfolders"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

GROUPING_ENABLED_KEY = "automatic_series_grouping_enabled"
DEFAULT_PAGE_SIZE = 14


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_bool(key: str, default: bool = False) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def _save_value(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_collation() -> Collation:
    """Load the active collation; unknown or invalid ids fall back to ``strcoll``."""
    config = load_config()
    collate_id = config.get("collate")
    if not isinstance(collate_id, str) or not collate_id.strip():
        collate_id = "strcoll"
    reverse = config.get("reverse_collate")
    return Collation(collate_id=collate_id.strip(), reverse=reverse if isinstance(reverse, bool) else False)


def save_collation(collation: Collation) -> None:
    config = load_config()
    config["collate"] = collation.collate_id
    config["reverse_collate"] = bool(collation.reverse)
    save_config(config)


def load_collate_mixed() -> bool:
    """Return whether files and directories should interleave when sorting."""
    return _load_bool("collate_mixed")


def save_collate_mixed(mixed: bool) -> None:
    _save_value("collate_mixed", bool(mixed))


def load_page_size() -> int:
    """Return listing page size, ``DEFAULT_PAGE_SIZE`` unless a positive int is stored.

    Booleans are rejected even though they are ints.
    """
    value = load_config().get("page_size")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_PAGE_SIZE
    return value


def save_page_size(page_size: int) -> None:
    if page_size <= 0:
        return
    _save_value("page_size", int(page_size))


def load_stacked_covers() -> bool:
    """Return whether group covers are drawn as a diagonal stack instead of a grid."""
    return _load_bool("use_stacked_foldercovers")


class JsonSettingsStore:
    """Key/value view over the JSON config file."""

    def get(self, key: str, default: object = None) -> object:
        return load_config().get(key, default)

    def set(self, key: str, value: object) -> None:
        _save_value(key, value)


class MemorySettingsStore:
    """In-process settings store for one-off sessions."""

    def __init__(self, values: dict[str, object] | None = None) -> None:
        self.values: dict[str, object] = dict(values or {})

    def get(self, key: str, default: object = None) -> object:
        return self.values.get(key, default)

    def set(self, key: str, value: object) -> None:
        self.values[key] = value


SettingsStore = JsonSettingsStore | MemorySettingsStore
