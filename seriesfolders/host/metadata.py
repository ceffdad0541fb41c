"""Sidecar-file metadata lookup for the reference host.

Reads a JSON object mapping file names (or absolute paths) to records such as
``{"series": "Dune", "series_index": 2}``. Malformed input yields no groups.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from ..listing_model.types import GroupInfo

logger = logging.getLogger(__name__)

SIDECAR_FILENAME = ".series.json"


def _coerce_rank(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def load_metadata_records(path: Path) -> dict[str, object]:
    """Load sidecar records, returning ``{}`` for missing or malformed files."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception:
        logger.warning("Ignoring unreadable metadata file %s", path, exc_info=True)
        return {}
    return data if isinstance(data, dict) else {}


class JsonMetadataLookup:
    """Callable ``MetadataLookup`` over sidecar records, memoized per path."""

    def __init__(self, records: Mapping[str, object] | None = None) -> None:
        self.records = dict(records or {})
        self._resolved: dict[Path, GroupInfo | None] = {}

    @classmethod
    def from_file(cls, path: Path) -> JsonMetadataLookup:
        return cls(load_metadata_records(path))

    @classmethod
    def for_directory(cls, directory: Path) -> JsonMetadataLookup:
        """Build a lookup from ``directory``'s sidecar file, if there is one."""
        return cls.from_file(directory / SIDECAR_FILENAME)

    def __call__(self, path: Path) -> GroupInfo | None:
        if path in self._resolved:
            return self._resolved[path]
        info = self._resolve(path)
        self._resolved[path] = info
        return info

    def _resolve(self, path: Path) -> GroupInfo | None:
        record = self.records.get(str(path), self.records.get(path.name))
        if not isinstance(record, dict):
            return None
        series = record.get("series")
        if not isinstance(series, str) or not series.strip():
            return None
        return GroupInfo(group_key=series.strip(), group_rank=_coerce_rank(record.get("series_index")))


__all__ = ["JsonMetadataLookup", "SIDECAR_FILENAME", "load_metadata_records"]
