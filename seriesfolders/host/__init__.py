"""Reference host: collations, sidecar metadata, and a headless browser."""

from __future__ import annotations

from .browser import HOME_TITLE, DirectoryBrowser
from .collation import COLLATIONS, CollationSortProvider, CollationSpec, available_collation_ids, natural_key
from .metadata import SIDECAR_FILENAME, JsonMetadataLookup, load_metadata_records

__all__ = [
    "COLLATIONS",
    "CollationSortProvider",
    "CollationSpec",
    "DirectoryBrowser",
    "HOME_TITLE",
    "JsonMetadataLookup",
    "SIDECAR_FILENAME",
    "available_collation_ids",
    "load_metadata_records",
    "natural_key",
]
