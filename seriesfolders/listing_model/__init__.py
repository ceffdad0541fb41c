"""Listing datatypes, directory scanning, and row formatting.

Defines the tagged ``Item`` variants (file, directory, go-up, synthetic
group) and the ``Listing`` handed to presentation.
"""

from __future__ import annotations

from .fs import list_directory_items
from .rendering import format_listing, format_listing_row
from .types import (
    FOLDER_GLYPH,
    GO_UP_TEXT,
    DirectoryItem,
    FileItem,
    GoUpItem,
    GroupInfo,
    Item,
    Listing,
    SyntheticGroup,
    is_directory_like,
    with_sort_defaults,
)

__all__ = [
    "FOLDER_GLYPH",
    "GO_UP_TEXT",
    "GroupInfo",
    "FileItem",
    "DirectoryItem",
    "GoUpItem",
    "SyntheticGroup",
    "Item",
    "Listing",
    "is_directory_like",
    "with_sort_defaults",
    "list_directory_items",
    "format_listing",
    "format_listing_row",
]
