"""Grouping pass, group contents cache, and cover lookup for synthetic groups."""

from __future__ import annotations

from .cache import GroupContentsCache
from .covers import CoverCompositor, CoverRecord, GroupCoverProvider, first_cover, split_member_paths
from .engine import GroupingEngine, MetadataLookup
from .sorting import NAME_LIKE_COLLATIONS, Collation, LessThan, SortProvider, sort_items

__all__ = [
    "GroupingEngine",
    "MetadataLookup",
    "GroupContentsCache",
    "Collation",
    "LessThan",
    "NAME_LIKE_COLLATIONS",
    "SortProvider",
    "sort_items",
    "CoverCompositor",
    "CoverRecord",
    "GroupCoverProvider",
    "first_cover",
    "split_member_paths",
]
