"""Collation descriptors and comparator-driven sorting that never raises."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import cmp_to_key

from ..listing_model.types import Item

logger = logging.getLogger(__name__)

LessThan = Callable[[Item, Item], bool]

NAME_LIKE_COLLATIONS = frozenset({"strcoll", "natural", "title"})


@dataclass(frozen=True)
class Collation:
    """Active ordering: collation id plus reverse flag."""

    collate_id: str = "strcoll"
    reverse: bool = False

    @property
    def is_name_like(self) -> bool:
        return self.collate_id in NAME_LIKE_COLLATIONS


@dataclass(frozen=True)
class SortProvider:
    """Host sorting collaborator.

    ``comparator_for(collate_id, reverse)`` returns a less-than predicate;
    ``mixed_active()`` reports whether files and directories interleave.
    """

    comparator_for: Callable[[str, bool], LessThan]
    mixed_active: Callable[[], bool]


def _compare_from_less_than(less_than: LessThan) -> Callable[[Item, Item], int]:
    def compare(a: Item, b: Item) -> int:
        if less_than(a, b):
            return -1
        if less_than(b, a):
            return 1
        return 0

    return compare


def sort_items(items: Iterable[Item], less_than: LessThan) -> list[Item]:
    """Return ``items`` stably sorted by ``less_than``.

    A failing comparator is logged and the input order is returned instead.
    """
    pending = list(items)
    try:
        return sorted(pending, key=cmp_to_key(_compare_from_less_than(less_than)))
    except Exception:
        logger.warning("Sort failed, using unsorted list", exc_info=True)
        return pending


__all__ = [
    "Collation",
    "LessThan",
    "NAME_LIKE_COLLATIONS",
    "SortProvider",
    "sort_items",
]
