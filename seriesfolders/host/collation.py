"""Host-side collations used to order listings.

The grouping pass never sorts on its own; it asks a ``SortProvider`` for a
comparator. ``CollationSortProvider`` is the reference provider.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from ..grouping.sorting import Collation, LessThan, SortProvider
from ..listing_model.types import GoUpItem, Item

_DIGITS_RE = re.compile(r"(\d+)")


def _display_name(item: Item) -> str:
    return item.text.rstrip("/")


def natural_key(text: str) -> tuple[tuple[int, int | str], ...]:
    """Split ``text`` so embedded numbers compare numerically (``2`` < ``10``)."""
    parts: list[tuple[int, int | str]] = []
    for chunk in _DIGITS_RE.split(text.casefold()):
        if not chunk:
            continue
        parts.append((0, int(chunk)) if chunk.isdigit() else (1, chunk))
    return tuple(parts)


def _title_key(item: Item) -> tuple[tuple[int, int | str], ...]:
    title = getattr(item, "attributes", {}).get("title")
    return natural_key(title if isinstance(title, str) and title else _display_name(item))


def _percent_key(item: Item) -> tuple[bool, float, str]:
    if isinstance(item, GoUpItem):
        return (False, 0.0, "")
    return (bool(item.opened), float(item.percent_finished or 0.0), _display_name(item).casefold())


@dataclass(frozen=True)
class CollationSpec:
    """One named ordering: its key function and whether it can interleave."""

    collate_id: str
    text: str
    key: Callable[[Item], object]
    can_collate_mixed: bool = True


COLLATIONS: dict[str, CollationSpec] = {
    spec.collate_id: spec
    for spec in (
        CollationSpec("strcoll", "name", lambda item: _display_name(item).casefold()),
        CollationSpec("natural", "name (natural sorting)", lambda item: natural_key(_display_name(item))),
        CollationSpec("title", "title", _title_key),
        CollationSpec("percent_unread_first", "percent, unread first", _percent_key, can_collate_mixed=False),
    )
}


def available_collation_ids() -> tuple[str, ...]:
    return tuple(COLLATIONS.keys())


class CollationSortProvider:
    """Reference ``SortProvider`` backed by ``COLLATIONS``."""

    def __init__(self, collation: Collation | None = None, mixed: bool = False) -> None:
        self.collation = collation or Collation()
        self.mixed = mixed

    def comparator_for(self, collate_id: str, reverse: bool) -> LessThan:
        spec = COLLATIONS.get(collate_id, COLLATIONS["strcoll"])

        def less_than(a: Item, b: Item) -> bool:
            key_a = spec.key(a)
            key_b = spec.key(b)
            return key_b < key_a if reverse else key_a < key_b

        return less_than

    def is_mixed_active(self) -> bool:
        spec = COLLATIONS.get(self.collation.collate_id)
        return self.mixed and spec is not None and spec.can_collate_mixed

    def sort_provider(self) -> SortProvider:
        return SortProvider(comparator_for=self.comparator_for, mixed_active=self.is_mixed_active)


__all__ = [
    "COLLATIONS",
    "CollationSortProvider",
    "CollationSpec",
    "available_collation_ids",
    "natural_key",
]
