"""Session-scoped mapping from synthetic group paths to their members."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..listing_model.types import Item


class GroupContentsCache:
    """Ordered member lists keyed by synthetic group path.

    Written by the grouping pass, read by cover compositing. Entries are never
    evicted; a group that dissolved keeps serving its last members until the
    session ends.
    """

    def __init__(self) -> None:
        self._members: dict[Path, tuple[Item, ...]] = {}

    def publish(self, path: Path, members: Iterable[Item]) -> None:
        self._members[path] = tuple(members)

    def lookup(self, path: Path) -> tuple[Item, ...] | None:
        return self._members.get(path)

    def clear(self) -> None:
        self._members.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._members

    def __len__(self) -> int:
        return len(self._members)


__all__ = ["GroupContentsCache"]
