"""Listing item datatypes shared by grouping, navigation, and hosts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

FOLDER_GLYPH = "\uf016"
GO_UP_TEXT = "../"

_EMPTY_ATTRIBUTES: Mapping[str, object] = MappingProxyType({})


@dataclass(frozen=True)
class GroupInfo:
    """Metadata resolved for one file: which group it joins and where it ranks."""

    group_key: str
    group_rank: float = 0.0


@dataclass(frozen=True)
class FileItem:
    """One browsable file (a book, usually)."""

    path: Path
    text: str
    sort_percent: float | None = 0.0
    percent_finished: float | None = 0.0
    opened: bool | None = False
    attributes: Mapping[str, object] = field(default_factory=lambda: _EMPTY_ATTRIBUTES, hash=False)


@dataclass(frozen=True)
class DirectoryItem:
    """One real directory shown in a listing."""

    path: Path
    text: str
    sort_percent: float | None = 0.0
    percent_finished: float | None = 0.0
    opened: bool | None = False
    attributes: Mapping[str, object] = field(default_factory=lambda: _EMPTY_ATTRIBUTES, hash=False)


@dataclass(frozen=True)
class GoUpItem:
    """Sentinel row that navigates to ``path`` (the parent)."""

    path: Path
    text: str = GO_UP_TEXT


@dataclass(frozen=True)
class SyntheticGroup:
    """Directory-shaped row synthesized from files sharing one group key.

    Sort fields are inherited from the first member encountered so the
    group lands where that member would have among sibling directories.
    """

    path: Path
    group_key: str
    members: tuple["FileItem", ...]
    sort_percent: float = 0.0
    percent_finished: float = 0.0
    opened: bool = False
    attributes: Mapping[str, object] = field(default_factory=lambda: _EMPTY_ATTRIBUTES, hash=False)

    @property
    def text(self) -> str:
        return self.group_key

    @property
    def badge_count(self) -> int:
        return len(self.members)

    @property
    def badge(self) -> str:
        """Count badge rendered on the right of the row, e.g. ``"3 \\uf016"``."""
        return f"{self.badge_count} {FOLDER_GLYPH}"


Item = FileItem | DirectoryItem | GoUpItem | SyntheticGroup


def is_directory_like(item: Item) -> bool:
    """Return whether ``item`` sorts with directories (real or synthetic)."""
    if isinstance(item, (DirectoryItem, SyntheticGroup)):
        return True
    if isinstance(item, FileItem):
        return item.attributes.get("mode") == "directory"
    return False


def with_sort_defaults(item: Item) -> Item:
    """Return ``item`` with absent sort fields set to neutral values.

    The same object is returned when nothing is missing.
    """
    if isinstance(item, (GoUpItem, SyntheticGroup)):
        return item
    if item.sort_percent is not None and item.percent_finished is not None and item.opened is not None:
        return item
    return type(item)(
        path=item.path,
        text=item.text,
        sort_percent=item.sort_percent if item.sort_percent is not None else 0.0,
        percent_finished=item.percent_finished if item.percent_finished is not None else 0.0,
        opened=item.opened if item.opened is not None else False,
        attributes=item.attributes,
    )


@dataclass(frozen=True)
class Listing:
    """One listing as handed to the presentation layer.

    ``synthetic_parent`` tags a synthetic (virtual group) view and records
    the real directory it was opened from. ``selected`` is a 1-based offset
    within ``page``.
    """

    path: Path
    items: list[Item] = field(default_factory=list)
    title: str = ""
    synthetic_parent: Path | None = None
    page: int = 1
    selected: int | None = None

    @property
    def is_synthetic(self) -> bool:
        return self.synthetic_parent is not None

    def go_up_item(self) -> GoUpItem | None:
        for item in self.items:
            if isinstance(item, GoUpItem):
                return item
        return None


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
]
