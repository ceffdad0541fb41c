"""Folder-cover support for synthetic groups.

Cover decoding and compositing belong to an optional host collaborator. This
module only maps a synthetic group path to the member files the collaborator
should draw from, and falls back to the host's own folder-cover routine for
anything it does not know.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..listing_model.types import FileItem, SyntheticGroup
from .cache import GroupContentsCache

logger = logging.getLogger(__name__)

CoverFallback = Callable[[Path, int, int], object | None]


@dataclass(frozen=True)
class CoverCompositor:
    """Host routines that build one folder image from several book covers.

    Each callable receives ``(directories, filenames, max_w, max_h)`` and
    returns an image object or ``None``.
    """

    grid: Callable[[list[str], list[str], int, int], object | None]
    stack: Callable[[list[str], list[str], int, int], object | None] | None = None


@dataclass(frozen=True)
class CoverRecord:
    """Cover state the host knows for one book."""

    image: object | None
    has_cover: bool = False
    fetched: bool = False
    ignored: bool = False

    @property
    def usable(self) -> bool:
        return self.image is not None and self.has_cover and self.fetched and not self.ignored


def split_member_paths(members: tuple[object, ...]) -> tuple[list[str], list[str]]:
    """Return parallel ``(directories, filenames)`` lists for file members."""
    directories: list[str] = []
    filenames: list[str] = []
    for member in members:
        if not isinstance(member, FileItem):
            continue
        directories.append(f"{member.path.parent}/")
        filenames.append(member.path.name)
    return directories, filenames


class GroupCoverProvider:
    """Serve composite covers for synthetic groups out of a contents cache."""

    def __init__(
        self,
        cache: GroupContentsCache,
        compositor: CoverCompositor | None = None,
        fallback: CoverFallback | None = None,
        stacked: bool = False,
    ) -> None:
        self.cache = cache
        self.compositor = compositor
        self.fallback = fallback
        self.stacked = stacked
        if compositor is None:
            logger.debug("No cover compositor available, synthetic groups use fallback covers")

    def cover_for(self, path: Path, max_w: int, max_h: int) -> object | None:
        """Return a composite cover for ``path`` or the fallback's answer."""
        members = self.cache.lookup(path)
        if members and self.compositor is not None:
            directories, filenames = split_member_paths(members)
            if filenames:
                build = self.compositor.grid
                if self.stacked and self.compositor.stack is not None:
                    build = self.compositor.stack
                image = build(directories, filenames, max_w, max_h)
                if image is not None:
                    return image
        if self.fallback is None:
            return None
        return self.fallback(path, max_w, max_h)


def first_cover(group: SyntheticGroup, cover_lookup: Callable[[Path], CoverRecord | None]) -> object | None:
    """Return the first usable member cover of ``group`` in ranked order."""
    for member in group.members:
        record = cover_lookup(member.path)
        if record is not None and record.usable:
            return record.image
    return None


__all__ = [
    "CoverCompositor",
    "CoverFallback",
    "CoverRecord",
    "GroupCoverProvider",
    "first_cover",
    "split_member_paths",
]
