"""Navigation state types and listing position math.

This module has no UI concerns. It defines which kind of view is active and
how a 1-based listing index maps onto a page and a selection offset.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RealView:
    """Browsing an actual directory.

    ``restore_key`` names the group whose row should be re-selected once the
    directory's next listing arrives, set when a virtual view was just left.
    """

    path: Path
    restore_key: str | None = None


@dataclass(frozen=True)
class VirtualView:
    """Browsing the members of one synthetic group opened from ``parent_path``."""

    group_key: str
    parent_path: Path | None
    pending_focus_restore: bool = False

    def exited(self) -> RealView:
        """Return the real view this virtual view exits into."""
        assert self.parent_path is not None
        restore_key = self.group_key if self.pending_focus_restore else None
        return RealView(self.parent_path, restore_key=restore_key)


NavigationState = RealView | VirtualView


def page_for_index(index: int, page_size: int) -> tuple[int, int]:
    """Return ``(page, offset)`` holding 1-based ``index``; both are 1-based."""
    page_size = max(1, page_size)
    index = max(1, index)
    page = -(-index // page_size)
    offset = ((index - 1) % page_size) + 1
    return page, offset


def is_parent_reference(target: Path | str) -> bool:
    """Return whether ``target`` walks up through a ``..`` component."""
    return ".." in Path(target).parts


def same_directory(left: Path, right: Path) -> bool:
    try:
        return left.resolve() == right.resolve()
    except (OSError, RuntimeError):
        return left == right


__all__ = [
    "NavigationState",
    "RealView",
    "VirtualView",
    "is_parent_reference",
    "page_for_index",
    "same_directory",
]
