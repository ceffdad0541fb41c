"""Dependency container for host-native navigation handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..grouping.sorting import Collation
from ..listing_model.types import Item, Listing


@dataclass(frozen=True)
class HostNavigation:
    """Host behavior the navigation state machine falls back on.

    ``load_listing`` performs the host's directory I/O without rendering;
    the gesture handlers are the host's own, un-intercepted navigation.
    """

    load_listing: Callable[[Path], Listing]
    render_listing: Callable[[Listing], None]
    open_item: Callable[[Item], object]
    go_up: Callable[[], object]
    go_home: Callable[[], object]
    change_to_path: Callable[[Path], object]
    collation: Callable[[], Collation]
    home_dir: Callable[[], Path | None]
    page_size: Callable[[], int]


__all__ = ["HostNavigation"]
