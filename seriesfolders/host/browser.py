"""Headless directory browser wired through the navigation state machine.

``DirectoryBrowser`` plays the part of a host file chooser: it owns directory
I/O and the native navigation handlers, while every user gesture is routed
through a ``NavigationStateMachine`` first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..grouping.covers import CoverCompositor, GroupCoverProvider
from ..grouping.engine import GroupingEngine, MetadataLookup
from ..listing_model.fs import list_directory_items
from ..listing_model.types import DirectoryItem, FileItem, GoUpItem, Item, Listing
from ..runtime.config import DEFAULT_PAGE_SIZE, JsonSettingsStore, SettingsStore
from ..runtime.deps import HostNavigation
from ..runtime.machine import NavigationStateMachine
from ..runtime.navigation import RealView
from ..runtime.session import BrowserSessionContext
from ..runtime.toggle import GroupingToggle
from .collation import CollationSortProvider

logger = logging.getLogger(__name__)

HOME_TITLE = "Home"


class DirectoryBrowser:
    """Minimal file chooser with series grouping layered on top."""

    def __init__(
        self,
        path: Path,
        lookup: MetadataLookup,
        *,
        sort_provider: CollationSortProvider | None = None,
        settings: SettingsStore | None = None,
        home_dir: Path | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        show_hidden: bool = False,
        on_open_file: Callable[[Path], object] | None = None,
        on_render: Callable[[Listing], object] | None = None,
        compositor: CoverCompositor | None = None,
        stacked_covers: bool = False,
    ) -> None:
        self.path = path.resolve()
        self.home_dir = home_dir.resolve() if home_dir is not None else None
        self.page_size = max(1, page_size)
        self.show_hidden = show_hidden
        self.on_open_file = on_open_file
        self.on_render = on_render
        self.sort_provider = sort_provider or CollationSortProvider()
        self.listing: Listing | None = None
        self.focused_path: Path | None = None

        self.session = BrowserSessionContext(state=RealView(self.path))
        self.engine = GroupingEngine(lookup, self.sort_provider.sort_provider(), self.session.cache)
        self.covers = GroupCoverProvider(
            self.session.cache,
            compositor=compositor,
            stacked=stacked_covers,
        )
        self.toggle = GroupingToggle(settings if settings is not None else JsonSettingsStore(), on_change=self.refresh)
        self.machine = NavigationStateMachine(
            self.engine,
            self.session,
            HostNavigation(
                load_listing=self._load_listing,
                render_listing=self._render,
                open_item=self._native_open,
                go_up=self._native_go_up,
                go_home=self._native_go_home,
                change_to_path=self._native_change_to_path,
                collation=lambda: self.sort_provider.collation,
                home_dir=lambda: self.home_dir,
                page_size=lambda: self.page_size,
            ),
            self.toggle,
        )

    @property
    def title(self) -> str:
        if self.listing is None:
            return ""
        return self.machine.title_for(self.listing.title)

    def show(self) -> Listing:
        """Load and render the current directory."""
        self._show_path(self.path)
        assert self.listing is not None
        return self.listing

    def open(self, item: Item) -> object:
        return self.machine.open(item)

    def go_up(self) -> object:
        return self.machine.go_up()

    def go_home(self) -> object:
        return self.machine.go_home()

    def change_to_path(self, target: Path) -> object:
        return self.machine.change_to_path(target)

    def refresh(self) -> bool:
        """Reload after returning from a visited file, keeping its group open."""
        visited = self.focused_path
        self.focused_path = None
        return self.machine.refresh(visited)

    def close(self) -> None:
        self.session.close()
        self.listing = None

    def _title_for_path(self, path: Path) -> str:
        if self.home_dir is not None and path == self.home_dir:
            return HOME_TITLE
        return str(path)

    def _load_listing(self, path: Path) -> Listing:
        items, scan_error = list_directory_items(path, show_hidden=self.show_hidden)
        if scan_error is not None:
            logger.warning("Cannot list %s: %s", path, scan_error)
        return Listing(path=path, items=items, title=self._title_for_path(path))

    def _render(self, listing: Listing) -> None:
        self.listing = listing
        if self.on_render is not None:
            self.on_render(listing)

    def _show_path(self, path: Path) -> None:
        self.path = path.resolve()
        listing = self.machine.update_listing(self._load_listing(self.path))
        self._render(listing)

    def _native_open(self, item: Item) -> object:
        if isinstance(item, GoUpItem):
            return self.machine.change_to_path(item.path)
        if isinstance(item, DirectoryItem):
            return self.machine.change_to_path(item.path)
        if isinstance(item, FileItem):
            self.focused_path = item.path
            if self.on_open_file is not None:
                self.on_open_file(item.path)
            return True
        return False

    def _native_go_up(self) -> object:
        if self.path.parent == self.path:
            return False
        self._show_path(self.path.parent)
        return True

    def _native_go_home(self) -> object:
        if self.home_dir is None:
            return False
        self._show_path(self.home_dir)
        return True

    def _native_change_to_path(self, target: Path) -> object:
        self._show_path(target)
        return True


__all__ = ["DirectoryBrowser", "HOME_TITLE"]
