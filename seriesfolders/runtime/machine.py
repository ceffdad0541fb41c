"""Navigation state machine that makes synthetic groups browse like directories.

The machine sits between the user's navigation gestures and the host's native
handlers. It enters and leaves virtual group views itself, and hands every
gesture it does not own to the host unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from ..grouping.engine import GroupingEngine
from ..listing_model.types import GoUpItem, Item, Listing, SyntheticGroup
from .deps import HostNavigation
from .navigation import RealView, VirtualView, is_parent_reference, page_for_index, same_directory
from .session import BrowserSessionContext
from .toggle import GroupingToggle

logger = logging.getLogger(__name__)


def find_group(items: list[Item], group_key: str) -> tuple[int, SyntheticGroup] | None:
    """Return ``(1-based index, group)`` of the group row named ``group_key``."""
    for index, item in enumerate(items, start=1):
        if isinstance(item, SyntheticGroup) and item.group_key == group_key:
            return index, item
    return None


class NavigationStateMachine:
    """Intercepts open, go-up, go-home, path-change, and refresh gestures."""

    def __init__(
        self,
        engine: GroupingEngine,
        session: BrowserSessionContext,
        host: HostNavigation,
        toggle: GroupingToggle,
    ) -> None:
        self.engine = engine
        self.session = session
        self.host = host
        self.toggle = toggle

    @property
    def state(self) -> RealView | VirtualView:
        return self.session.state

    def open(self, item: Item) -> object:
        """Open ``item``, entering a virtual view for synthetic groups."""
        state = self.session.state
        if isinstance(state, VirtualView):
            if isinstance(item, GoUpItem):
                return self.go_up()
            if isinstance(item, SyntheticGroup):
                logger.debug("Already inside group %r, passing %r through", state.group_key, item.group_key)
            return self.host.open_item(item)

        if isinstance(item, SyntheticGroup) and self.toggle.is_enabled():
            self._enter_group(item, state.path)
            return True
        return self.host.open_item(item)

    def go_up(self) -> object:
        state = self.session.state
        if not isinstance(state, VirtualView):
            return self.host.go_up()
        if state.parent_path is None:
            logger.warning("Virtual view for %r has no parent path, using native go-up", state.group_key)
            return self.host.go_up()
        self._exit_group(state)
        return True

    def go_home(self) -> object:
        state = self.session.state
        if not isinstance(state, VirtualView):
            return self.host.go_home()
        if state.parent_path is None:
            logger.warning("Virtual view for %r has no parent path, using native go-home", state.group_key)
            return self.host.go_home()

        home = self.host.home_dir()
        if home is None or same_directory(state.parent_path, home):
            return self.go_up()
        self.session.state = RealView(state.parent_path)
        result = self.host.go_home()
        if not result:
            logger.debug("Native go-home did not navigate, showing %s", state.parent_path)
            self._exit_group(state)
            return True
        return result

    def change_to_path(self, target: Path) -> object:
        """Explicit path change; ``..`` out of a virtual view goes to its parent."""
        state = self.session.state
        if isinstance(state, VirtualView) and state.parent_path is not None and is_parent_reference(target):
            target = state.parent_path
            self.session.state = replace(state, pending_focus_restore=True).exited()
        else:
            self.session.state = RealView(target)
        return self.host.change_to_path(target)

    def update_listing(self, listing: Listing) -> Listing:
        """Group a freshly loaded listing before the host renders it."""
        state = self.session.state
        if not self.toggle.is_enabled():
            if isinstance(state, VirtualView):
                self.session.state = RealView(state.parent_path or listing.path)
            return listing
        if not listing.items:
            return listing

        items = self.engine.process(listing.items, self.host.collation(), synthetic_view=listing.is_synthetic)
        if listing.is_synthetic:
            return listing

        go_up = listing.go_up_item()
        self.session.go_up_visible = go_up is not None
        if go_up is not None:
            self.session.go_up_text = go_up.text

        grouped = listing if items is listing.items else replace(listing, items=items)
        if isinstance(state, RealView):
            self.session.state = RealView(listing.path, restore_key=state.restore_key)
            grouped = self._restore_focus(grouped)
        return grouped

    def refresh(self, after_visiting_path: Path | None = None) -> bool:
        """Reload the real directory and return to the group the user was in.

        Returns whether a virtual view was re-entered. The grouped listing is
        only rendered after that decision so no ungrouped frame is shown.
        """
        state = self.session.state
        real_path = self.session.real_path
        if real_path is None:
            logger.warning("No real directory to refresh")
            return False

        listing = self.update_listing(self.host.load_listing(real_path))
        group = None
        if self.toggle.is_enabled():
            if isinstance(state, VirtualView):
                found = find_group(listing.items, state.group_key)
                group = found[1] if found else None
            if group is None and after_visiting_path is not None:
                info = self.engine.lookup(after_visiting_path)
                found = find_group(listing.items, info.group_key) if info is not None else None
                group = found[1] if found else None

        if isinstance(self.session.state, VirtualView):
            self.session.state = RealView(listing.path)
        if group is not None:
            self._enter_group(group, listing.path)
            return True
        self._render(listing)
        return False

    def title_for(self, requested: str) -> str:
        """Return the title to display; a virtual view always shows its group key."""
        state = self.session.state
        if isinstance(state, VirtualView):
            return state.group_key
        return requested

    def _enter_group(self, group: SyntheticGroup, parent_path: Path) -> None:
        items: list[Item] = list(group.members)
        if self.session.go_up_visible and not any(isinstance(item, GoUpItem) for item in items):
            items.insert(0, GoUpItem(path=parent_path, text=self.session.go_up_text))
        self.session.state = VirtualView(group_key=group.group_key, parent_path=parent_path)
        logger.debug("Entering group %r from %s", group.group_key, parent_path)
        self._render(
            Listing(
                path=group.path,
                items=items,
                title=group.text,
                synthetic_parent=parent_path,
            )
        )

    def _exit_group(self, state: VirtualView) -> None:
        self.session.state = replace(state, pending_focus_restore=True).exited()
        logger.debug("Leaving group %r for %s", state.group_key, state.parent_path)
        self.host.change_to_path(state.parent_path)

    def _restore_focus(self, listing: Listing) -> Listing:
        state = self.session.state
        if not isinstance(state, RealView) or state.restore_key is None:
            return listing
        self.session.state = RealView(state.path)
        found = find_group(listing.items, state.restore_key)
        if found is None:
            logger.debug("Group %r is gone, default positioning", state.restore_key)
            return listing
        page, offset = page_for_index(found[0], self.host.page_size())
        return replace(listing, page=page, selected=offset)

    def _render(self, listing: Listing) -> None:
        self.session.listing = listing
        self.host.render_listing(listing)


__all__ = ["NavigationStateMachine", "find_group"]
