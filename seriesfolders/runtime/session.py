"""Per-browser-view session state for the virtual grouping overlay."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..grouping.cache import GroupContentsCache
from ..listing_model.types import GO_UP_TEXT, Listing
from .navigation import NavigationState, RealView, VirtualView


@dataclass
class BrowserSessionContext:
    """Mutable state owned by one file-browser view.

    Created with the view and torn down with ``close``; never shared between
    views.
    """

    state: NavigationState
    cache: GroupContentsCache = field(default_factory=GroupContentsCache)
    go_up_visible: bool = False
    go_up_text: str = GO_UP_TEXT
    listing: Listing | None = None

    @property
    def in_virtual_view(self) -> bool:
        return isinstance(self.state, VirtualView)

    @property
    def real_path(self) -> Path | None:
        """Real directory currently shown, or the one a virtual view came from."""
        if isinstance(self.state, VirtualView):
            return self.state.parent_path
        return self.state.path

    def close(self) -> None:
        real_path = self.real_path
        self.cache.clear()
        self.listing = None
        self.go_up_visible = False
        self.go_up_text = GO_UP_TEXT
        if real_path is not None:
            self.state = RealView(real_path)


__all__ = ["BrowserSessionContext"]
