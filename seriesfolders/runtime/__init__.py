"""Navigation overlay runtime: state machine, session, toggle, and config."""

from __future__ import annotations

from .deps import HostNavigation
from .machine import NavigationStateMachine, find_group
from .navigation import NavigationState, RealView, VirtualView, is_parent_reference, page_for_index
from .session import BrowserSessionContext
from .toggle import GroupingToggle

__all__ = [
    "BrowserSessionContext",
    "GroupingToggle",
    "HostNavigation",
    "NavigationState",
    "NavigationStateMachine",
    "RealView",
    "VirtualView",
    "find_group",
    "is_parent_reference",
    "page_for_index",
]
