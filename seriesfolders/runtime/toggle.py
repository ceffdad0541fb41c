"""Feature toggle and file-browser settings menu entry for series grouping."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .config import GROUPING_ENABLED_KEY, SettingsStore

logger = logging.getLogger(__name__)

MENU_TEXT = "Group book series into folders"
MENU_MARKER = "_series_grouping_menu_item"


class GroupingToggle:
    """Persisted on/off switch for grouping, enabled unless explicitly disabled.

    The flag is stored as ``"Y"``/``"N"`` so a missing value and an explicit
    ``False`` can never be confused.
    """

    def __init__(self, store: SettingsStore, on_change: Callable[[], object] | None = None) -> None:
        self.store = store
        self.on_change = on_change

    def is_enabled(self) -> bool:
        return self.store.get(GROUPING_ENABLED_KEY) != "N"

    def set_enabled(self, enabled: bool) -> None:
        """Persist ``enabled`` and refresh the listing through ``on_change``."""
        self.store.set(GROUPING_ENABLED_KEY, "Y" if enabled else "N")
        logger.debug("Series grouping %s", "enabled" if enabled else "disabled")
        if self.on_change is not None:
            self.on_change()

    def toggle(self) -> bool:
        enabled = not self.is_enabled()
        self.set_enabled(enabled)
        return enabled

    def menu_entry(self) -> dict[str, object]:
        return {
            "text": MENU_TEXT,
            "separator": True,
            "checked_func": self.is_enabled,
            "callback": self.toggle,
            MENU_MARKER: True,
        }

    def add_to_menu(self, sub_items: list[dict[str, object]]) -> bool:
        """Append the menu entry to ``sub_items`` once; return whether it was added."""
        if any(item.get(MENU_MARKER) for item in sub_items):
            return False
        sub_items.append(self.menu_entry())
        return True


__all__ = ["GroupingToggle", "MENU_MARKER", "MENU_TEXT"]
