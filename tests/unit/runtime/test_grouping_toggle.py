"""Tests for the grouping feature toggle and its settings-menu entry."""

from __future__ import annotations

import unittest
from unittest import mock

from seriesfolders.runtime import GroupingToggle
from seriesfolders.runtime.config import GROUPING_ENABLED_KEY, MemorySettingsStore
from seriesfolders.runtime.toggle import MENU_MARKER, MENU_TEXT


class GroupingToggleTests(unittest.TestCase):
    def test_enabled_unless_explicitly_disabled(self) -> None:
        self.assertTrue(GroupingToggle(MemorySettingsStore()).is_enabled())
        self.assertTrue(GroupingToggle(MemorySettingsStore({GROUPING_ENABLED_KEY: "Y"})).is_enabled())
        self.assertFalse(GroupingToggle(MemorySettingsStore({GROUPING_ENABLED_KEY: "N"})).is_enabled())

    def test_set_enabled_persists_flag_and_fires_refresh(self) -> None:
        store = MemorySettingsStore()
        on_change = mock.Mock()
        toggle = GroupingToggle(store, on_change=on_change)

        toggle.set_enabled(False)

        self.assertEqual(store.values[GROUPING_ENABLED_KEY], "N")
        self.assertFalse(toggle.is_enabled())
        on_change.assert_called_once_with()

        self.assertTrue(toggle.toggle())
        self.assertEqual(store.values[GROUPING_ENABLED_KEY], "Y")
        self.assertEqual(on_change.call_count, 2)

    def test_menu_entry_tracks_current_state(self) -> None:
        toggle = GroupingToggle(MemorySettingsStore())
        entry = toggle.menu_entry()

        self.assertEqual(entry["text"], MENU_TEXT)
        self.assertTrue(entry[MENU_MARKER])
        self.assertTrue(entry["checked_func"]())

        entry["callback"]()

        self.assertFalse(entry["checked_func"]())

    def test_add_to_menu_is_idempotent(self) -> None:
        toggle = GroupingToggle(MemorySettingsStore())
        sub_items: list[dict[str, object]] = [{"text": "Show hidden files"}]

        self.assertTrue(toggle.add_to_menu(sub_items))
        self.assertFalse(toggle.add_to_menu(sub_items))
        self.assertFalse(GroupingToggle(MemorySettingsStore()).add_to_menu(sub_items))

        self.assertEqual(len(sub_items), 2)


if __name__ == "__main__":
    unittest.main()
