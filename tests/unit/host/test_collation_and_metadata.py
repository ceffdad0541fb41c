"""Tests for reference collations and the sidecar metadata lookup."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from seriesfolders.grouping import Collation, sort_items
from seriesfolders.host import CollationSortProvider, JsonMetadataLookup, available_collation_ids, natural_key
from seriesfolders.host.metadata import SIDECAR_FILENAME, load_metadata_records
from seriesfolders.listing_model import DirectoryItem, FileItem, GroupInfo

LIB = Path("/library")


def _names(items) -> list[str]:
    return [item.text for item in items]


class CollationTests(unittest.TestCase):
    def test_natural_key_orders_embedded_numbers(self) -> None:
        self.assertLess(natural_key("Vol 2"), natural_key("vol 10"))
        self.assertLess(natural_key("10"), natural_key("a"))

    def test_each_collation_orders_items(self) -> None:
        items = [
            FileItem(LIB / "Vol 10", "Vol 10", attributes={"title": "A Late Title"}),
            FileItem(LIB / "Vol 2", "Vol 2", opened=True, percent_finished=0.9),
            FileItem(LIB / "vol 1", "vol 1", percent_finished=0.5),
        ]
        provider = CollationSortProvider()

        self.assertEqual(_names(sort_items(items, provider.comparator_for("strcoll", False))), ["vol 1", "Vol 10", "Vol 2"])
        self.assertEqual(_names(sort_items(items, provider.comparator_for("natural", False))), ["vol 1", "Vol 2", "Vol 10"])
        self.assertEqual(_names(sort_items(items, provider.comparator_for("title", False))), ["Vol 10", "vol 1", "Vol 2"])
        self.assertEqual(
            _names(sort_items(items, provider.comparator_for("percent_unread_first", False))),
            ["Vol 10", "vol 1", "Vol 2"],
        )
        self.assertEqual(_names(sort_items(items, provider.comparator_for("natural", True))), ["Vol 10", "Vol 2", "vol 1"])

    def test_unknown_collation_falls_back_to_name(self) -> None:
        items = [DirectoryItem(LIB / "b", "b/"), DirectoryItem(LIB / "a", "a/")]
        comparator = CollationSortProvider().comparator_for("no-such-collation", False)

        self.assertEqual(_names(sort_items(items, comparator)), ["a/", "b/"])

    def test_mixed_requires_setting_and_capable_collation(self) -> None:
        self.assertFalse(CollationSortProvider(Collation("strcoll"), mixed=False).is_mixed_active())
        self.assertTrue(CollationSortProvider(Collation("natural"), mixed=True).is_mixed_active())
        self.assertFalse(CollationSortProvider(Collation("percent_unread_first"), mixed=True).is_mixed_active())
        self.assertFalse(CollationSortProvider(Collation("no-such-collation"), mixed=True).is_mixed_active())

        sort_provider = CollationSortProvider(Collation("title"), mixed=True).sort_provider()
        self.assertTrue(sort_provider.mixed_active())

    def test_available_collation_ids(self) -> None:
        self.assertEqual(
            available_collation_ids(),
            ("strcoll", "natural", "title", "percent_unread_first"),
        )


class JsonMetadataLookupTests(unittest.TestCase):
    def test_resolves_by_file_name_or_absolute_path(self) -> None:
        lookup = JsonMetadataLookup(
            {
                "dune-1.epub": {"series": "Dune", "series_index": 1},
                "/library/other/dune-2.epub": {"series": " Dune ", "series_index": 2.5},
            }
        )

        self.assertEqual(lookup(LIB / "dune-1.epub"), GroupInfo("Dune", 1.0))
        self.assertEqual(lookup(LIB / "other" / "dune-2.epub"), GroupInfo("Dune", 2.5))
        self.assertIsNone(lookup(LIB / "unknown.epub"))

    def test_invalid_records_resolve_to_no_group(self) -> None:
        lookup = JsonMetadataLookup(
            {
                "blank.epub": {"series": "   "},
                "number.epub": {"series": 7},
                "shape.epub": "Dune",
                "bool.epub": {"series": "Dune", "series_index": True},
            }
        )

        self.assertIsNone(lookup(LIB / "blank.epub"))
        self.assertIsNone(lookup(LIB / "number.epub"))
        self.assertIsNone(lookup(LIB / "shape.epub"))
        self.assertEqual(lookup(LIB / "bool.epub"), GroupInfo("Dune", 0.0))

    def test_results_are_memoized_per_path(self) -> None:
        lookup = JsonMetadataLookup({"a.epub": {"series": "Saga"}})
        first = lookup(LIB / "a.epub")
        lookup.records.clear()

        self.assertIs(lookup(LIB / "a.epub"), first)

    def test_sidecar_file_loading(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / SIDECAR_FILENAME).write_text(
                json.dumps({"a.epub": {"series": "Saga", "series_index": 3}}),
                encoding="utf-8",
            )

            lookup = JsonMetadataLookup.for_directory(root)

            self.assertEqual(lookup(root / "a.epub"), GroupInfo("Saga", 3.0))
            self.assertEqual(load_metadata_records(root / "missing.json"), {})

    def test_malformed_sidecar_is_logged_and_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sidecar = Path(tmp) / SIDECAR_FILENAME
            sidecar.write_text("{not json", encoding="utf-8")

            with self.assertLogs("seriesfolders.host.metadata", level="WARNING"):
                records = load_metadata_records(sidecar)

            self.assertEqual(records, {})


if __name__ == "__main__":
    unittest.main()
