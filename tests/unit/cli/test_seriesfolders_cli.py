"""CLI argument and output tests for ``seriesfolders.cli.main``."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from seriesfolders import cli
from seriesfolders.host.metadata import SIDECAR_FILENAME
from seriesfolders.listing_model import FOLDER_GLYPH


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        root = Path(self._tmp.name).resolve()
        self.library = root / "library"
        self.library.mkdir()
        for name in ("Dune 1.epub", "Dune 2.epub", "Solo.epub"):
            (self.library / name).write_text("", encoding="utf-8")
        (self.library / SIDECAR_FILENAME).write_text(
            json.dumps(
                {
                    "Dune 1.epub": {"series": "Dune", "series_index": 1},
                    "Dune 2.epub": {"series": "Dune", "series_index": 2},
                }
            ),
            encoding="utf-8",
        )
        config_patch = mock.patch("seriesfolders.runtime.config.CONFIG_PATH", root / "config.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, *argv: str) -> list[str]:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            cli.main(list(argv))
        return stdout.getvalue().splitlines()

    def test_lists_grouped_directory(self) -> None:
        lines = self._run(str(self.library), "--no-color")

        self.assertEqual(lines[0], str(self.library))
        self.assertEqual(lines[1:], ["  ../", f"  Dune/  2 {FOLDER_GLYPH}", "  Solo.epub"])

    def test_open_enters_series_folder(self) -> None:
        lines = self._run(str(self.library), "--open", "Dune")

        self.assertEqual(lines, ["Dune", "  ../", "  Dune 1.epub", "  Dune 2.epub"])

    def test_no_grouping_lists_plain_files(self) -> None:
        lines = self._run(str(self.library), "--no-grouping")

        self.assertEqual(lines[1:], ["  ../", "  Dune 1.epub", "  Dune 2.epub", "  Solo.epub"])

    def test_explicit_metadata_file_and_paging(self) -> None:
        metadata = self.library.parent / "meta.json"
        metadata.write_text(json.dumps({"Solo.epub": {"series": "Solo"}}), encoding="utf-8")

        lines = self._run(str(self.library), "--metadata", str(metadata), "--page-size", "2")

        self.assertEqual(lines, [str(self.library), "  ../", "  Dune 1.epub", "page 1/2"])

    def test_defaults_to_given_default_path(self) -> None:
        stdout = io.StringIO()
        with mock.patch("sys.stdout", stdout):
            cli.main([], default_path=self.library)

        self.assertIn(f"  Dune/  2 {FOLDER_GLYPH}", stdout.getvalue().splitlines())

    def test_errors_exit_with_message(self) -> None:
        with self.assertRaises(SystemExit):
            self._run(str(self.library / "Solo.epub"))
        with self.assertRaises(SystemExit):
            self._run(str(self.library), "--open", "Missing")
        with self.assertRaises(SystemExit):
            self._run(str(self.library), "--metadata", str(self.library / "nope.json"))
        with self.assertRaises(SystemExit), mock.patch("sys.stderr", io.StringIO()):
            self._run(str(self.library), "--page-size", "0")


if __name__ == "__main__":
    unittest.main()
