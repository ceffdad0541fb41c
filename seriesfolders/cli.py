"""Command-line front door for seriesfolders.

Lists a directory with its books folded into virtual series folders, and can
step into one of those folders. Metadata comes from a JSON sidecar file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .grouping.sorting import Collation
from .host.browser import DirectoryBrowser
from .host.collation import CollationSortProvider, available_collation_ids
from .host.metadata import SIDECAR_FILENAME, JsonMetadataLookup
from .listing_model.rendering import format_listing
from .listing_model.types import Listing
from .runtime import config
from .runtime.config import GROUPING_ENABLED_KEY, MemorySettingsStore
from .runtime.machine import find_group
from .ui_theme import UITheme, available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def render_listing_text(listing: Listing, page_size: int, theme: UITheme) -> str:
    """Render the listing page holding the selection, with a page footer when paged."""
    lines = format_listing(listing, page_size, theme=theme)
    page_count = max(1, -(-len(listing.items) // max(1, page_size)))
    if page_count > 1:
        lines.append(f"page {listing.page}/{page_count}")
    return "\n".join(lines) + "\n"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List a directory with books grouped into virtual series folders."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "--metadata",
        metavar="FILE",
        default=None,
        help=f"JSON series metadata (default: {SIDECAR_FILENAME} inside the listed directory).",
    )
    parser.add_argument(
        "--collate",
        choices=available_collation_ids(),
        default=None,
        help="Collation to sort by (default: saved setting).",
    )
    parser.add_argument("--reverse", action="store_true", help="Reverse the collation order.")
    parser.add_argument("--mixed", action="store_true", help="Interleave folders and files when sorting by name.")
    parser.add_argument("--open", metavar="SERIES", default=None, help="Enter the virtual folder for SERIES.")
    parser.add_argument("--page-size", type=_positive_int, default=None, help="Rows per listing page.")
    parser.add_argument("--no-grouping", action="store_true", help="List without series grouping.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--verbose", action="store_true", help="Log grouping decisions to stderr.")
    return parser


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments, list the directory, and print the grouped rows.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    if args.metadata is not None:
        metadata_path = Path(args.metadata)
        if not metadata_path.exists():
            raise SystemExit(f"Path not found: {metadata_path}")
        lookup = JsonMetadataLookup.from_file(metadata_path)
    else:
        lookup = JsonMetadataLookup.for_directory(path)

    saved = config.load_collation()
    collation = Collation(
        collate_id=args.collate or saved.collate_id,
        reverse=args.reverse or saved.reverse,
    )
    sort_provider = CollationSortProvider(collation, mixed=args.mixed or config.load_collate_mixed())
    settings = MemorySettingsStore({GROUPING_ENABLED_KEY: "N"}) if args.no_grouping else config.JsonSettingsStore()

    browser = DirectoryBrowser(
        path,
        lookup,
        sort_provider=sort_provider,
        settings=settings,
        page_size=args.page_size or config.load_page_size(),
        stacked_covers=config.load_stacked_covers(),
    )
    listing = browser.show()

    if args.open is not None:
        found = find_group(listing.items, args.open)
        if found is None:
            raise SystemExit(f"No series folder named {args.open!r} in {path}")
        browser.open(found[1])
        assert browser.listing is not None
        listing = browser.listing

    theme = resolve_theme(args.theme, no_color=args.no_color or not sys.stdout.isatty())
    sys.stdout.write(render_listing_text(listing, browser.page_size, theme))


if __name__ == "__main__":
    main()
