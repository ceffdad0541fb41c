"""Formatting helpers for listing rows."""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme
from .types import GoUpItem, Item, Listing, SyntheticGroup, is_directory_like


def format_listing_row(item: Item, selected: bool = False, theme: UITheme | None = None) -> str:
    """Render one listing row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    marker = f"{active_theme.row_marker}› {reset}" if selected else "  "
    if isinstance(item, GoUpItem):
        return f"{marker}{active_theme.row_go_up}{item.text}{reset}"
    if isinstance(item, SyntheticGroup):
        name = f"{item.text}/"
        badge = f"  {active_theme.row_badge}{item.badge}{reset}"
        return f"{marker}{active_theme.row_group}{name}{reset}{badge}"
    if is_directory_like(item):
        return f"{marker}{active_theme.row_dir}{item.text}{reset}"
    return f"{marker}{active_theme.row_file}{item.text}{reset}"


def format_listing(listing: Listing, page_size: int, theme: UITheme | None = None) -> list[str]:
    """Render the current page of ``listing`` with its title as the first row."""
    active_theme = theme or DEFAULT_THEME
    page_size = max(1, page_size)
    first = (max(1, listing.page) - 1) * page_size
    rows = [f"{active_theme.title}{listing.title}{active_theme.reset}"]
    for offset, item in enumerate(listing.items[first : first + page_size], start=1):
        rows.append(format_listing_row(item, selected=offset == listing.selected, theme=active_theme))
    return rows


__all__ = ["format_listing_row", "format_listing"]
