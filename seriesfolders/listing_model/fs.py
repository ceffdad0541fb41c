"""Directory scanning into listing items for the reference host."""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType

from .types import DirectoryItem, FileItem, GoUpItem, Item


def list_directory_items(
    directory: Path,
    show_hidden: bool = False,
    include_go_up: bool = True,
    go_up_text: str = "../",
) -> tuple[list[Item], Exception | None]:
    """List ``directory`` as listing items, directories first.

    Returns ``(items, scan_error)``. ``scan_error`` is set when the directory
    cannot be scanned; ``items`` then holds only the go-up row (if any).
    The go-up row points at ``directory / ".."`` the way a native file
    chooser addresses its parent.
    """
    items: list[Item] = []
    if include_go_up and directory.parent != directory:
        items.append(GoUpItem(path=directory / "..", text=go_up_text))

    directories: list[DirectoryItem] = []
    files: list[FileItem] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False

                child_path = Path(child.path)
                if is_dir:
                    directories.append(
                        DirectoryItem(path=child_path, text=f"{name}/", attributes=MappingProxyType({"mode": "directory"}))
                    )
                else:
                    files.append(FileItem(path=child_path, text=name, attributes=MappingProxyType({"mode": "file"})))
    except (PermissionError, OSError) as exc:
        return items, exc

    directories.sort(key=lambda item: item.path.name.lower())
    files.sort(key=lambda item: item.path.name.lower())
    items.extend(directories)
    items.extend(files)
    return items, None


__all__ = ["list_directory_items"]
