"""Grouping pass: fold files sharing a group key into synthetic directories.

The pass is pure with respect to its input list. It returns either the very
same list object (nothing to do) or a new, fully ordered list in which each
multi-member group replaces its members at the slot of the first one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from ..listing_model.types import (
    FileItem,
    GoUpItem,
    GroupInfo,
    Item,
    SyntheticGroup,
    is_directory_like,
    with_sort_defaults,
)
from .cache import GroupContentsCache
from .sorting import Collation, SortProvider, sort_items

logger = logging.getLogger(__name__)

MetadataLookup = Callable[[Path], GroupInfo | None]


@dataclass
class _PendingGroup:
    """Members collected for one group key during a pass."""

    group_key: str
    slot: int
    members: list[tuple[float, FileItem]] = field(default_factory=list)

    def materialize(self, cache: GroupContentsCache) -> Item:
        """Return the row that takes this group's slot.

        A single member stands for itself; larger groups become a
        ``SyntheticGroup`` whose members are ranked and published to ``cache``.
        """
        if len(self.members) == 1:
            return self.members[0][1]

        first = self.members[0][1]
        ranked = tuple(item for _rank, item in sorted(self.members, key=lambda pair: pair[0]))
        attributes = dict(first.attributes)
        attributes["mode"] = "directory"
        group = SyntheticGroup(
            path=Path(f"{first.path.parent}/{self.group_key}"),
            group_key=self.group_key,
            members=ranked,
            sort_percent=first.sort_percent or 0.0,
            percent_finished=first.percent_finished or 0.0,
            opened=bool(first.opened),
            attributes=MappingProxyType(attributes),
        )
        cache.publish(group.path, ranked)
        return group


class GroupingEngine:
    """Turn a flat listing into one with synthetic group directories."""

    def __init__(
        self,
        lookup: MetadataLookup,
        sort_provider: SortProvider,
        cache: GroupContentsCache,
    ) -> None:
        self.lookup = lookup
        self.sort_provider = sort_provider
        self.cache = cache

    def process(
        self,
        items: list[Item],
        collation: Collation,
        *,
        synthetic_view: bool = False,
    ) -> list[Item]:
        """Group ``items`` and return the reordered listing.

        Returns ``items`` itself when the listing is a synthetic view or when
        every file belongs to one single group (an already organized folder).
        """
        if synthetic_view:
            logger.debug("Listing is a synthetic view, not regrouping")
            return items

        go_up: GoUpItem | None = None
        processed: list[Item | _PendingGroup] = []
        pending: dict[str, _PendingGroup] = {}
        file_count = 0
        ungrouped_count = 0

        for raw_item in items:
            if isinstance(raw_item, GoUpItem):
                if go_up is None:
                    go_up = raw_item
                continue

            item = with_sort_defaults(raw_item)
            if isinstance(item, FileItem):
                file_count += 1
                info = self.lookup(item.path)
                if info is None:
                    ungrouped_count += 1
                else:
                    group = pending.get(info.group_key)
                    if group is None:
                        logger.debug("Found group %r", info.group_key)
                        group = _PendingGroup(group_key=info.group_key, slot=len(processed))
                        pending[info.group_key] = group
                        processed.append(group)
                    group.members.append((info.group_rank, item))
                    continue
            processed.append(item)

        if len(pending) == 1 and ungrouped_count == 0 and file_count > 0:
            logger.debug("Skipping grouping, all files share one group")
            return items

        for group in pending.values():
            processed[group.slot] = group.materialize(self.cache)

        entries: list[Item] = [entry for entry in processed if not isinstance(entry, _PendingGroup)]
        less_than = self.sort_provider.comparator_for(collation.collate_id, collation.reverse)
        if self.sort_provider.mixed_active() and collation.is_name_like:
            ordered = sort_items(entries, less_than)
        else:
            directories = sort_items((entry for entry in entries if is_directory_like(entry)), less_than)
            files = [entry for entry in entries if not is_directory_like(entry)]
            ordered = directories + files

        logger.debug("Grouped %d files into %d groups", file_count - ungrouped_count, len(pending))
        if go_up is not None:
            return [go_up, *ordered]
        return ordered


__all__ = ["GroupingEngine", "MetadataLookup"]
