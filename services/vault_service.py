"""Search and tag filtering over saved vault items."""

from __future__ import annotations

from typing import Iterable

from models import VaultItem
from sample_data import VAULT_ITEMS

SORT_KEYS = frozenset({"date", "title"})


def matches_search(item: VaultItem, text: str) -> bool:
    """Case-insensitive substring match on title, preview or any single tag."""

    needle = (text or "").lower()
    if not needle:
        return True
    if needle in item.title.lower() or needle in item.preview.lower():
        return True
    return any(needle in tag.lower() for tag in item.tags)


def toggle_filter(current: str | None, tag: str | None) -> str | None:
    """Chip behaviour: picking the active tag clears the filter."""

    if tag is None or tag == current:
        return None
    return tag


class VaultIndex:
    """Read-only view over a fixed collection of vault items.

    Only one tag filter can be active at a time.
    """

    def __init__(self, items: Iterable[VaultItem] = VAULT_ITEMS) -> None:
        self._items = tuple(items)

    @property
    def items(self) -> tuple[VaultItem, ...]:
        return self._items

    def all_tags(self) -> list[str]:
        seen: dict[str, None] = {}
        for item in self._items:
            for tag in item.tags:
                seen.setdefault(tag, None)
        return list(seen)

    def query(
        self,
        text: str = "",
        tag_filter: str | None = None,
        sort_by: str | None = None,
    ) -> tuple[VaultItem, ...]:
        results = [
            item
            for item in self._items
            if matches_search(item, text) and (not tag_filter or tag_filter in item.tags)
        ]
        if sort_by == "date":
            results.sort(key=lambda item: item.created_on, reverse=True)
        elif sort_by == "title":
            results.sort(key=lambda item: item.title.lower())
        return tuple(results)


class VaultBrowser:
    """Search box, tag chip and sort selection for one visit to the vault."""

    def __init__(self, index: VaultIndex | None = None) -> None:
        self.index = index or VaultIndex()
        self.search = ""
        self.tag_filter: str | None = None
        self.sort_by: str | None = None

    def select_tag(self, tag: str | None) -> str | None:
        self.tag_filter = toggle_filter(self.tag_filter, tag)
        return self.tag_filter

    def set_sort(self, sort_by: str | None) -> bool:
        if sort_by is not None and sort_by not in SORT_KEYS:
            return False
        self.sort_by = sort_by
        return True

    def results(self) -> tuple[VaultItem, ...]:
        return self.index.query(self.search, self.tag_filter, self.sort_by)

    def teardown(self) -> None:
        return None


__all__ = ["SORT_KEYS", "VaultBrowser", "VaultIndex", "matches_search", "toggle_filter"]
