"""Attachment panel state for the chat screen."""

from __future__ import annotations

from typing import Iterable

from models import Resource


class ResourceRegistry:
    """Fixed set of attached resources with a collapsible panel."""

    def __init__(self, resources: Iterable[Resource]) -> None:
        self._resources = tuple(resources)
        self._dismissed: set[str] = set()
        self.expanded = False

    @property
    def visible(self) -> tuple[Resource, ...]:
        return tuple(item for item in self._resources if item.id not in self._dismissed)

    def toggle_visibility(self) -> bool:
        self.expanded = not self.expanded
        return self.expanded

    def dismiss(self, resource_id: str) -> bool:
        """Hide a resource for the rest of the session; there is no undo."""

        if resource_id in self._dismissed:
            return False
        if not any(item.id == resource_id for item in self._resources):
            return False
        self._dismissed.add(resource_id)
        return True


__all__ = ["ResourceRegistry"]
