from __future__ import annotations

from sample_data import RESOURCES
from services.resource_registry import ResourceRegistry


def test_dismiss_hides_resource_once() -> None:
    registry = ResourceRegistry(RESOURCES)
    assert [item.id for item in registry.visible] == ["1", "2", "3"]

    assert registry.dismiss("2")
    assert [item.id for item in registry.visible] == ["1", "3"]
    assert not registry.dismiss("2")
    assert [item.id for item in registry.visible] == ["1", "3"]


def test_dismiss_unknown_id_is_noop() -> None:
    registry = ResourceRegistry(RESOURCES)
    assert not registry.dismiss("404")
    assert len(registry.visible) == 3


def test_toggle_visibility_only_flips_panel() -> None:
    registry = ResourceRegistry(RESOURCES)
    registry.dismiss("1")

    assert registry.toggle_visibility()
    assert not registry.toggle_visibility()
    assert [item.id for item in registry.visible] == ["2", "3"]
