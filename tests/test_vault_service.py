"""Tests for vault search, tag filters and sorting."""

from __future__ import annotations

from datetime import date

import pytest

from models import VaultItem, VaultKind
from services.vault_service import VaultBrowser, VaultIndex, matches_search, toggle_filter


@pytest.fixture
def index() -> VaultIndex:
    return VaultIndex()


def _ids(items) -> list[str]:
    return [item.id for item in items]


def test_dark_matter_search_without_filter(index: VaultIndex) -> None:
    titles = [item.title for item in index.query("dark matter")]
    assert titles == ["Dark matter and galaxy rotation curves", "NFW Profile Analysis"]
    assert "Renaissance Art Movements" not in titles


def test_dark_matter_search_with_physics_filter(index: VaultIndex) -> None:
    assert _ids(index.query("dark matter", "Physics")) == ["1", "2"]


def test_empty_query_returns_everything_in_stored_order(index: VaultIndex) -> None:
    assert _ids(index.query()) == ["1", "2", "3", "4", "5", "6"]


def test_search_is_case_insensitive_over_title_preview_and_tags(index: VaultIndex) -> None:
    assert _ids(index.query("RENAISSANCE")) == ["4"]
    assert _ids(index.query("bell's theorem")) == ["3"]
    assert _ids(index.query("statistics")) == ["6"]


def test_search_does_not_match_across_tags() -> None:
    item = VaultItem("x", VaultKind.NOTE, "Title", "Preview", date(2026, 1, 1), ("Dark", "Matter"))
    assert not matches_search(item, "dark matter")
    assert matches_search(item, "MAT")


@pytest.mark.parametrize("text", ["", "dark", "analysis", "physics", "zzz"])
@pytest.mark.parametrize("tag", [None, "Physics", "Art", "Missing"])
def test_adding_constraints_never_grows_results(index: VaultIndex, text: str, tag: str | None) -> None:
    unfiltered = set(_ids(index.query()))
    searched = set(_ids(index.query(text)))
    both = set(_ids(index.query(text, tag)))
    assert searched <= unfiltered
    assert both <= searched


def test_all_tags_in_first_appearance_order(index: VaultIndex) -> None:
    tags = index.all_tags()
    assert tags[:4] == ["Physics", "Astrophysics", "Dark Matter", "Formula"]
    assert len(tags) == len(set(tags))
    assert tags[-1] == "Environment"


def test_sorting(index: VaultIndex) -> None:
    by_date = index.query(sort_by="date")
    assert [item.created_on for item in by_date] == sorted((item.created_on for item in by_date), reverse=True)
    by_title = index.query(sort_by="title")
    assert [item.title.lower() for item in by_title] == sorted(item.title.lower() for item in by_title)


def test_toggle_filter() -> None:
    assert toggle_filter(None, "Physics") == "Physics"
    assert toggle_filter("Physics", "Physics") is None
    assert toggle_filter("Physics", "Art") == "Art"
    assert toggle_filter("Physics", None) is None


def test_browser_clearing_filters_restores_full_list() -> None:
    browser = VaultBrowser()
    browser.search = "quantum"
    browser.select_tag("Physics")
    assert _ids(browser.results()) == ["3"]

    browser.search = ""
    browser.select_tag("Physics")

    assert browser.tag_filter is None
    assert len(browser.results()) == 6


def test_browser_rejects_unknown_sort() -> None:
    browser = VaultBrowser()
    assert not browser.set_sort("size")
    assert browser.sort_by is None
    assert browser.set_sort("title")
    assert browser.results()[0].title == "Climate Change Data Analysis"


def test_vault_item_requires_a_tag() -> None:
    with pytest.raises(ValueError):
        VaultItem("y", VaultKind.NOTE, "Untagged", "", date(2026, 1, 1), ())
