"""Research vault screen renderer."""

from __future__ import annotations

import html
from typing import Callable

import streamlit as st

from services.vault_service import VaultBrowser
from ui_components import back_button, toggle_group

_SORT_OPTIONS = {"Saved order": None, "Newest": "date", "Title": "title"}


def render_tab(browser: VaultBrowser, on_back: Callable[[], bool]) -> None:
    """Render search, tag chips and matching vault items."""

    if back_button(key="vault_back"):
        on_back()
        st.rerun()
    st.markdown("## Research Vault")

    browser.search = st.text_input(
        "Search",
        value=browser.search,
        placeholder="Search inquiries, notes, documents…",
        key="vault_search",
    )

    tags = browser.index.all_tags()
    chip_columns = st.columns(min(len(tags) + 1, 8))
    if chip_columns[0].button("All", key="vault_tag_all", type="primary" if browser.tag_filter is None else "secondary"):
        browser.select_tag(None)
        st.rerun()
    for offset, tag in enumerate(tags, start=1):
        column = chip_columns[offset % len(chip_columns)]
        selected = browser.tag_filter == tag
        if column.button(tag, key=f"vault_tag_{tag}", type="primary" if selected else "secondary"):
            browser.select_tag(tag)
            st.rerun()

    sort_label = toggle_group("Sort", list(_SORT_OPTIONS), key="vault_sort")
    browser.set_sort(_SORT_OPTIONS[sort_label])

    results = browser.results()
    st.caption(f"{len(results)} item(s)")
    for item in results:
        with st.container(border=True):
            st.markdown(f"**{html.escape(item.title)}**  \n{item.kind.value.title()} · {item.created_on.isoformat()}")
            st.write(item.preview)
            st.caption(" ".join(f"#{tag}" for tag in item.tags))
