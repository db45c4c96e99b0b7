"""Chat screen renderer."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from services.chat_service import ChatSession
from ui_components import back_button, render_credit_pill, render_message
from utils_streamlit import show_service_failure

_DOCK_ITEMS = ("Dashboard", "History", "Profile")


def _render_resource_dock(session: ChatSession) -> None:
    registry = session.resources
    label = "Hide resources" if registry.expanded else f"Resources ({len(registry.visible)})"
    if st.sidebar.button(label, key="resource_dock_toggle"):
        registry.toggle_visibility()
        st.rerun()
    if not registry.expanded:
        return
    for resource in registry.visible:
        col_name, col_dismiss = st.sidebar.columns([5, 1])
        col_name.markdown(f"**{resource.name}**  \n{resource.media_kind.value.upper()} · {resource.status.value}")
        if col_dismiss.button("✕", key=f"dismiss_{resource.id}"):
            registry.dismiss(resource.id)
            st.rerun()


def _render_gap_overlay(session: ChatSession) -> None:
    with st.container(border=True):
        st.markdown("### Conceptual Gap Detected")
        st.write(
            "Your inquiry touches on advanced concepts that may benefit from a focused review. "
            "We recommend exploring foundational materials before proceeding."
        )
        st.caption("Focused Review Required • 3 mins")
        col_continue, col_review = st.columns(2)
        if col_continue.button("Continue Anyway", key="gap_continue"):
            session.dismiss_gap()
            st.rerun()
        if col_review.button("Start Review", key="gap_review"):
            session.dismiss_gap()
            st.rerun()


def render_tab(session: ChatSession, on_back: Callable[[], bool]) -> None:
    """Render the conversation, resource dock and input area."""

    col_back, _, col_credits = st.columns([2, 5, 2])
    with col_back:
        if back_button("Research Desk", key="chat_back"):
            on_back()
            st.rerun()
    with col_credits:
        render_credit_pill(session.credits)

    for item in _DOCK_ITEMS:
        st.sidebar.caption(item)
    _render_resource_dock(session)

    for message in session.ledger.messages:
        render_message(message)
        st.divider()

    if session.ledger.pending_count and session.ledger.last_failure is None:
        st.caption("Thinking…")
    if show_service_failure(
        session.ledger.last_failure,
        retry_label="Retry reply",
        key="chat_retry",
    ):
        session.ledger.retry_failed()
        st.rerun()

    if session.gap_visible:
        _render_gap_overlay(session)
    elif st.button("Demo Gap", key="gap_demo"):
        session.show_gap()
        st.rerun()

    prompt = st.chat_input("Ask a research question", key="chat_input", disabled=session.gap_visible)
    if prompt and session.send(prompt):
        st.rerun()
