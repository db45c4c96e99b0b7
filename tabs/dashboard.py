"""Dashboard screen renderer."""

from __future__ import annotations

import html
from datetime import datetime
from typing import Callable

import streamlit as st

from models import Screen, SessionCredits
from sample_data import ACTIVE_PROJECT, GRID_MENU, RECENT_ACTIVITY
from ui_components import render_credit_pill

Navigate = Callable[[Screen], bool]


def greeting_for(hour: int) -> str:
    if 12 <= hour < 17:
        return "Good Afternoon"
    if hour >= 17:
        return "Good Evening"
    return "Good Morning"


def render_tab(credits: SessionCredits, navigate: Navigate, *, now: datetime | None = None) -> None:
    """Render the research desk landing page."""

    current = now or datetime.now()
    col_title, col_credits = st.columns([4, 1])
    with col_title:
        st.markdown(f"## {greeting_for(current.hour)}, *Researcher.*")
    with col_credits:
        render_credit_pill(credits)

    with st.container(border=True):
        st.caption(ACTIVE_PROJECT["label"])
        st.markdown(f"### {html.escape(str(ACTIVE_PROJECT['title']))}")
        st.write(ACTIVE_PROJECT["summary"])
        st.caption(f"{ACTIVE_PROJECT['queries_today']} queries today · {ACTIVE_PROJECT['updated']}")
        if st.button("Continue", key="active_project_open"):
            navigate(Screen.CHAT)

    columns = st.columns(len(GRID_MENU))
    for column, item in zip(columns, GRID_MENU):
        with column:
            st.markdown(f"**{item['title']}**")
            st.caption(str(item["description"]))
            if st.button("Open", key=f"grid_{item['id']}"):
                navigate(item["target"])  # type: ignore[arg-type]

    st.markdown("### Recent Scholarly Activity")
    for activity in RECENT_ACTIVITY:
        st.markdown(f"{html.escape(activity['query'])}  \n`{activity['tag']}` · {activity['time']}")
