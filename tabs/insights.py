"""Academic insights screen renderer."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from sample_data import INQUIRY_DISTRIBUTION, PROGRESS_OVER_TIME, RESOURCE_UTILIZATION
from services.insights_service import InsightsBoard, activity_summary
from ui_components import back_button, render_metrics_card
from utils_streamlit import show_service_failure


def render_tab(board: InsightsBoard, on_back: Callable[[], bool]) -> None:
    """Render the static charts and the report toggle."""

    if back_button(key="insights_back"):
        on_back()
        st.rerun()
    st.markdown("## Academic Insights")

    render_metrics_card("This month", activity_summary())

    st.markdown("#### Inquiry distribution")
    st.bar_chart([dict(row) for row in INQUIRY_DISTRIBUTION], x="category", y="count")
    st.markdown("#### Progress over time")
    st.line_chart(
        {
            "complexity": [row["complexity"] for row in PROGRESS_OVER_TIME],
            "activity": [row["activity"] for row in PROGRESS_OVER_TIME],
        }
    )
    st.markdown("#### Resource utilization")
    st.bar_chart([dict(row) for row in RESOURCE_UTILIZATION], x="type", y="count")

    label = "Generating Report..." if board.generating else "Generate New Insight Report"
    if st.button(label, key="insights_generate", disabled=board.generating):
        board.generate_report()
        st.rerun()
    if show_service_failure(board.last_failure, retry_label="Try again", key="insights_retry"):
        board.generate_report()
        st.rerun()
    if board.report is not None:
        with st.expander(board.report.title, expanded=True):
            st.caption(board.report.generated_at.strftime("%Y-%m-%d %H:%M"))
            for section in board.report.sections:
                st.markdown(f"- {section}")
