"""Streamlit entry point for the research desk."""

from __future__ import annotations

import logging

import streamlit as st

from app_settings import AppSettings, load_settings
from models import Screen
from services.assistant_backend import build_backend
from services.navigation import NavigationController
from services.scheduler import Scheduler
from tabs import chat as chat_tab
from tabs import dashboard, insights, scan, vault
from utils_streamlit import wait_for_timers

LOGGER = logging.getLogger(__name__)

_RERUN_FN = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)

_PAGE_CSS = """
<style>
.credit-pill {text-align:right;padding:0.4rem 1rem;border-radius:999px;border:1px solid rgba(10,25,47,0.08);}
</style>
"""


def _trigger_rerun():
    if _RERUN_FN:
        _RERUN_FN()


def build_controller(settings: AppSettings, scheduler: Scheduler | None = None) -> NavigationController:
    """Wire the scheduler, backend and navigation for one browser session."""

    scheduler = scheduler or Scheduler()
    backend = build_backend(settings)
    LOGGER.info("Research desk using %s backend", settings.backend_mode)
    return NavigationController.from_settings(settings, scheduler, backend)


def _get_controller() -> NavigationController:
    if "navigation" not in st.session_state:
        st.session_state.navigation = build_controller(load_settings())
    return st.session_state.navigation


def _render_active(nav: NavigationController) -> None:
    screen = nav.screen
    if screen is Screen.CHAT:
        chat_tab.render_tab(nav.active, nav.back)
    elif screen is Screen.SCAN:
        scan.render_tab(nav.active, nav.back)
    elif screen is Screen.VAULT:
        vault.render_tab(nav.active, nav.back)
    elif screen is Screen.INSIGHTS:
        insights.render_tab(nav.active, nav.back)
    else:
        dashboard.render_tab(nav.credits, _navigate_and_rerun(nav))


def _navigate_and_rerun(nav: NavigationController):
    def _navigate(target: Screen) -> bool:
        moved = nav.navigate(target)
        if moved:
            _trigger_rerun()
        return moved

    return _navigate


def _render_app() -> None:
    st.set_page_config(page_title="Research Desk", layout="wide")
    st.markdown(_PAGE_CSS, unsafe_allow_html=True)

    nav = _get_controller()
    nav.scheduler.run_due()
    _render_active(nav)
    wait_for_timers(nav.scheduler, rerun=_trigger_rerun)


def main() -> None:
    """Streamlit entry point for the research desk."""

    _render_app()


if __name__ == "__main__":
    main()
