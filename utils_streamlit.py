"""Streamlit helpers shared by the research desk screens."""

from __future__ import annotations

import time

import streamlit as st

from models import ServiceFailure
from services.scheduler import Scheduler

_FAILURE_COPY = {
    "timeout": "The service took too long to respond.",
    "unreadable": "The file could not be read.",
    "unsupported": "That file type is not supported.",
    "malformed": "The service returned an unexpected response.",
    "auth": "The service rejected our credentials.",
    "unavailable": "The service is unavailable right now.",
}


def failure_message(failure: ServiceFailure) -> str:
    """Return user-facing copy for a recorded failure."""

    headline = _FAILURE_COPY.get(failure.reason, "Something went wrong.")
    if failure.message:
        return f"{headline} ({failure.message})"
    return headline


def show_service_failure(
    failure: ServiceFailure | None,
    *,
    retry_label: str | None = None,
    key: str,
    st_module=st,
) -> bool:
    """Render a failure block; return ``True`` when the retry button was pressed."""

    if failure is None:
        return False
    st_module.error(failure_message(failure))
    if retry_label:
        return bool(st_module.button(retry_label, key=key))
    return False


def wait_for_timers(scheduler: Scheduler, *, rerun, max_wait: float = 2.5, sleep=time.sleep) -> bool:
    """Sleep until the next timer is due and trigger a rerun.

    Returns ``False`` when nothing is scheduled.
    """

    remaining = scheduler.next_due_in()
    if remaining is None:
        return False
    sleep(min(remaining, max_wait))
    rerun()
    return True


__all__ = ["failure_message", "show_service_failure", "wait_for_timers"]
