"""Application configuration helpers for the research desk."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

import streamlit as st


DEFAULT_DELAYS = {
    "reply": 1.0,
    "ocr": 2.0,
    "report": 2.0,
}
DEFAULT_CREDITS = (3, 15)
BACKEND_MODES = frozenset({"simulated", "http"})


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration bundle for the research desk."""

    api_base: str
    api_key: str | None
    backend_mode: str
    reply_delay: float
    ocr_delay: float
    report_delay: float
    credits_used: int
    credits_max: int
    request_timeout: float
    request_attempts: int


def _safe_secret(key: str) -> Any:
    """Return a Streamlit secret when available."""

    try:
        return st.secrets.get(key)
    except Exception:
        return None


def _setting(key: str) -> Any:
    value = _safe_secret(key)
    return value if value is not None else os.getenv(key)


def _coerce_float(value: Any, default: float) -> float:
    if value is None or value == "":
        return default
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 0 else default


def _coerce_int(value: Any, default: int, *, minimum: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= minimum else default


def load_settings() -> AppSettings:
    """Collect runtime configuration from environment and secrets."""

    api_base = _setting("RESEARCH_DESK_API") or "http://localhost:8000"
    api_key = _setting("RESEARCH_DESK_API_KEY")
    backend_mode = str(_setting("RESEARCH_DESK_BACKEND") or "simulated").strip().lower()
    if backend_mode not in BACKEND_MODES:
        backend_mode = "simulated"
    credits_max = _coerce_int(_setting("CREDITS_MAX"), DEFAULT_CREDITS[1], minimum=1)
    credits_used = min(_coerce_int(_setting("CREDITS_USED"), DEFAULT_CREDITS[0]), credits_max)
    return AppSettings(
        api_base=str(api_base).rstrip("/"),
        api_key=api_key or None,
        backend_mode=backend_mode,
        reply_delay=_coerce_float(_setting("REPLY_DELAY_S"), DEFAULT_DELAYS["reply"]),
        ocr_delay=_coerce_float(_setting("OCR_DELAY_S"), DEFAULT_DELAYS["ocr"]),
        report_delay=_coerce_float(_setting("REPORT_DELAY_S"), DEFAULT_DELAYS["report"]),
        credits_used=credits_used,
        credits_max=credits_max,
        request_timeout=_coerce_float(_setting("REQUEST_TIMEOUT_S"), 10.0),
        request_attempts=_coerce_int(_setting("REQUEST_RETRIES"), 3, minimum=1),
    )


__all__ = ["AppSettings", "BACKEND_MODES", "DEFAULT_CREDITS", "DEFAULT_DELAYS", "load_settings"]
