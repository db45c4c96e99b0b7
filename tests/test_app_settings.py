from __future__ import annotations

import pytest

import app_settings
from app_settings import load_settings

_KEYS = (
    "RESEARCH_DESK_API",
    "RESEARCH_DESK_API_KEY",
    "RESEARCH_DESK_BACKEND",
    "REPLY_DELAY_S",
    "OCR_DELAY_S",
    "REPORT_DELAY_S",
    "CREDITS_USED",
    "CREDITS_MAX",
    "REQUEST_TIMEOUT_S",
    "REQUEST_RETRIES",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in _KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(app_settings, "_safe_secret", lambda key: None)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.api_base == "http://localhost:8000"
    assert settings.api_key is None
    assert settings.backend_mode == "simulated"
    assert (settings.reply_delay, settings.ocr_delay, settings.report_delay) == (1.0, 2.0, 2.0)
    assert (settings.credits_used, settings.credits_max) == (3, 15)
    assert settings.request_attempts == 3


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("RESEARCH_DESK_API", "https://desk.example/")
    monkeypatch.setenv("RESEARCH_DESK_BACKEND", "HTTP")
    monkeypatch.setenv("REPLY_DELAY_S", "0.25")
    monkeypatch.setenv("CREDITS_USED", "7")
    monkeypatch.setenv("CREDITS_MAX", "20")

    settings = load_settings()

    assert settings.api_base == "https://desk.example"
    assert settings.backend_mode == "http"
    assert settings.reply_delay == 0.25
    assert (settings.credits_used, settings.credits_max) == (7, 20)


def test_invalid_values_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("RESEARCH_DESK_BACKEND", "carrier-pigeon")
    monkeypatch.setenv("OCR_DELAY_S", "-1")
    monkeypatch.setenv("REPORT_DELAY_S", "soon")
    monkeypatch.setenv("CREDITS_MAX", "0")
    monkeypatch.setenv("REQUEST_RETRIES", "many")

    settings = load_settings()

    assert settings.backend_mode == "simulated"
    assert settings.ocr_delay == 2.0
    assert settings.report_delay == 2.0
    assert settings.credits_max == 15
    assert settings.request_attempts == 3


def test_used_credits_capped_at_max(monkeypatch) -> None:
    monkeypatch.setenv("CREDITS_USED", "40")
    monkeypatch.setenv("CREDITS_MAX", "10")
    settings = load_settings()
    assert settings.credits_used == 10


def test_secrets_take_precedence(monkeypatch) -> None:
    monkeypatch.setenv("RESEARCH_DESK_API_KEY", "from-env")
    monkeypatch.setattr(
        app_settings,
        "_safe_secret",
        lambda key: "from-secrets" if key == "RESEARCH_DESK_API_KEY" else None,
    )
    assert load_settings().api_key == "from-secrets"


def test_zero_valued_secrets_are_kept(monkeypatch) -> None:
    monkeypatch.setenv("CREDITS_USED", "9")
    secrets = {"CREDITS_USED": 0, "REPLY_DELAY_S": 0}
    monkeypatch.setattr(app_settings, "_safe_secret", secrets.get)

    settings = load_settings()

    assert (settings.credits_used, settings.reply_delay) == (0, 0.0)
