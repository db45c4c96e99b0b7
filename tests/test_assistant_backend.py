from __future__ import annotations

from datetime import datetime

import pytest

from app_settings import AppSettings
from backend_client import ServiceError
from models import ImageRef, Message, Role
from sample_data import SIMULATED_OCR_TEXT, SIMULATED_REPLY
from services.assistant_backend import HttpBackend, SimulatedBackend, build_backend


class FakeClient:
    def __init__(self, payload: dict) -> None:
        self.payload = payload
        self.calls: list[tuple[str, object]] = []

    def complete_conversation(self, history, text):
        self.calls.append(("complete", (history, text)))
        return self.payload

    def extract_text(self, *, image, mime_type, name=None):
        self.calls.append(("extract", (image, mime_type, name)))
        return self.payload

    def generate_report(self, summary):
        self.calls.append(("report", dict(summary)))
        return self.payload


def _settings(mode: str) -> AppSettings:
    return AppSettings(
        api_base="https://api.example",
        api_key="k",
        backend_mode=mode,
        reply_delay=1.0,
        ocr_delay=2.0,
        report_delay=2.0,
        credits_used=3,
        credits_max=15,
        request_timeout=5.0,
        request_attempts=2,
    )


def test_simulated_backend_returns_canned_text() -> None:
    backend = SimulatedBackend()
    assert backend.complete_conversation([], "anything") == SIMULATED_REPLY
    assert backend.extract_text(ImageRef(source="camera", mime_type="image/jpeg")) == SIMULATED_OCR_TEXT
    report = backend.generate_report({"total_inquiries": 34})
    assert report.sections == ("total_inquiries: 34",)


def test_http_backend_serialises_history() -> None:
    client = FakeClient({"content": "answer"})
    history = [Message("msg-0001", Role.USER, "question", datetime(2026, 1, 21, 9, 0))]

    assert HttpBackend(client).complete_conversation(history, "follow up") == "answer"

    sent_history, text = client.calls[0][1]
    assert text == "follow up"
    assert sent_history[0]["role"] == "user"
    assert sent_history[0]["created_at"] == "2026-01-21T09:00:00"


def test_http_backend_sends_image_as_data_url() -> None:
    client = FakeClient({"text": "page text"})
    image = ImageRef(source="gallery", mime_type="image/png", data=b"\x89PNG", name="page.png")

    assert HttpBackend(client).extract_text(image) == "page text"
    assert client.calls[0][1] == ("data:image/png;base64,iVBORw==", "image/png", "page.png")


@pytest.mark.parametrize(
    ("method", "args"),
    [
        ("complete_conversation", ([], "hi")),
        ("extract_text", (ImageRef(source="camera", mime_type="image/jpeg", url="https://x/frame.jpg"),)),
        ("generate_report", ({},)),
    ],
)
def test_http_backend_flags_missing_fields(method, args) -> None:
    backend = HttpBackend(FakeClient({}))
    with pytest.raises(ServiceError) as excinfo:
        getattr(backend, method)(*args)
    assert excinfo.value.reason == "malformed"


def test_http_backend_parses_report() -> None:
    client = FakeClient({"title": "Weekly", "generated_at": "2026-01-21T10:30:00", "sections": ["a", "b"]})
    report = HttpBackend(client).generate_report({"total_inquiries": 34})
    assert report.title == "Weekly"
    assert report.generated_at == datetime(2026, 1, 21, 10, 30)
    assert report.sections == ("a", "b")


def test_build_backend_follows_mode() -> None:
    assert isinstance(build_backend(_settings("simulated")), SimulatedBackend)
    backend = build_backend(_settings("http"))
    assert isinstance(backend, HttpBackend)
    assert backend.client.base_url == "https://api.example"
    assert backend.client.max_attempts == 2
