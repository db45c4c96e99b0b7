"""Shared fixtures: a manual clock so timers fire only when a test says so."""

from __future__ import annotations

from datetime import datetime

import pytest

from backend_client import ServiceError
from models import ReportArtifact
from services.scheduler import ManualClock, Scheduler


class RecordingBackend:
    """Backend stub that echoes inputs and can be told to fail."""

    def __init__(self) -> None:
        self.conversations: list[tuple[int, str]] = []
        self.images: list[object] = []
        self.reports: list[dict] = []
        self.fail_with: ServiceError | None = None

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def complete_conversation(self, history, text):
        self._maybe_fail()
        self.conversations.append((len(history), text))
        return f"reply to {text}"

    def extract_text(self, image):
        self._maybe_fail()
        self.images.append(image)
        return "extracted text"

    def generate_report(self, summary):
        self._maybe_fail()
        self.reports.append(dict(summary))
        return ReportArtifact(title="Report", generated_at=datetime(2026, 1, 21, 9, 0))


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def scheduler(clock: ManualClock) -> Scheduler:
    return Scheduler(clock)


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()
