"""Backend capabilities consumed by the chat, scan and insights screens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Mapping, Protocol, Sequence

from backend_client import BackendAPIClient, ServiceError
from models import ImageRef, Message, ReportArtifact
from sample_data import SIMULATED_OCR_TEXT, SIMULATED_REPLY

if TYPE_CHECKING:
    from app_settings import AppSettings


class AssistantBackend(Protocol):
    """Slow external services the research desk talks to."""

    def complete_conversation(self, history: Sequence[Message], text: str) -> str:
        ...

    def extract_text(self, image: ImageRef) -> str:
        ...

    def generate_report(self, summary: Mapping[str, Any]) -> ReportArtifact:
        ...


class SimulatedBackend:
    """Deterministic stand-in returning the prototype's canned responses."""

    def __init__(self, *, reply: str = SIMULATED_REPLY, ocr_text: str = SIMULATED_OCR_TEXT) -> None:
        self.reply = reply
        self.ocr_text = ocr_text

    def complete_conversation(self, history: Sequence[Message], text: str) -> str:
        return self.reply

    def extract_text(self, image: ImageRef) -> str:
        return self.ocr_text

    def generate_report(self, summary: Mapping[str, Any]) -> ReportArtifact:
        sections = tuple(f"{key}: {value}" for key, value in summary.items())
        return ReportArtifact(title="Academic insight report", generated_at=datetime.now(), sections=sections)


def _required_text(payload: Mapping[str, Any], key: str, operation: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ServiceError("malformed", f"{operation} response missing '{key}'")
    return value


@dataclass
class HttpBackend:
    """Adapts :class:`BackendAPIClient` payloads to the capability interface."""

    client: BackendAPIClient

    def complete_conversation(self, history: Sequence[Message], text: str) -> str:
        payload = self.client.complete_conversation([message.asdict() for message in history], text)
        return _required_text(payload, "content", "complete_conversation")

    def extract_text(self, image: ImageRef) -> str:
        payload = self.client.extract_text(
            image=image.as_data_url(),
            mime_type=image.mime_type,
            name=image.name,
        )
        return _required_text(payload, "text", "extract_text")

    def generate_report(self, summary: Mapping[str, Any]) -> ReportArtifact:
        payload = self.client.generate_report(summary)
        if not payload.get("title"):
            raise ServiceError("malformed", "generate_report response missing 'title'")
        return ReportArtifact.from_dict(payload)


def build_backend(settings: "AppSettings") -> AssistantBackend:
    """Return the backend selected by ``settings.backend_mode``."""

    if settings.backend_mode == "http":
        client = BackendAPIClient(
            base_url=settings.api_base,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
            max_attempts=settings.request_attempts,
        )
        return HttpBackend(client)
    return SimulatedBackend()


__all__ = ["AssistantBackend", "HttpBackend", "SimulatedBackend", "build_backend"]
