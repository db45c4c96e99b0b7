"""Shared dataclasses for the research desk screens and backend responses."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, Sequence


class Screen(str, Enum):
    """Top-level routes the navigation controller can mount."""

    DASHBOARD = "dashboard"
    CHAT = "chat"
    SCAN = "scan"
    VAULT = "vault"
    INSIGHTS = "insights"


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class SegmentKind(str, Enum):
    TEXT = "text"
    MATH = "math"


class ScanState(str, Enum):
    CAPTURING = "capturing"
    PREVIEWING = "previewing"
    ANALYZING = "analyzing"
    READY = "ready"


class VaultKind(str, Enum):
    INQUIRY = "inquiry"
    NOTE = "note"
    DOCUMENT = "document"


class MediaKind(str, Enum):
    PDF = "pdf"
    IMAGE = "image"


class ResourceStatus(str, Enum):
    ANALYZED = "analyzed"
    REFERENCED = "referenced"


FAILURE_REASONS = frozenset(
    {"timeout", "unreadable", "unsupported", "malformed", "auth", "unavailable"}
)


@dataclass(frozen=True)
class MessageFlags:
    has_math: bool = False
    has_code: bool = False


@dataclass(frozen=True)
class Message:
    """A single chat turn. Messages are never edited once appended."""

    id: str
    role: Role
    content: str
    created_at: datetime
    flags: MessageFlags = field(default_factory=MessageFlags)

    @property
    def is_user(self) -> bool:
        return self.role is Role.USER

    def asdict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "role": self.role.value,
            "content": self.content,
            "created_at": self.created_at.isoformat(),
            "has_math": self.flags.has_math,
            "has_code": self.flags.has_code,
        }


@dataclass(frozen=True)
class Segment:
    """One contiguous, typed piece of a message body."""

    kind: SegmentKind
    content: str


@dataclass(frozen=True)
class ImageRef:
    """Image bytes captured by the camera or picked from the gallery."""

    source: str
    mime_type: str
    data: bytes = b""
    name: str | None = None
    url: str | None = None

    def as_data_url(self) -> str:
        if self.url:
            return self.url
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


@dataclass(frozen=True)
class ScanSession:
    state: ScanState = ScanState.CAPTURING
    image: ImageRef | None = None
    extracted_text: str | None = None


@dataclass(frozen=True)
class VaultItem:
    id: str
    kind: VaultKind
    title: str
    preview: str
    created_on: date
    tags: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.tags:
            raise ValueError(f"Vault item {self.id!r} requires at least one tag")


@dataclass(frozen=True)
class Resource:
    id: str
    name: str
    media_kind: MediaKind
    status: ResourceStatus


@dataclass
class SessionCredits:
    """Usage budget shared between screens.

    ``debit`` is the only mutation and never pushes the remaining balance
    below zero.
    """

    used: int
    max: int

    @property
    def remaining(self) -> int:
        return max(0, self.max - self.used)

    def debit(self, amount: int) -> int:
        """Consume up to ``amount`` credits and return how many were taken."""

        if amount <= 0:
            return 0
        taken = min(int(amount), self.remaining)
        self.used += taken
        return taken

    def label(self) -> str:
        return f"{self.used} / {self.max} credits"


@dataclass(frozen=True)
class ServiceFailure:
    """Recorded failure of a backend capability, shown with a retry affordance."""

    operation: str
    reason: str
    message: str


@dataclass(frozen=True)
class ReportArtifact:
    """Generated insights report returned by the report capability."""

    title: str
    generated_at: datetime
    sections: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ReportArtifact":
        title = str(payload.get("title") or "Research report")
        raw_ts = payload.get("generated_at")
        if isinstance(raw_ts, str):
            try:
                generated_at = datetime.fromisoformat(raw_ts)
            except ValueError:
                generated_at = datetime.now()
        else:
            generated_at = datetime.now()
        sections_field = payload.get("sections") or []
        if isinstance(sections_field, Sequence) and not isinstance(sections_field, str):
            sections = tuple(str(item) for item in sections_field)
        else:
            sections = (str(sections_field),)
        return cls(title=title, generated_at=generated_at, sections=sections)

    def asdict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "generated_at": self.generated_at.isoformat(),
            "sections": list(self.sections),
        }


__all__ = [
    "FAILURE_REASONS",
    "ImageRef",
    "MediaKind",
    "Message",
    "MessageFlags",
    "ReportArtifact",
    "Resource",
    "ResourceStatus",
    "Role",
    "ScanSession",
    "ScanState",
    "Screen",
    "Segment",
    "SegmentKind",
    "ServiceFailure",
    "SessionCredits",
    "VaultItem",
    "VaultKind",
]
