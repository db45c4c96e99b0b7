"""Document capture workflow: camera or gallery, preview, OCR, results."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from backend_client import ServiceError
from models import ImageRef, ScanSession, ScanState, ServiceFailure
from sample_data import CAMERA_FRAME_URL
from services.assistant_backend import AssistantBackend
from services.scheduler import CancellationToken, Scheduler

logger = logging.getLogger(__name__)

ALLOWED_ACTIONS: dict[ScanState, frozenset[str]] = {
    ScanState.CAPTURING: frozenset({"capture", "pick_from_gallery"}),
    ScanState.PREVIEWING: frozenset({"retake", "analyze"}),
    ScanState.ANALYZING: frozenset(),
    ScanState.READY: frozenset({"retake"}),
}

_IMAGE_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
)


def sniff_image_type(data: bytes) -> str | None:
    """Return the MIME type implied by the leading bytes, if it is an image."""

    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    for signature, mime_type in _IMAGE_SIGNATURES:
        if data.startswith(signature):
            return mime_type
    return None


def _read_bytes(source: Any) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    getvalue = getattr(source, "getvalue", None)
    if callable(getvalue):
        return bytes(getvalue())
    read = getattr(source, "read", None)
    if callable(read):
        return bytes(read())
    raise ValueError(f"cannot read image data from {type(source).__name__}")


class CapturePipeline:
    """State machine behind the scan screen.

    Every operation returns ``True`` when it was accepted. Calls that are not
    valid for the current state are rejected without touching the session.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        backend: AssistantBackend,
        *,
        ocr_delay: float = 2.0,
        read_delay: float = 0.0,
    ) -> None:
        self.token = CancellationToken("scan")
        self._scheduler = scheduler
        self._backend = backend
        self.ocr_delay = ocr_delay
        self.read_delay = read_delay
        self.session = ScanSession()
        self.last_failure: ServiceFailure | None = None
        self.flash_enabled = False
        self._generation = 0
        self._read_pending = False

    @property
    def state(self) -> ScanState:
        return self.session.state

    @property
    def reading(self) -> bool:
        return self._read_pending

    def can(self, action: str) -> bool:
        return action in ALLOWED_ACTIONS[self.state]

    def toggle_flash(self) -> bool:
        self.flash_enabled = not self.flash_enabled
        return self.flash_enabled

    def capture(self) -> bool:
        if not self._accept("capture"):
            return False
        self._generation += 1
        self._read_pending = False
        frame = ImageRef(source="camera", mime_type="image/jpeg", url=CAMERA_FRAME_URL)
        self.session = ScanSession(state=ScanState.PREVIEWING, image=frame)
        self.last_failure = None
        return True

    def pick_from_gallery(self, file: Any, *, name: str | None = None) -> bool:
        """Start reading ``file``; the pipeline moves to preview once it decodes."""

        if not self._accept("pick_from_gallery"):
            return False
        self._generation += 1
        generation = self._generation
        self._read_pending = True
        label = name or getattr(file, "name", None)
        self._scheduler.call_later(
            self.read_delay,
            lambda: self._finish_read(file, label, generation),
            token=self.token,
            label="gallery-read",
        )
        return True

    def retake(self) -> bool:
        if not self._accept("retake"):
            return False
        self._generation += 1
        self._read_pending = False
        self.session = ScanSession()
        self.last_failure = None
        return True

    def analyze(self) -> bool:
        if not self._accept("analyze"):
            return False
        image = self.session.image
        self.session = replace(self.session, state=ScanState.ANALYZING, extracted_text=None)
        self.last_failure = None
        self._generation += 1
        generation = self._generation
        self._scheduler.call_later(
            self.ocr_delay,
            lambda: self._finish_ocr(image, generation),
            token=self.token,
            label="ocr",
        )
        return True

    def teardown(self) -> None:
        self.token.cancel()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _accept(self, action: str) -> bool:
        if self.token.cancelled:
            logger.debug("Scan pipeline closed; ignoring %s", action)
            return False
        if not self.can(action):
            logger.debug("Rejected %s while %s", action, self.state.value)
            return False
        return True

    def _finish_read(self, file: Any, name: str | None, generation: int) -> None:
        if generation != self._generation or self.state is not ScanState.CAPTURING:
            logger.debug("Discarding stale gallery read")
            return
        self._read_pending = False
        try:
            data = _read_bytes(file)
        except (OSError, ValueError) as exc:
            self._record_failure("pick_from_gallery", "unreadable", str(exc))
            return
        if not data:
            self._record_failure("pick_from_gallery", "unreadable", "file is empty")
            return
        mime_type = sniff_image_type(data)
        if mime_type is None:
            self._record_failure("pick_from_gallery", "unsupported", f"{name or 'file'} is not a supported image")
            return
        image = ImageRef(source="gallery", mime_type=mime_type, data=data, name=name)
        self.session = ScanSession(state=ScanState.PREVIEWING, image=image)
        self.last_failure = None

    def _finish_ocr(self, image: ImageRef | None, generation: int) -> None:
        if generation != self._generation or self.state is not ScanState.ANALYZING:
            return
        try:
            if image is None:
                raise ServiceError("unreadable", "no image to analyse")
            text = self._backend.extract_text(image)
        except ServiceError as exc:
            self.session = replace(self.session, state=ScanState.PREVIEWING)
            self._record_failure("extract_text", exc.reason, exc.message)
            return
        self.session = replace(self.session, state=ScanState.READY, extracted_text=text)

    def _record_failure(self, operation: str, reason: str, message: str) -> None:
        self.last_failure = ServiceFailure(operation, reason, message)
        logger.warning("%s failed (%s): %s", operation, reason, message)


__all__ = ["ALLOWED_ACTIONS", "CapturePipeline", "sniff_image_type"]
