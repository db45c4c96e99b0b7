"""Top-level screen selection and shared session values."""

from __future__ import annotations

import logging
from typing import Any

from models import Screen, SessionCredits
from services.assistant_backend import AssistantBackend, SimulatedBackend
from services.capture_service import CapturePipeline
from services.chat_service import ChatSession
from services.insights_service import InsightsBoard
from services.scheduler import Scheduler
from services.vault_service import VaultBrowser

logger = logging.getLogger(__name__)


class NavigationController:
    """Mounts exactly one screen at a time.

    ``navigate`` is unconditional. The leaving screen is torn down first, so
    any reply, OCR or report timer it scheduled is dropped when it comes due.
    Each visit mounts a fresh screen controller.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        backend: AssistantBackend | None = None,
        *,
        credits: SessionCredits | None = None,
        reply_delay: float = 1.0,
        ocr_delay: float = 2.0,
        report_delay: float = 2.0,
    ) -> None:
        self.scheduler = scheduler
        self.backend = backend or SimulatedBackend()
        self.credits = credits or SessionCredits(used=3, max=15)
        self.reply_delay = reply_delay
        self.ocr_delay = ocr_delay
        self.report_delay = report_delay
        self.screen = Screen.DASHBOARD
        self.active: Any = None

    @classmethod
    def from_settings(cls, settings, scheduler: Scheduler, backend: AssistantBackend) -> "NavigationController":
        return cls(
            scheduler,
            backend,
            credits=SessionCredits(used=settings.credits_used, max=settings.credits_max),
            reply_delay=settings.reply_delay,
            ocr_delay=settings.ocr_delay,
            report_delay=settings.report_delay,
        )

    def navigate(self, target: Screen | str) -> bool:
        try:
            screen = Screen(target)
        except ValueError:
            logger.debug("Unknown screen %r", target)
            return False
        if screen is self.screen:
            return True
        self._teardown_active()
        self.screen = screen
        self.active = self._mount(screen)
        logger.debug("Navigated to %s", screen.value)
        return True

    def back(self) -> bool:
        return self.navigate(Screen.DASHBOARD)

    def _teardown_active(self) -> None:
        teardown = getattr(self.active, "teardown", None)
        if callable(teardown):
            teardown()
        self.active = None

    def _mount(self, screen: Screen) -> Any:
        if screen is Screen.CHAT:
            return ChatSession(self.scheduler, self.backend, self.credits, reply_delay=self.reply_delay)
        if screen is Screen.SCAN:
            return CapturePipeline(self.scheduler, self.backend, ocr_delay=self.ocr_delay)
        if screen is Screen.VAULT:
            return VaultBrowser()
        if screen is Screen.INSIGHTS:
            return InsightsBoard(self.scheduler, self.backend, report_delay=self.report_delay)
        return None


__all__ = ["NavigationController"]
