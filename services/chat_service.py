"""Chat session state: the message ledger, its reply queue and the gap overlay."""

from __future__ import annotations

import itertools
import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from backend_client import ServiceError
from content_segments import has_code, has_math
from models import Message, MessageFlags, Role, ServiceFailure, SessionCredits
from sample_data import CHAT_SEED, RESOURCES
from services.assistant_backend import AssistantBackend
from services.resource_registry import ResourceRegistry
from services.scheduler import CancellationToken, Scheduler

logger = logging.getLogger(__name__)


@dataclass
class _PendingReply:
    request_id: int
    text: str
    history_size: int
    reply: str | None = None
    failure: ServiceFailure | None = None


class MessageLedger:
    """Append-only, time-ordered record of one chat session.

    ``send`` appends the user turn synchronously and schedules one assistant
    reply. Replies are appended strictly in send order: a reply that becomes
    ready early waits behind any earlier reply that is still outstanding.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        backend: AssistantBackend,
        *,
        token: CancellationToken,
        reply_delay: float = 1.0,
        seed: Iterable[tuple[str, str, int]] = (),
    ) -> None:
        self._scheduler = scheduler
        self._backend = backend
        self._token = token
        self.reply_delay = reply_delay
        self._messages: list[Message] = []
        self._ids = itertools.count(1)
        self._requests = itertools.count(1)
        self._pending: deque[_PendingReply] = deque()
        self._origin = datetime.now()
        self._origin_tick = scheduler.now()
        self.last_failure: ServiceFailure | None = None
        for role, content, seconds_ago in seed:
            self._append(Role(role), content, created_at=self._origin - timedelta(seconds=seconds_ago))

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def __len__(self) -> int:
        return len(self._messages)

    def send(self, text: str) -> bool:
        """Append a user message and schedule its reply; blank input is ignored."""

        content = (text or "").strip()
        if not content:
            return False
        if self._token.cancelled:
            logger.debug("Ignoring send on a closed chat session")
            return False
        history_size = len(self._messages)
        self._append(Role.USER, content)
        pending = _PendingReply(request_id=next(self._requests), text=content, history_size=history_size)
        self._pending.append(pending)
        self._schedule(pending)
        return True

    def retry_failed(self) -> bool:
        """Re-request the oldest failed reply, if any."""

        for pending in self._pending:
            if pending.failure is not None:
                pending.failure = None
                self.last_failure = None
                self._schedule(pending)
                return True
        return False

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _schedule(self, pending: _PendingReply) -> None:
        self._scheduler.call_later(
            self.reply_delay,
            lambda: self._complete(pending),
            token=self._token,
            label=f"reply-{pending.request_id}",
        )

    def _complete(self, pending: _PendingReply) -> None:
        if self._token.cancelled or pending not in self._pending:
            return
        history: Sequence[Message] = self._messages[: pending.history_size]
        try:
            pending.reply = self._backend.complete_conversation(history, pending.text)
        except ServiceError as exc:
            pending.failure = ServiceFailure("complete_conversation", exc.reason, exc.message)
            self.last_failure = pending.failure
            logger.warning("Reply %s failed (%s): %s", pending.request_id, exc.reason, exc.message)
            return
        self._flush()

    def _flush(self) -> None:
        while self._pending and self._pending[0].reply is not None:
            ready = self._pending.popleft()
            self._append(Role.ASSISTANT, ready.reply or "")

    def _now(self) -> datetime:
        return self._origin + timedelta(seconds=self._scheduler.now() - self._origin_tick)

    def _append(self, role: Role, content: str, *, created_at: datetime | None = None) -> Message:
        stamp = created_at or self._now()
        if self._messages and stamp < self._messages[-1].created_at:
            stamp = self._messages[-1].created_at
        message = Message(
            id=f"msg-{next(self._ids):04d}",
            role=role,
            content=content,
            created_at=stamp,
            flags=MessageFlags(has_math=has_math(content), has_code=has_code(content)),
        )
        self._messages.append(message)
        return message


class ChatSession:
    """Everything the chat screen owns while it is mounted."""

    def __init__(
        self,
        scheduler: Scheduler,
        backend: AssistantBackend,
        credits: SessionCredits,
        *,
        reply_delay: float = 1.0,
        seed: Iterable[tuple[str, str, int]] = CHAT_SEED,
        resources=RESOURCES,
    ) -> None:
        self.token = CancellationToken("chat")
        self.credits = credits
        self.ledger = MessageLedger(
            scheduler,
            backend,
            token=self.token,
            reply_delay=reply_delay,
            seed=seed,
        )
        self.resources = ResourceRegistry(resources)
        self.gap_visible = False

    def send(self, text: str) -> bool:
        if self.gap_visible:
            logger.debug("Input disabled while the conceptual gap overlay is open")
            return False
        return self.ledger.send(text)

    def show_gap(self) -> None:
        self.gap_visible = True

    def dismiss_gap(self) -> None:
        self.gap_visible = False

    def teardown(self) -> None:
        self.token.cancel()


__all__ = ["ChatSession", "MessageLedger"]
