"""Cooperative fire-once timers with cancellation tokens.

Every screen controller owns a :class:`CancellationToken`. Timers are bound to
a token when they are scheduled; once the token is cancelled the timer is
dropped at dispatch time instead of writing into a torn-down screen.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class CancellationToken:
    """Marks the lifetime of the screen that scheduled a timer."""

    def __init__(self, owner: str = "") -> None:
        self.owner = owner
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "live"
        return f"CancellationToken({self.owner!r}, {state})"


@dataclass(order=True)
class _Timer:
    due: float
    sequence: int
    callback: Callable[[], None] = field(compare=False)
    token: CancellationToken = field(compare=False)
    label: str = field(default="", compare=False)


class Scheduler:
    """Single-threaded timer queue.

    Timers fire in due-time order; timers due at the same instant fire in the
    order they were scheduled. ``run_due`` is the only place callbacks run.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or time.monotonic
        self._queue: list[_Timer] = []
        self._sequence = itertools.count()

    def now(self) -> float:
        return self._clock()

    def call_later(
        self,
        delay: float,
        callback: Callable[[], None],
        *,
        token: CancellationToken,
        label: str = "",
    ) -> None:
        due = self.now() + max(0.0, float(delay))
        heapq.heappush(
            self._queue,
            _Timer(due=due, sequence=next(self._sequence), callback=callback, token=token, label=label),
        )

    def pending(self) -> int:
        """Number of timers whose token is still live."""

        return sum(1 for timer in self._queue if not timer.token.cancelled)

    def next_due_in(self) -> float | None:
        """Seconds until the next live timer is due, or ``None`` when idle."""

        self._discard_cancelled_head()
        if not self._queue:
            return None
        return max(0.0, self._queue[0].due - self.now())

    def run_due(self) -> int:
        """Fire every timer that is due; return how many callbacks ran."""

        fired = 0
        while self._queue and self._queue[0].due <= self.now():
            timer = heapq.heappop(self._queue)
            if timer.token.cancelled:
                logger.debug("Dropping stale timer %s for %r", timer.label, timer.token)
                continue
            timer.callback()
            fired += 1
        return fired

    def _discard_cancelled_head(self) -> None:
        while self._queue and self._queue[0].token.cancelled:
            heapq.heappop(self._queue)


class ManualClock:
    """Clock that only moves when told to; used by tests and replays."""

    def __init__(self, start: float = 0.0) -> None:
        self.value = float(start)

    def __call__(self) -> float:
        return self.value

    def advance(self, seconds: float) -> float:
        self.value += float(seconds)
        return self.value


def advance(scheduler: Scheduler, clock: ManualClock, seconds: float) -> int:
    """Move ``clock`` forward and fire whatever became due."""

    clock.advance(seconds)
    return scheduler.run_due()


__all__ = ["CancellationToken", "Clock", "ManualClock", "Scheduler", "advance"]
