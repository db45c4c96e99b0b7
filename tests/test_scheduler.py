"""Tests for :mod:`services.scheduler`."""

from __future__ import annotations

from services.scheduler import CancellationToken, ManualClock, Scheduler, advance


def test_timers_fire_in_due_order_then_schedule_order(scheduler: Scheduler, clock: ManualClock) -> None:
    fired: list[str] = []
    token = CancellationToken("test")
    scheduler.call_later(2.0, lambda: fired.append("late"), token=token)
    scheduler.call_later(1.0, lambda: fired.append("first"), token=token)
    scheduler.call_later(1.0, lambda: fired.append("second"), token=token)

    assert advance(scheduler, clock, 0.5) == 0
    assert advance(scheduler, clock, 0.5) == 2
    assert fired == ["first", "second"]
    assert advance(scheduler, clock, 1.0) == 1
    assert fired == ["first", "second", "late"]


def test_cancelled_token_makes_timer_silent(scheduler: Scheduler, clock: ManualClock) -> None:
    fired: list[str] = []
    token = CancellationToken("screen")
    scheduler.call_later(1.0, lambda: fired.append("stale"), token=token)
    assert scheduler.pending() == 1

    token.cancel()

    assert scheduler.pending() == 0
    assert scheduler.next_due_in() is None
    assert advance(scheduler, clock, 5.0) == 0
    assert fired == []


def test_next_due_in_reports_remaining_time(scheduler: Scheduler, clock: ManualClock) -> None:
    scheduler.call_later(2.0, lambda: None, token=CancellationToken())
    clock.advance(0.75)
    assert scheduler.next_due_in() == 1.25


def test_zero_delay_timer_scheduled_during_dispatch_runs_same_pass(scheduler: Scheduler) -> None:
    fired: list[str] = []
    token = CancellationToken()

    def outer() -> None:
        fired.append("outer")
        scheduler.call_later(0, lambda: fired.append("inner"), token=token)

    scheduler.call_later(0, outer, token=token)
    assert scheduler.run_due() == 2
    assert fired == ["outer", "inner"]
