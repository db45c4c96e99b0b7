from __future__ import annotations

from backend_client import ServiceError
from services.insights_service import InsightsBoard, activity_summary
from services.scheduler import advance


def test_activity_summary_totals() -> None:
    summary = activity_summary()
    assert summary == {
        "total_inquiries": 34,
        "top_category": "Physics",
        "latest_complexity": 5.2,
        "resources_used": 54,
    }


def test_generate_report_completes_after_delay(scheduler, clock, backend) -> None:
    board = InsightsBoard(scheduler, backend, report_delay=2.0)

    assert board.generate_report()
    assert board.generating
    assert not board.generate_report()

    advance(scheduler, clock, 2.0)

    assert not board.generating
    assert board.report is not None
    assert backend.reports == [activity_summary()]


def test_generate_report_failure_is_recorded(scheduler, clock, backend) -> None:
    board = InsightsBoard(scheduler, backend)
    backend.fail_with = ServiceError("unavailable", "report service down")

    board.generate_report({"total_inquiries": 1})
    advance(scheduler, clock, 2.0)

    assert not board.generating
    assert board.report is None
    assert board.last_failure is not None
    assert board.last_failure.reason == "unavailable"

    backend.fail_with = None
    assert board.generate_report()
    assert board.last_failure is None


def test_teardown_discards_pending_report(scheduler, clock, backend) -> None:
    board = InsightsBoard(scheduler, backend)
    board.generate_report()

    board.teardown()
    advance(scheduler, clock, 5.0)

    assert board.report is None
    assert backend.reports == []
    assert not board.generate_report()
