"""Insights screen: static chart data and the generate-report toggle."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from backend_client import ServiceError
from models import ReportArtifact, ServiceFailure
from sample_data import INQUIRY_DISTRIBUTION, PROGRESS_OVER_TIME, RESOURCE_UTILIZATION
from services.assistant_backend import AssistantBackend
from services.scheduler import CancellationToken, Scheduler

logger = logging.getLogger(__name__)


def activity_summary() -> dict[str, Any]:
    """Summarise the chart datasets into the payload sent to the report service."""

    top = max(INQUIRY_DISTRIBUTION, key=lambda row: int(row["count"]))
    latest = PROGRESS_OVER_TIME[-1]
    return {
        "total_inquiries": sum(int(row["count"]) for row in INQUIRY_DISTRIBUTION),
        "top_category": top["category"],
        "latest_complexity": latest["complexity"],
        "resources_used": sum(int(row["count"]) for row in RESOURCE_UTILIZATION),
    }


class InsightsBoard:
    """Owns the loading/done state of report generation."""

    def __init__(
        self,
        scheduler: Scheduler,
        backend: AssistantBackend,
        *,
        report_delay: float = 2.0,
    ) -> None:
        self.token = CancellationToken("insights")
        self._scheduler = scheduler
        self._backend = backend
        self.report_delay = report_delay
        self.generating = False
        self.report: ReportArtifact | None = None
        self.last_failure: ServiceFailure | None = None

    def generate_report(self, summary: Mapping[str, Any] | None = None) -> bool:
        if self.generating or self.token.cancelled:
            return False
        payload = dict(summary if summary is not None else activity_summary())
        self.generating = True
        self.last_failure = None
        self._scheduler.call_later(
            self.report_delay,
            lambda: self._finish(payload),
            token=self.token,
            label="report",
        )
        return True

    def teardown(self) -> None:
        self.token.cancel()

    def _finish(self, payload: Mapping[str, Any]) -> None:
        if not self.generating:
            return
        self.generating = False
        try:
            self.report = self._backend.generate_report(payload)
        except ServiceError as exc:
            self.last_failure = ServiceFailure("generate_report", exc.reason, exc.message)
            logger.warning("Report generation failed (%s): %s", exc.reason, exc.message)


__all__ = ["InsightsBoard", "activity_summary"]
