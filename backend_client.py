"""Thin client for the research assistant REST surface."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping

import requests

from models import FAILURE_REASONS

BASE_URL = "http://localhost:8000"

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({500, 502, 503, 504})


class ServiceError(Exception):
    """A backend capability failed.

    ``reason`` is one of ``FAILURE_REASONS``; anything else is reported as
    ``unavailable``.
    """

    def __init__(self, reason: str, message: str) -> None:
        super().__init__(message)
        self.reason = reason if reason in FAILURE_REASONS else "unavailable"
        self.message = message


def _build_headers(api_key: str | None) -> dict[str, str]:
    headers: dict[str, str] = {}
    if api_key:
        headers["x-api-key"] = api_key
    return headers


def _reason_for_status(status: int | None) -> str:
    if status in {401, 403}:
        return "auth"
    if status == 415:
        return "unsupported"
    if status == 422:
        return "unreadable"
    return "unavailable"


@dataclass
class BackendAPIClient:
    """REST client for completion, OCR and report endpoints.

    Timeouts, connection errors and 5xx responses are retried up to
    ``max_attempts`` times with a linear pause; everything else surfaces
    immediately as :class:`ServiceError`.
    """

    base_url: str = BASE_URL
    api_key: str | None = None
    timeout: float = 10.0
    max_attempts: int = 3
    retry_pause: float = 0.5

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    # Internal helpers -----------------------------------------------------
    def _request(self, method: str, path: str, *, json_payload: Any | None = None) -> requests.Response:
        url = f"{self.base_url}{path if path.startswith('/') else '/' + path}"
        attempts = max(1, self.max_attempts)
        last_error = ServiceError("unavailable", f"{path} was not attempted")
        for attempt in range(1, attempts + 1):
            try:
                response = requests.request(
                    method=method,
                    url=url,
                    json=json_payload,
                    headers=_build_headers(self.api_key),
                    timeout=self.timeout,
                )
                response.raise_for_status()
                return response
            except requests.Timeout as exc:
                last_error = ServiceError("timeout", f"{path} timed out: {exc}")
            except requests.HTTPError as exc:
                status = getattr(exc.response, "status_code", None)
                if status not in _RETRYABLE_STATUS:
                    raise ServiceError(_reason_for_status(status), f"{path} failed ({status})") from exc
                last_error = ServiceError("unavailable", f"{path} failed ({status})")
            except requests.RequestException as exc:
                last_error = ServiceError("unavailable", f"{path} unreachable: {exc}")
            logger.warning("Attempt %s/%s for %s failed: %s", attempt, attempts, path, last_error)
            if attempt < attempts and self.retry_pause > 0:
                time.sleep(self.retry_pause * attempt)
        raise last_error

    def _json(self, method: str, path: str, *, json_payload: Any | None = None) -> Mapping[str, Any]:
        response = self._request(method, path, json_payload=json_payload)
        try:
            body = response.json()
        except ValueError as exc:
            raise ServiceError("malformed", f"{path} returned non-JSON body") from exc
        if not isinstance(body, Mapping):
            raise ServiceError("malformed", f"{path} returned {type(body).__name__}")
        return body

    # Public API -----------------------------------------------------------
    def complete_conversation(self, history: list[Mapping[str, Any]], text: str) -> Mapping[str, Any]:
        return self._json("post", "/chat/complete", json_payload={"history": history, "text": text})

    def extract_text(self, *, image: str, mime_type: str, name: str | None = None) -> Mapping[str, Any]:
        payload = {"image": image, "mime_type": mime_type}
        if name:
            payload["name"] = name
        return self._json("post", "/ocr/extract", json_payload=payload)

    def generate_report(self, summary: Mapping[str, Any]) -> Mapping[str, Any]:
        return self._json("post", "/reports/generate", json_payload=dict(summary))


__all__ = ["BackendAPIClient", "BASE_URL", "ServiceError"]
