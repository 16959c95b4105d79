"""HTTP client for the quiz API, used by the terminal client.

Uses httpx, same as the other outbound service clients.
"""

from __future__ import annotations

import httpx

from app.core.logging import get_logger
from app.core.schemas_quiz import (
    AssessmentEnvelope,
    AssessmentRequest,
    QuizAssessment,
    QuizItem,
    QuizItemsResponse,
    QuizResponse,
)

logger = get_logger(__name__)


class QuizApiError(Exception):
    """The quiz API returned an error or an unreadable response."""


class QuizApiClient:
    """Fetches the catalog and submits assessments over HTTP."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> QuizApiClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch_items(self) -> list[QuizItem]:
        """GET /quiz/items."""
        resp = self._request("GET", "/quiz/items")
        return QuizItemsResponse.model_validate(resp.json()).items

    def submit(self, responses: list[QuizResponse]) -> QuizAssessment:
        """POST /quiz/assess and return the stored assessment."""
        body = AssessmentRequest(responses=responses).model_dump(mode="json", by_alias=True)
        resp = self._request("POST", "/quiz/assess", json=body)
        assessment = AssessmentEnvelope.model_validate(resp.json()).assessment
        logger.info(f"Submitted assessment {assessment.id} to {self.base_url}")
        return assessment

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            resp = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise QuizApiError(f"{method} {path} failed: {e}") from e

        if resp.is_error:
            try:
                message = resp.json().get("error", resp.text)
            except ValueError:
                message = resp.text
            raise QuizApiError(f"{method} {path} returned {resp.status_code}: {message}")
        return resp
