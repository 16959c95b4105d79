"""Storage layer for quiz assessments.

Assessments are create-only. The in-memory store keeps them for the
lifetime of the process; a durable backend only needs to implement
AssessmentStore.create.
"""

import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime, timezone
from functools import lru_cache
from uuid import uuid4

from app.core.logging import get_logger
from app.core.quiz_errors import AssessmentStoreError
from app.core.schemas_quiz import QuizAssessment, QuizResponse, QuizResult

logger = get_logger(__name__)


class AssessmentStore(ABC):
    """Create-only storage for scored submissions."""

    @abstractmethod
    def create(self, responses: Sequence[QuizResponse], result: QuizResult) -> QuizAssessment:
        """Persist a submission and return the stored assessment."""


class InMemoryAssessmentStore(AssessmentStore):
    """Process-local store; contents are lost on restart."""

    def __init__(self):
        self._assessments: dict[str, QuizAssessment] = {}
        self._lock = threading.Lock()

    def create(self, responses: Sequence[QuizResponse], result: QuizResult) -> QuizAssessment:
        assessment = QuizAssessment(
            id=str(uuid4()),
            responses=list(responses),
            result=result,
            completed_at=datetime.now(timezone.utc).isoformat(),
        )

        with self._lock:
            if assessment.id in self._assessments:
                raise AssessmentStoreError(f"Assessment id collision: {assessment.id}")
            self._assessments[assessment.id] = assessment

        return assessment

    def count(self) -> int:
        """Number of stored assessments."""
        with self._lock:
            return len(self._assessments)


@lru_cache(maxsize=1)
def get_assessment_store() -> AssessmentStore:
    """
    Get the process-wide assessment store (cached singleton).

    Returns:
        In-memory assessment store
    """
    return InMemoryAssessmentStore()


def create_quiz_assessment(
    responses: Sequence[QuizResponse], result: QuizResult
) -> QuizAssessment:
    """
    Store a scored submission.

    Args:
        responses: Responses exactly as submitted
        result: Computed quiz result

    Returns:
        Stored assessment with generated id and completion timestamp

    Raises:
        AssessmentStoreError: If the assessment could not be stored
    """
    store = get_assessment_store()
    assessment = store.create(responses, result)

    logger.info(
        f"Stored quiz assessment {assessment.id}",
        extra={"assessment_id": assessment.id},
    )
    return assessment
