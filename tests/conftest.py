"""Pytest configuration and fixtures."""

import os

import pytest

from app.core.config import get_settings
from app.core.schemas_quiz import QuizCategory, QuizItem, QuizResponse
from app.db.quiz_assessments import get_assessment_store


@pytest.fixture(scope="session", autouse=True)
def setup_test_env():
    """Set up test environment variables."""
    os.environ["QUIZ_ENV"] = "test"
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def fresh_assessment_store():
    """Give every test an empty assessment store."""
    get_assessment_store.cache_clear()
    yield
    get_assessment_store.cache_clear()


@pytest.fixture
def make_item():
    """Factory for catalog items with predictable text."""

    def _make(item_id: str, category: QuizCategory, weighted_points: float = 4) -> QuizItem:
        return QuizItem(
            id=item_id,
            category=category,
            title=f"Question {item_id}",
            description=f"Description {item_id}",
            weighted_points=weighted_points,
            advice=f"Advice {item_id}",
        )

    return _make


@pytest.fixture
def answer_all():
    """Build responses answering every catalog item the same way."""

    def _answer(items, deployed: bool) -> list[QuizResponse]:
        return [QuizResponse(item_id=item.id, deployed=deployed) for item in items]

    return _answer
