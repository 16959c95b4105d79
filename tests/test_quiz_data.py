"""Tests for the static quiz catalog and lookup tables."""

import math

import pytest
from pydantic import ValidationError

from app.core.quiz_data import (
    CATEGORY_ORDER,
    CATEGORY_SUMMARIES,
    FEEDBACK_TIERS,
    QUIZ_ITEMS,
    get_quiz_items,
    validate_catalog,
)
from app.core.quiz_errors import CatalogConfigurationError
from app.core.schemas_quiz import FeedbackThreshold, QuizCategory, QuizItem


class TestCatalog:
    def test_catalog_size(self):
        assert len(QUIZ_ITEMS) == 29

    def test_ids_are_unique(self):
        ids = [item.id for item in QUIZ_ITEMS]
        assert len(ids) == len(set(ids))

    def test_every_category_has_items(self):
        used = {item.category for item in QUIZ_ITEMS}
        assert used == set(QuizCategory)

    def test_catalog_is_grouped_in_display_order(self):
        seen = []
        for item in QUIZ_ITEMS:
            if not seen or seen[-1] != item.category:
                seen.append(item.category)
        assert seen == list(CATEGORY_ORDER)

    def test_weights_are_positive_and_total_100(self):
        assert all(item.weighted_points > 0 for item in QUIZ_ITEMS)
        assert math.fsum(item.weighted_points for item in QUIZ_ITEMS) == pytest.approx(100.0)

    def test_get_quiz_items_returns_a_copy(self):
        items = get_quiz_items()
        items.clear()
        assert len(get_quiz_items()) == 29

    def test_category_order(self):
        assert [c.value for c in CATEGORY_ORDER] == [
            "Customer-Centric Approach",
            "Engagement & Communication",
            "Data Utilization & Analytics",
            "Referrals & Social Sharing",
            "Flexibility & Adaptability",
            "Attractive Rewards",
            "Exceptional Customer Service",
            "Multi-Channel Accessibility",
        ]


class TestLookupTables:
    def test_every_category_has_a_summary(self):
        assert set(CATEGORY_SUMMARIES) == set(QuizCategory)
        assert all(CATEGORY_SUMMARIES.values())

    def test_every_threshold_has_a_tier(self):
        assert set(FEEDBACK_TIERS) == set(FeedbackThreshold)
        for tier in FEEDBACK_TIERS.values():
            assert tier.feedback
            assert len(tier.recommendations) == 3

    def test_ladder_is_descending(self):
        values = [t.value for t in FeedbackThreshold]
        assert values == [90, 80, 70, 60, 50, 0]

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            FEEDBACK_TIERS[FeedbackThreshold.GOOD] = FEEDBACK_TIERS[FeedbackThreshold.STRONG]


class TestValidateCatalog:
    def test_accepts_builtin_catalog(self):
        validate_catalog(QUIZ_ITEMS)

    def test_rejects_empty_catalog(self):
        with pytest.raises(CatalogConfigurationError, match="empty"):
            validate_catalog([])

    def test_rejects_duplicate_ids(self, make_item):
        items = [
            make_item("a1", QuizCategory.CUSTOMER_CENTRIC),
            make_item("a1", QuizCategory.ENGAGEMENT),
        ]
        with pytest.raises(CatalogConfigurationError, match="a1"):
            validate_catalog(items)


class TestQuizItemModel:
    def test_rejects_non_positive_weight(self, make_item):
        with pytest.raises(ValidationError):
            make_item("x", QuizCategory.CUSTOMER_CENTRIC, weighted_points=0)

    def test_rejects_unknown_category(self):
        with pytest.raises(ValidationError):
            QuizItem(
                id="x",
                category="Gamification",
                title="t",
                description="d",
                weighted_points=1,
                advice="a",
            )

    def test_is_immutable(self):
        with pytest.raises(ValidationError):
            QUIZ_ITEMS[0].weighted_points = 10

    def test_dumps_camel_case(self):
        data = QUIZ_ITEMS[0].model_dump(mode="json", by_alias=True)
        assert data == {
            "id": "cca1",
            "category": "Customer-Centric Approach",
            "title": QUIZ_ITEMS[0].title,
            "description": QUIZ_ITEMS[0].description,
            "weightedPoints": 4,
            "advice": QUIZ_ITEMS[0].advice,
        }
