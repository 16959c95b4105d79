"""Loyalty maturity scoring.

Turns a response set into per-category and overall percentages:

1. Look up each catalog item's answer (missing answers count as not deployed)
2. Sum achieved and possible weighted points per category
3. Flag categories below the underperforming cut-off
4. Pick overall feedback from the threshold ladder
5. Prioritize one recommendation from each of the weakest categories
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from app.core.logging import get_logger
from app.core.quiz_data import CATEGORY_ORDER, CATEGORY_SUMMARIES, FEEDBACK_TIERS
from app.core.quiz_errors import CatalogConfigurationError, InvalidQuizInputError
from app.core.schemas_quiz import (
    CategoryScore,
    FeedbackThreshold,
    FeedbackTier,
    QuizCategory,
    QuizItem,
    QuizResponse,
    QuizResult,
)

logger = get_logger(__name__)

# =========================
# Scoring constants
# =========================

UNDERPERFORMING_THRESHOLD = 60  # Rounded percentage below this is underperforming
MAX_CATEGORY_RECOMMENDATIONS = 2
MAX_PRIORITY_RECOMMENDATIONS = 3
SCORE_DECIMALS = 2


@dataclass
class _CategoryTally:
    achieved: list[float] = field(default_factory=list)
    possible: list[float] = field(default_factory=list)
    unmet: list[QuizItem] = field(default_factory=list)


def round_percentage(value: float) -> int:
    """Round half up to the nearest integer (2.5 -> 3, not banker's rounding)."""
    return math.floor(value + 0.5)


def score_quiz(
    catalog: Sequence[QuizItem] | None,
    responses: Sequence[QuizResponse] | None,
) -> QuizResult:
    """
    Score a response set against the catalog.

    Args:
        catalog: Quiz items; authoritative for existence, weight and category
        responses: Answers; may omit items, repeat items (last wins) or
            reference unknown ids (ignored)

    Returns:
        QuizResult with category breakdown, feedback and recommendations

    Raises:
        InvalidQuizInputError: If the catalog or responses are missing
        CatalogConfigurationError: If a category has no possible points
    """
    if catalog is None:
        raise InvalidQuizInputError("Quiz catalog is required")
    if not catalog:
        raise InvalidQuizInputError("Quiz catalog is empty")
    if responses is None:
        raise InvalidQuizInputError("Responses are required")

    answers = {response.item_id: response.deployed for response in responses}

    tallies: dict[QuizCategory, _CategoryTally] = {}
    for item in catalog:
        tally = tallies.setdefault(item.category, _CategoryTally())
        tally.possible.append(item.weighted_points)
        if answers.get(item.id, False):
            tally.achieved.append(item.weighted_points)
        else:
            tally.unmet.append(item)

    category_scores: list[CategoryScore] = []
    total_achieved: list[float] = []
    total_possible: list[float] = []

    for category in CATEGORY_ORDER:
        tally = tallies.get(category)
        if tally is None:
            continue

        achieved = math.fsum(tally.achieved)
        possible = math.fsum(tally.possible)
        if possible <= 0:
            raise CatalogConfigurationError(
                f"Category '{category.value}' has no possible points"
            )

        percentage = round_percentage(achieved * 100 / possible)
        category_scores.append(
            CategoryScore(
                category=category,
                score=round(achieved, SCORE_DECIMALS),
                total_possible=round(possible, SCORE_DECIMALS),
                percentage=percentage,
                is_underperforming=percentage < UNDERPERFORMING_THRESHOLD,
                summary=CATEGORY_SUMMARIES.get(category, ""),
                recommendations=[
                    item.advice for item in tally.unmet[:MAX_CATEGORY_RECOMMENDATIONS]
                ],
            )
        )
        total_achieved.append(achieved)
        total_possible.append(possible)

    overall_achieved = math.fsum(total_achieved)
    overall_possible = math.fsum(total_possible)
    overall_percentage = round_percentage(overall_achieved * 100 / overall_possible)

    tier = select_feedback_tier(overall_percentage)
    recommendations = prioritize_recommendations(category_scores) or list(tier.recommendations)

    logger.debug(
        f"Scored {len(answers)} responses: overall={overall_percentage}%, "
        f"underperforming={sum(1 for c in category_scores if c.is_underperforming)}"
    )

    return QuizResult(
        total_score=round(overall_achieved, SCORE_DECIMALS),
        total_possible=round(overall_possible, SCORE_DECIMALS),
        overall_percentage=overall_percentage,
        category_scores=category_scores,
        overall_feedback=tier.feedback,
        recommendations=recommendations,
    )


def select_feedback_threshold(overall_percentage: int) -> FeedbackThreshold:
    """Return the highest ladder threshold the percentage meets."""
    for threshold in FeedbackThreshold:
        if overall_percentage >= threshold:
            return threshold
    return FeedbackThreshold.OVERHAUL


def select_feedback_tier(overall_percentage: int) -> FeedbackTier:
    """Return the feedback tier for an overall percentage."""
    return FEEDBACK_TIERS[select_feedback_threshold(overall_percentage)]


def prioritize_recommendations(category_scores: Sequence[CategoryScore]) -> list[str]:
    """
    Pick one recommendation from each of the weakest underperforming categories.

    Categories are ordered worst first; ties keep their display order.
    """
    weakest = sorted(
        (c for c in category_scores if c.is_underperforming),
        key=lambda c: c.percentage,
    )[:MAX_PRIORITY_RECOMMENDATIONS]

    return [c.recommendations[0] for c in weakest if c.recommendations]
