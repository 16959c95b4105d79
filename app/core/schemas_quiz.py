"""Pydantic schemas for the loyalty maturity quiz.

Python attributes are snake_case; the JSON wire format is camelCase
(``itemId``, ``weightedPoints``, ``overallPercentage``...). Every model
accepts either spelling on input.
"""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel


class QuizCategory(str, Enum):
    """Fixed quiz categories, declared in display order."""

    CUSTOMER_CENTRIC = "Customer-Centric Approach"
    ENGAGEMENT = "Engagement & Communication"
    DATA_ANALYTICS = "Data Utilization & Analytics"
    REFERRALS = "Referrals & Social Sharing"
    FLEXIBILITY = "Flexibility & Adaptability"
    ATTRACTIVE_REWARDS = "Attractive Rewards"
    CUSTOMER_SERVICE = "Exceptional Customer Service"
    MULTI_CHANNEL = "Multi-Channel Accessibility"


class FeedbackThreshold(IntEnum):
    """Overall-score ladder, declared highest first."""

    EXCEPTIONAL = 90
    STRONG = 80
    GOOD = 70
    NEEDS_IMPROVEMENT = 60
    SIGNIFICANT_GAPS = 50
    OVERHAUL = 0


class QuizModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Catalog
# =============================================================================


class QuizItem(QuizModel):
    """A single yes/no question in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique item identifier")
    category: QuizCategory = Field(..., description="Category the item belongs to")
    title: str = Field(..., description="Question shown to the user")
    description: str = Field(..., description="Explanation of the question")
    weighted_points: float = Field(..., gt=0, description="Contribution to the category maximum")
    advice: str = Field(..., description="Remediation advice when the item is not deployed")


class FeedbackTier(BaseModel):
    """Static narrative attached to a score threshold."""

    model_config = ConfigDict(frozen=True)

    title: str
    feedback: str
    recommendations: tuple[str, ...]


# =============================================================================
# Submissions
# =============================================================================


class QuizResponse(QuizModel):
    """Answer to one quiz item."""

    item_id: StrictStr = Field(..., description="ID of the answered quiz item")
    deployed: StrictBool = Field(..., description="Whether the practice is in place")


class AssessmentRequest(QuizModel):
    """Body of POST /quiz/assess."""

    responses: list[QuizResponse] = Field(..., description="One answer per quiz item")


# =============================================================================
# Results
# =============================================================================


class CategoryScore(QuizModel):
    """Score for one category."""

    category: QuizCategory
    score: float = Field(..., ge=0, description="Achieved weighted points")
    total_possible: float = Field(..., gt=0, description="Maximum weighted points")
    percentage: int = Field(..., ge=0, le=100, description="Rounded achievement percentage")
    is_underperforming: bool = Field(..., description="Whether percentage is below 60")
    summary: str = Field(default="", description="What this category measures")
    recommendations: list[str] = Field(
        default_factory=list, description="Advice for up to 2 unmet items"
    )


class QuizResult(QuizModel):
    """Complete scoring outcome for a response set."""

    total_score: float = Field(..., ge=0)
    total_possible: float = Field(..., gt=0)
    overall_percentage: int = Field(..., ge=0, le=100)
    category_scores: list[CategoryScore] = Field(default_factory=list)
    overall_feedback: str
    recommendations: list[str] = Field(
        default_factory=list, description="Up to 3 prioritized recommendations"
    )


class QuizAssessment(QuizModel):
    """A stored submission and its computed result."""

    id: str = Field(..., description="Generated assessment identifier")
    responses: list[QuizResponse]
    result: QuizResult
    completed_at: str = Field(..., description="UTC ISO-8601 completion timestamp")


# =============================================================================
# Envelopes
# =============================================================================


class QuizItemsResponse(BaseModel):
    """Body of GET /quiz/items."""

    items: list[QuizItem]


class AssessmentEnvelope(BaseModel):
    """Body of a successful POST /quiz/assess."""

    assessment: QuizAssessment
