"""API endpoints for the loyalty maturity quiz."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from app.core.logging import get_logger, log_with_context
from app.core.quiz_data import get_quiz_items
from app.core.quiz_errors import InvalidQuizInputError
from app.core.quiz_report import render_text_report, report_filename
from app.core.quiz_scoring import score_quiz
from app.core.schemas_quiz import (
    AssessmentEnvelope,
    AssessmentRequest,
    QuizItemsResponse,
    QuizResult,
)
from app.db.quiz_assessments import create_quiz_assessment

logger = get_logger(__name__)

router = APIRouter(prefix="/quiz")

INVALID_PAYLOAD_ERROR = "Invalid request payload"
ASSESSMENT_FAILED_ERROR = "Failed to process assessment"
REPORT_FAILED_ERROR = "Failed to generate report"


@router.get("/items", response_model=QuizItemsResponse)
async def list_quiz_items() -> QuizItemsResponse:
    """Return the full quiz catalog in catalog order."""
    items = get_quiz_items()
    logger.debug(f"Serving {len(items)} quiz items")
    return QuizItemsResponse(items=items)


@router.post("/assess", response_model=AssessmentEnvelope)
async def submit_assessment(data: AssessmentRequest) -> AssessmentEnvelope | JSONResponse:
    """
    Score a response set and store it as an assessment.

    Args:
        data: Responses, one per quiz item

    Returns:
        {"assessment": QuizAssessment}

    Raises:
        400: If the responses are unusable
        500: If scoring or storage fails
    """
    try:
        result = score_quiz(get_quiz_items(), data.responses)
        assessment = create_quiz_assessment(data.responses, result)

    except InvalidQuizInputError as e:
        logger.warning(f"Rejected quiz assessment: {e}")
        return JSONResponse(
            status_code=400,
            content={"error": INVALID_PAYLOAD_ERROR, "details": [str(e)]},
        )
    except Exception:
        logger.exception("Failed to process quiz assessment")
        return JSONResponse(status_code=500, content={"error": ASSESSMENT_FAILED_ERROR})

    log_with_context(
        logger,
        logging.INFO,
        "Quiz assessment completed",
        assessment_id=assessment.id,
        overall_percentage=result.overall_percentage,
        underperforming=sum(1 for c in result.category_scores if c.is_underperforming),
    )
    return AssessmentEnvelope(assessment=assessment)


@router.post("/report", response_class=PlainTextResponse, response_model=None)
async def export_report(result: QuizResult) -> PlainTextResponse | JSONResponse:
    """Render a quiz result as a downloadable plain-text report."""
    try:
        report = render_text_report(result)
        filename = report_filename()
    except Exception:
        logger.exception("Failed to render quiz report")
        return JSONResponse(status_code=500, content={"error": REPORT_FAILED_ERROR})

    return PlainTextResponse(
        content=report,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
