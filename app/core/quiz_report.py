"""Plain-text report rendering for quiz results."""

from datetime import date, datetime, timezone

from app.core.config import get_settings
from app.core.schemas_quiz import CategoryScore, QuizResult

REPORT_TITLE = "LOYALTY PROGRAM MATURITY ASSESSMENT REPORT"
BULLET = "•"


def _points(value: float) -> str:
    return f"{value:g}"


def _bullets(items: list[str]) -> list[str]:
    return [f"{BULLET} {item}" for item in items]


def _render_category(category: CategoryScore) -> list[str]:
    heading = f"{category.category.value}: {category.percentage}%"
    if category.is_underperforming:
        heading += " (Needs Improvement)"

    lines = [heading, category.summary]
    if category.recommendations:
        lines += ["", "Recommendations:", *_bullets(category.recommendations)]
    return lines


def render_text_report(result: QuizResult) -> str:
    """
    Render a quiz result as a plain-text report.

    Args:
        result: Scored quiz result

    Returns:
        Report text ending with a newline
    """
    lines = [
        REPORT_TITLE,
        "=" * len(REPORT_TITLE),
        "",
        f"Overall Score: {result.overall_percentage}%",
        f"Total Score: {_points(result.total_score)}/{_points(result.total_possible)}",
        "",
        result.overall_feedback,
        "",
        "CATEGORY BREAKDOWN:",
    ]

    for category in result.category_scores:
        lines.append("")
        lines += _render_category(category)

    lines += ["", "TOP RECOMMENDATIONS:", *_bullets(result.recommendations)]
    return "\n".join(lines) + "\n"


def report_filename(day: date | None = None) -> str:
    """File name for an exported report, e.g. loyalty-assessment-report-2024-05-01.txt."""
    day = day or datetime.now(timezone.utc).date()
    return f"{get_settings().REPORT_FILENAME_PREFIX}-{day.isoformat()}.txt"
