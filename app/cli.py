"""
Terminal client for the loyalty maturity quiz.

Walks the questionnaire one category at a time, scores the answers and
prints the plain-text report.

Usage:
    python -m app.cli [--api-url URL] [--answers FILE] [--output PATH]

Options:
    --api-url: Score through a running quiz API (e.g. http://localhost:8000/api)
               instead of locally
    --answers: JSON file mapping item ids to true/false; skips the prompts
    --output: Write the report to this file, or into this directory using
              the default report file name
"""

import argparse
import json
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from app.core.config import get_settings
from app.core.logging import get_logger
from app.core.questionnaire import QuestionnaireSession
from app.core.quiz_data import CATEGORY_SUMMARIES, get_quiz_items
from app.core.quiz_errors import QuizError
from app.core.quiz_report import render_text_report, report_filename
from app.core.quiz_scoring import score_quiz
from app.core.schemas_quiz import QuizResult
from app.services.quiz_api_client import QuizApiClient, QuizApiError

logger = get_logger(__name__)

YES = {"y", "yes"}
NO = {"n", "no"}
BACK = {"b", "back"}


def _ask(prompt: str, input_fn: Callable[[str], str], out: TextIO) -> str:
    while True:
        reply = input_fn(prompt).strip().lower()
        if reply in YES | NO | BACK:
            return reply
        print("Please answer y, n or b (back).", file=out)


def category_bar(session: QuestionnaireSession) -> str:
    """One-line overview of the steps: [n] is current, a check marks complete."""
    steps = []
    for index, category in enumerate(session.categories):
        label = str(index + 1)
        if index == session.current_index:
            label = f"[{label}]"
        elif session.is_category_complete(category):
            label = f"{label}✓"
        steps.append(label)
    return "Categories: " + " ".join(steps)


def run_questionnaire(
    session: QuestionnaireSession,
    input_fn: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> None:
    """Prompt for every item, category by category, until the session can be submitted."""
    total = len(session.categories)
    if not total:
        return

    while not session.can_submit():
        category = session.current_category
        print(f"\n{category_bar(session)}", file=out)
        print(f"[{session.current_index + 1}/{total}] {category.value}", file=out)
        print(CATEGORY_SUMMARIES.get(category, ""), file=out)
        print(
            f"{session.answered_in_category(category)}/{len(session.current_items())}"
            " questions answered",
            file=out,
        )

        went_back = False
        for item in session.current_items():
            reply = _ask(f"  {item.title} [y/n/b] ", input_fn, out)
            while reply in BACK and not went_back:
                went_back = session.previous_category()
                if not went_back:
                    print("Already at the first category.", file=out)
                    reply = _ask(f"  {item.title} [y/n/b] ", input_fn, out)
            if went_back:
                break
            session.answer(item.id, reply in YES)

        if not went_back:
            session.next_category()

    print(f"\nAll {session.answered_count} questions answered.", file=out)


def load_answers(path: Path, session: QuestionnaireSession) -> None:
    """Fill the session from a JSON file of {item_id: bool}."""
    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError("Answers file must contain a JSON object of item id to true/false")

    for item_id, deployed in data.items():
        if not isinstance(deployed, bool):
            raise ValueError(f"Answer for {item_id} must be true or false")
        session.answer(item_id, deployed)


def write_report(report: str, output: Path) -> Path:
    """Write the report to a file, or into a directory under the default name."""
    target = output / report_filename() if output.is_dir() else output
    target.write_text(report)
    return target


def main(
    argv: Sequence[str] | None = None,
    input_fn: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> int:
    """Run the quiz from the terminal. Returns a process exit code."""
    parser = argparse.ArgumentParser(description="Loyalty program maturity self-assessment")
    parser.add_argument(
        "--api-url",
        type=str,
        help="Base URL of a running quiz API (default: score locally)",
    )
    parser.add_argument(
        "--answers",
        type=Path,
        help="JSON file mapping item ids to true/false",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="File or directory to write the text report to",
    )
    args = parser.parse_args(argv)

    client = None
    try:
        if args.api_url:
            client = QuizApiClient(args.api_url, timeout=get_settings().CLI_API_TIMEOUT_SECONDS)
            items = client.fetch_items()
        else:
            items = get_quiz_items()

        session = QuestionnaireSession(items)
        if args.answers:
            load_answers(args.answers, session)
        else:
            run_questionnaire(session, input_fn=input_fn, out=out)

        if not session.can_submit():
            print(
                f"Answers incomplete: {session.answered_count}/{len(session.items)} answered.",
                file=out,
            )
            return 1

        responses = session.to_responses()
        if client:
            result: QuizResult = client.submit(responses).result
        else:
            result = score_quiz(items, responses)

    except (QuizApiError, QuizError, ValueError, OSError) as e:
        logger.error(f"Quiz failed: {e}")
        print(f"Error: {e}", file=out)
        return 1
    except (EOFError, KeyboardInterrupt):
        logger.info("Quiz cancelled before submission")
        print("\nError: quiz cancelled before all questions were answered.", file=out)
        return 1
    finally:
        if client:
            client.close()

    report = render_text_report(result)
    print("", file=out)
    print(report, file=out)

    if args.output:
        target = write_report(report, args.output)
        print(f"Report written to {target}", file=out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
