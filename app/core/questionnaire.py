"""Category-by-category questionnaire state.

Holds UI state only (current category, answers so far). Scoring is left
to app.core.quiz_scoring.
"""

from collections.abc import Sequence

from app.core.quiz_data import CATEGORY_ORDER
from app.core.quiz_errors import InvalidQuizInputError
from app.core.schemas_quiz import QuizCategory, QuizItem, QuizResponse


class QuestionnaireSession:
    """Walks the catalog one category at a time."""

    def __init__(self, items: Sequence[QuizItem]):
        self.items = list(items)
        self._by_category: dict[QuizCategory, list[QuizItem]] = {
            category: [item for item in self.items if item.category == category]
            for category in CATEGORY_ORDER
        }
        # Only categories that actually have items are steps
        self.categories: list[QuizCategory] = [
            category for category in CATEGORY_ORDER if self._by_category[category]
        ]
        self._item_ids = {item.id for item in self.items}
        self.reset()

    def reset(self) -> None:
        """Clear answers and return to the first category."""
        self.answers: dict[str, bool] = {}
        self.current_index = 0

    @property
    def current_category(self) -> QuizCategory | None:
        if not self.categories:
            return None
        return self.categories[self.current_index]

    @property
    def is_last_category(self) -> bool:
        return self.current_index >= len(self.categories) - 1

    def current_items(self) -> list[QuizItem]:
        """Items of the current category, in catalog order."""
        category = self.current_category
        return list(self._by_category[category]) if category else []

    def answer(self, item_id: str, deployed: bool) -> None:
        """Record (or change) the answer to an item."""
        if item_id not in self._item_ids:
            raise InvalidQuizInputError(f"Unknown quiz item: {item_id}")
        self.answers[item_id] = deployed

    def answered_in_category(self, category: QuizCategory) -> int:
        return sum(1 for item in self._by_category.get(category, []) if item.id in self.answers)

    def is_category_complete(self, category: QuizCategory) -> bool:
        items = self._by_category.get(category, [])
        return bool(items) and all(item.id in self.answers for item in items)

    def can_proceed(self) -> bool:
        """Whether every item in the current category has been answered."""
        return all(item.id in self.answers for item in self.current_items())

    def go_to_category(self, index: int) -> bool:
        """
        Jump to a category by position.

        Moving back is always allowed. Moving forward requires every
        category before the target to be complete.

        Returns:
            True if the current category changed or already matched
        """
        if not 0 <= index < len(self.categories):
            return False
        if index > self.current_index and not all(
            self.is_category_complete(category) for category in self.categories[:index]
        ):
            return False
        self.current_index = index
        return True

    def next_category(self) -> bool:
        """Advance one category. Returns False if incomplete or already last."""
        if self.is_last_category or not self.can_proceed():
            return False
        self.current_index += 1
        return True

    def previous_category(self) -> bool:
        """Go back one category. Returns False if already first."""
        if self.current_index == 0:
            return False
        self.current_index -= 1
        return True

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    def progress_percentage(self) -> float:
        if not self.items:
            return 0.0
        return self.answered_count / len(self.items) * 100

    def can_submit(self) -> bool:
        """Whether every item in the catalog has been answered."""
        return bool(self.items) and self.answered_count == len(self.items)

    def to_responses(self) -> list[QuizResponse]:
        """Answers as a response list, in answer order."""
        return [
            QuizResponse(item_id=item_id, deployed=deployed)
            for item_id, deployed in self.answers.items()
        ]
