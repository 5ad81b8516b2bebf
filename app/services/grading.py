"""Auto-grading rules for submitted quiz answers.

Choice questions (single, multiple and true/false) are graded by comparing
option id sets; there is no partial credit. Short answers cannot be graded
automatically and are left for manual review.
"""
from typing import Iterable, Optional

from app.core.constants import CHOICE_QUESTION_TYPES, GradingOutcome, QuestionTypeEnum


def grade_answer(
    question_type: QuestionTypeEnum,
    correct_option_ids: Iterable[int],
    selected_option_ids: Optional[Iterable[int]],
) -> GradingOutcome:
    question_type = QuestionTypeEnum(question_type)
    if question_type not in CHOICE_QUESTION_TYPES:
        return GradingOutcome.PENDING_REVIEW

    correct_sorted = sorted(int(option_id) for option_id in correct_option_ids)
    selected_sorted = sorted(int(option_id) for option_id in (selected_option_ids or []))
    if correct_sorted == selected_sorted:
        return GradingOutcome.CORRECT
    return GradingOutcome.INCORRECT


def points_for(outcome: GradingOutcome, question_points: int) -> int:
    return question_points if outcome == GradingOutcome.CORRECT else 0


def stored_correctness(outcome: GradingOutcome) -> Optional[bool]:
    """Map an outcome onto the nullable ``is_correct`` column."""
    if outcome == GradingOutcome.PENDING_REVIEW:
        return None
    return outcome == GradingOutcome.CORRECT
