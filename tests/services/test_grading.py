import pytest

from app.core.constants import GradingOutcome, QuestionTypeEnum
from app.services.grading import grade_answer, points_for, stored_correctness


class TestGradeAnswer:
    def test_single_choice_exact_match_is_correct(self):
        assert grade_answer(QuestionTypeEnum.MULTIPLE_CHOICE_SINGLE, [10], [10]) == GradingOutcome.CORRECT

    @pytest.mark.parametrize("selected", [[11], [10, 11], [], None])
    def test_single_choice_anything_else_is_incorrect(self, selected):
        assert grade_answer(QuestionTypeEnum.MULTIPLE_CHOICE_SINGLE, [10], selected) == GradingOutcome.INCORRECT

    def test_multiple_choice_ignores_selection_order(self):
        assert grade_answer(QuestionTypeEnum.MULTIPLE_CHOICE_MULTIPLE, [3, 1, 2], [2, 3, 1]) == GradingOutcome.CORRECT

    def test_multiple_choice_sorts_numerically(self):
        # a lexicographic sort would put 10 before 9
        assert grade_answer(QuestionTypeEnum.MULTIPLE_CHOICE_MULTIPLE, [9, 10], [10, 9]) == GradingOutcome.CORRECT

    @pytest.mark.parametrize("selected", [[1, 2], [1, 2, 3, 4], [1, 2, 4]])
    def test_multiple_choice_has_no_partial_credit(self, selected):
        assert grade_answer(QuestionTypeEnum.MULTIPLE_CHOICE_MULTIPLE, [1, 2, 3], selected) == GradingOutcome.INCORRECT

    def test_true_false_is_graded_like_single_choice(self):
        assert grade_answer(QuestionTypeEnum.TRUE_FALSE, [5], [5]) == GradingOutcome.CORRECT
        assert grade_answer(QuestionTypeEnum.TRUE_FALSE, [5], [6]) == GradingOutcome.INCORRECT

    @pytest.mark.parametrize("selected", [[], [1], None])
    def test_short_answer_is_pending_review(self, selected):
        assert grade_answer(QuestionTypeEnum.SHORT_ANSWER, [], selected) == GradingOutcome.PENDING_REVIEW

    def test_accepts_raw_question_type_values(self):
        assert grade_answer("multiple_choice_single", [4], [4]) == GradingOutcome.CORRECT


def test_points_only_for_correct_answers():
    assert points_for(GradingOutcome.CORRECT, 3) == 3
    assert points_for(GradingOutcome.INCORRECT, 3) == 0
    assert points_for(GradingOutcome.PENDING_REVIEW, 3) == 0


def test_stored_correctness_is_tri_state():
    assert stored_correctness(GradingOutcome.CORRECT) is True
    assert stored_correctness(GradingOutcome.INCORRECT) is False
    assert stored_correctness(GradingOutcome.PENDING_REVIEW) is None
