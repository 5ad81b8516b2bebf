from enum import Enum


class QuestionTypeEnum(str, Enum):
    MULTIPLE_CHOICE_SINGLE = "multiple_choice_single"
    MULTIPLE_CHOICE_MULTIPLE = "multiple_choice_multiple"
    TRUE_FALSE = "true_false"
    SHORT_ANSWER = "short_answer"

# Graded by comparing selected option ids against the correct option ids.
CHOICE_QUESTION_TYPES = frozenset({
    QuestionTypeEnum.MULTIPLE_CHOICE_SINGLE,
    QuestionTypeEnum.MULTIPLE_CHOICE_MULTIPLE,
    QuestionTypeEnum.TRUE_FALSE,
})

class GradingOutcome(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    PENDING_REVIEW = "pending_review"
