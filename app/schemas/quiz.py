from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List
from datetime import datetime

from app.core.constants import QuestionTypeEnum, CHOICE_QUESTION_TYPES

class QuizBase(BaseModel):
    title: str
    description: Optional[str] = None
    time_limit_minutes: Optional[int] = None
    due_date: Optional[datetime] = None

class QuizCreate(QuizBase):

    @field_validator("title")
    def validate_title(cls, v):
        if not v or not v.strip():
            raise ValueError("Quiz title cannot be empty.")
        return v.strip()

    @field_validator("time_limit_minutes")
    def validate_time_limit(cls, v):
        if v is not None and v <= 0:
            raise ValueError("Time limit must be a positive integer.")
        return v

class Quiz(QuizBase):
    id: int
    course_id: int
    creator_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class QuizWithCourse(Quiz):
    course_name: Optional[str] = None

class QuizListItem(Quiz):
    total_questions: int = 0
    submitted_count: int = 0


class QuestionOptionCreate(BaseModel):
    option_text: str
    is_correct: bool = False

class QuestionOption(BaseModel):
    """Option as shown to a quiz taker: no correctness flag."""
    id: int
    option_text: str

    model_config = ConfigDict(from_attributes=True)

class QuestionOptionWithAnswer(QuestionOption):
    is_correct: bool


class QuizQuestionBase(BaseModel):
    question_text: str
    question_type: QuestionTypeEnum
    points: int = Field(default=1, ge=1)
    order_index: int

    model_config = ConfigDict(use_enum_values=True)

class QuizQuestionCreate(QuizQuestionBase):
    options: List[QuestionOptionCreate] = []

    @field_validator("question_text")
    def validate_question_text(cls, v):
        if not v or not v.strip():
            raise ValueError("Question text cannot be empty.")
        return v

    @model_validator(mode="after")
    def validate_options(self):
        question_type = QuestionTypeEnum(self.question_type)
        if question_type in CHOICE_QUESTION_TYPES and not self.options:
            raise ValueError(f"Options are required for {question_type.value} questions.")
        if question_type == QuestionTypeEnum.TRUE_FALSE and len(self.options) != 2:
            raise ValueError("True/false questions must have exactly two options.")
        if question_type == QuestionTypeEnum.SHORT_ANSWER and self.options:
            raise ValueError("Short answer questions cannot have options.")
        return self

class QuizQuestion(QuizQuestionBase):
    id: int
    options: List[QuestionOption] = []

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

class QuizQuestionWithAnswers(QuizQuestion):
    options: List[QuestionOptionWithAnswer] = []


class QuizDetails(BaseModel):
    quiz: QuizWithCourse
    questions: List[QuizQuestion]
