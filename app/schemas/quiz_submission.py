from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from app.core.constants import QuestionTypeEnum

class SubmittedAnswer(BaseModel):
    question_id: int
    selected_option_ids: Optional[List[int]] = None
    answer_text: Optional[str] = None

    @field_validator("selected_option_ids", mode="before")
    def default_empty_selection(cls, v):
        return [] if v is None else v

class QuizSubmissionCreate(BaseModel):
    answers: List[SubmittedAnswer] = Field(..., min_length=1)

    @field_validator("answers")
    def validate_unique_questions(cls, v):
        question_ids = [answer.question_id for answer in v]
        if len(question_ids) != len(set(question_ids)):
            raise ValueError("Each question may only be answered once per submission.")
        return v

class QuizSubmissionResult(BaseModel):
    submission_id: int
    score: int
    max_possible_score: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubmissionAnswer(BaseModel):
    id: int = Field(..., serialization_alias="answer_id")
    question_id: int
    selected_option_ids: List[int] = []
    answer_text: Optional[str] = None
    is_correct: Optional[bool] = None
    points_awarded: int = 0
    question_text: Optional[str] = None
    question_type: Optional[QuestionTypeEnum] = None

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

class QuizSubmission(BaseModel):
    id: int
    quiz_id: int
    user_id: int
    score: Optional[int] = None
    max_possible_score: Optional[int] = None
    submitted_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    quiz_title: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class SubmissionDetails(BaseModel):
    submission: QuizSubmission
    answers: List[SubmissionAnswer]
