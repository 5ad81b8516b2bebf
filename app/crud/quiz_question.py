from typing import List
from sqlalchemy.orm import Session, selectinload

from app.core.constants import QuestionTypeEnum
from app.crud.base import CRUDBase
from app.models.quiz_question import QuizQuestion, QuestionOption
from app.schemas.quiz import QuizQuestionCreate

class CRUDQuizQuestion(CRUDBase[QuizQuestion, QuizQuestionCreate, QuizQuestionCreate]):

    def get_by_quiz(self, db: Session, *, quiz_id: int) -> List[QuizQuestion]:
        return (
            db.query(QuizQuestion)
            .options(selectinload(QuizQuestion.options))
            .filter(QuizQuestion.quiz_id == quiz_id)
            .order_by(QuizQuestion.order_index, QuizQuestion.id)
            .all()
        )

    def create_with_options(self, db: Session, *, quiz_id: int, obj_in: QuizQuestionCreate) -> QuizQuestion:
        """Stage the question and its options; the caller owns the commit."""
        db_obj = QuizQuestion(
            quiz_id=quiz_id,
            question_text=obj_in.question_text,
            question_type=QuestionTypeEnum(obj_in.question_type),
            points=obj_in.points,
            order_index=obj_in.order_index,
            options=[
                QuestionOption(option_text=option.option_text, is_correct=option.is_correct)
                for option in obj_in.options
            ],
        )
        db.add(db_obj)
        db.flush()
        return db_obj

quiz_question = CRUDQuizQuestion(QuizQuestion)
