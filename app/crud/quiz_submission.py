from typing import Optional
from sqlalchemy.orm import Session, selectinload

from app.crud.base import CRUDBase
from app.models.quiz_submission import QuizSubmission

class CRUDQuizSubmission(CRUDBase[QuizSubmission, dict, dict]):

    def get_with_quiz(self, db: Session, *, id: int) -> Optional[QuizSubmission]:
        return (
            db.query(QuizSubmission)
            .options(selectinload(QuizSubmission.quiz))
            .filter(QuizSubmission.id == id)
            .first()
        )

quiz_submission = CRUDQuizSubmission(QuizSubmission)
