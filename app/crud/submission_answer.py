from typing import Any, Dict, List
from sqlalchemy import insert
from sqlalchemy.orm import Session, selectinload

from app.crud.base import CRUDBase
from app.models.quiz_question import QuizQuestion
from app.models.submission_answer import SubmissionAnswer

class CRUDSubmissionAnswer(CRUDBase[SubmissionAnswer, dict, dict]):

    def create_bulk(self, db: Session, *, rows: List[Dict[str, Any]]) -> None:
        """Insert all graded answers of a submission in one statement."""
        if not rows:
            return
        db.execute(insert(SubmissionAnswer), rows)

    def get_all_by_submission(self, db: Session, *, submission_id: int) -> List[SubmissionAnswer]:
        return (
            db.query(SubmissionAnswer)
            .join(QuizQuestion, SubmissionAnswer.question_id == QuizQuestion.id)
            .options(selectinload(SubmissionAnswer.question))
            .filter(SubmissionAnswer.submission_id == submission_id)
            .order_by(QuizQuestion.order_index, QuizQuestion.id)
            .all()
        )

submission_answer = CRUDSubmissionAnswer(SubmissionAnswer)
