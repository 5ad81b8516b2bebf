from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from app.crud.base import CRUDBase
from app.models.quiz import Quiz
from app.models.quiz_question import QuizQuestion
from app.models.quiz_submission import QuizSubmission
from app.schemas.quiz import QuizCreate

class CRUDQuiz(CRUDBase[Quiz, QuizCreate, QuizCreate]):

    def get_with_course(self, db: Session, *, id: int) -> Optional[Quiz]:
        return (
            db.query(Quiz)
            .options(selectinload(Quiz.course))
            .filter(Quiz.id == id)
            .first()
        )

    def get_by_course_with_counts(self, db: Session, *, course_id: int, user_id: int) -> List[Tuple[Quiz, int, int]]:
        """Quizzes of a course, newest first, with question count and the user's submission count."""
        total_questions = (
            db.query(func.count(QuizQuestion.id))
            .filter(QuizQuestion.quiz_id == Quiz.id)
            .correlate(Quiz)
            .scalar_subquery()
        )
        submitted_count = (
            db.query(func.count(QuizSubmission.id))
            .filter(QuizSubmission.quiz_id == Quiz.id, QuizSubmission.user_id == user_id)
            .correlate(Quiz)
            .scalar_subquery()
        )
        return (
            db.query(Quiz, total_questions, submitted_count)
            .filter(Quiz.course_id == course_id)
            .order_by(Quiz.created_at.desc(), Quiz.id.desc())
            .all()
        )

quiz = CRUDQuiz(Quiz)
