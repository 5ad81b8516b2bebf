import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.crud.course import course as crud_course
from app.crud.quiz import quiz as crud_quiz
from app.crud.quiz_question import quiz_question as crud_quiz_question
from app.models.quiz import Quiz
from app.models.quiz_question import QuizQuestion
from app.schemas.quiz import QuizCreate, QuizDetails, QuizListItem, QuizQuestionCreate, QuizWithCourse, QuizQuestion as QuizQuestionSchema
from app.schemas.user import UserContext

logger = logging.getLogger(__name__)


class QuizService:

    def create_quiz(self, db: Session, course_id: int, quiz_in: QuizCreate, current_user_context: UserContext) -> Quiz:
        course = crud_course.get(db, id=course_id)
        if not course:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found.")

        quiz_data = quiz_in.model_dump()
        quiz_data.update(course_id=course_id, creator_id=current_user_context.user.id)
        try:
            new_quiz = crud_quiz.create(db, obj_in=quiz_data)
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Failed to create quiz for course {course_id}", exc_info=True)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error creating quiz.")

        logger.info(f"User {current_user_context.user.id} created quiz {new_quiz.id} in course {course_id}")
        return new_quiz

    def list_quizzes_for_course(self, db: Session, course_id: int, current_user_context: UserContext) -> List[QuizListItem]:
        rows = crud_quiz.get_by_course_with_counts(db, course_id=course_id, user_id=current_user_context.user.id)
        return [
            QuizListItem(
                **QuizWithCourse.model_validate(quiz).model_dump(exclude={"course_name"}),
                total_questions=total_questions or 0,
                submitted_count=submitted_count or 0,
            )
            for quiz, total_questions, submitted_count in rows
        ]

    def get_quiz_with_questions(self, db: Session, quiz_id: int) -> QuizDetails:
        quiz = crud_quiz.get_with_course(db, id=quiz_id)
        if not quiz:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quiz not found.")

        questions = crud_quiz_question.get_by_quiz(db, quiz_id=quiz_id)
        return QuizDetails(
            quiz=QuizWithCourse.model_validate(quiz),
            questions=[QuizQuestionSchema.model_validate(q) for q in questions],
        )

    def add_question(self, db: Session, quiz_id: int, question_in: QuizQuestionCreate, current_user_context: UserContext) -> QuizQuestion:
        quiz = crud_quiz.get(db, id=quiz_id)
        if not quiz:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quiz not found.")

        try:
            new_question = crud_quiz_question.create_with_options(db, quiz_id=quiz_id, obj_in=question_in)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Failed to add question to quiz {quiz_id}", exc_info=True)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error adding question.")

        db.refresh(new_question)
        logger.info(f"User {current_user_context.user.id} added question {new_question.id} to quiz {quiz_id}")
        return new_question


quiz_service = QuizService()
