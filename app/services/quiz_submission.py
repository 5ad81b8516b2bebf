import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.constants import CHOICE_QUESTION_TYPES, QuestionTypeEnum
from app.crud.quiz import quiz as crud_quiz
from app.crud.quiz_question import quiz_question as crud_quiz_question
from app.crud.quiz_submission import quiz_submission as crud_quiz_submission
from app.crud.submission_answer import submission_answer as crud_submission_answer
from app.schemas.quiz_submission import (
    QuizSubmission,
    QuizSubmissionCreate,
    QuizSubmissionResult,
    SubmissionAnswer,
    SubmissionDetails,
)
from app.schemas.user import UserContext
from app.services.grading import grade_answer, points_for, stored_correctness

logger = logging.getLogger(__name__)


class QuizSubmissionService:

    def submit_quiz(self, db: Session, quiz_id: int, submission_in: QuizSubmissionCreate,
                    current_user_context: UserContext) -> QuizSubmissionResult:
        """Record and grade one submission atomically.

        Every question of the quiz counts toward the maximum score, answered or
        not. Answers for questions outside the quiz are dropped. A database
        failure rolls back the submission row together with its answers.
        """
        user_id = current_user_context.user.id

        quiz = crud_quiz.get(db, id=quiz_id)
        if not quiz:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quiz not found.")

        try:
            submission = crud_quiz_submission.create(
                db, obj_in={"quiz_id": quiz_id, "user_id": user_id}, commit=False
            )

            questions = {q.id: q for q in crud_quiz_question.get_by_quiz(db, quiz_id=quiz_id)}
            max_possible_score = sum(q.points for q in questions.values())

            score = 0
            answer_rows = []
            for answer_in in submission_in.answers:
                question = questions.get(answer_in.question_id)
                if question is None:
                    logger.warning(
                        f"Submission {submission.id}: question {answer_in.question_id} is not part of quiz {quiz_id}, skipping"
                    )
                    continue

                question_type = QuestionTypeEnum(question.question_type)
                is_choice = question_type in CHOICE_QUESTION_TYPES
                selected_option_ids = list(answer_in.selected_option_ids or []) if is_choice else []

                outcome = grade_answer(question_type, question.correct_option_ids, selected_option_ids)
                points_awarded = points_for(outcome, question.points)
                score += points_awarded

                answer_rows.append({
                    "submission_id": submission.id,
                    "question_id": question.id,
                    "selected_option_ids": selected_option_ids,
                    "answer_text": None if is_choice else answer_in.answer_text,
                    "is_correct": stored_correctness(outcome),
                    "points_awarded": points_awarded,
                })

            crud_submission_answer.create_bulk(db, rows=answer_rows)
            crud_quiz_submission.update(
                db,
                db_obj=submission,
                obj_in={
                    "score": score,
                    "max_possible_score": max_possible_score,
                    "completed_at": datetime.now(timezone.utc),
                },
                commit=False,
            )
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Failed to submit quiz {quiz_id} for user {user_id}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error submitting quiz."
            )

        logger.info(
            f"User {user_id} submitted quiz {quiz_id}: submission {submission.id} scored {score}/{max_possible_score}"
        )
        return QuizSubmissionResult(
            submission_id=submission.id,
            score=score,
            max_possible_score=max_possible_score,
        )

    def get_submission_result(self, db: Session, submission_id: int, current_user_context: UserContext) -> SubmissionDetails:
        submission = crud_quiz_submission.get_with_quiz(db, id=submission_id)
        if not submission:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Submission not found.")

        if submission.user_id != current_user_context.user.id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only view your own submissions."
            )

        answers = crud_submission_answer.get_all_by_submission(db, submission_id=submission.id)
        return SubmissionDetails(
            submission=QuizSubmission.model_validate(submission),
            answers=[SubmissionAnswer.model_validate(a) for a in answers],
        )


quiz_submission_service = QuizSubmissionService()
