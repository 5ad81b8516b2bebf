from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.schemas.response import APIResponse
from app.utils import deps
from app.schemas.quiz import Quiz, QuizCreate, QuizDetails, QuizListItem, QuizQuestionCreate, QuizQuestionWithAnswers
from app.schemas.quiz_submission import QuizSubmissionCreate, QuizSubmissionResult
from app.services.quiz import quiz_service
from app.services.quiz_submission import quiz_submission_service
from app.schemas.user import UserContext

router = APIRouter()

@router.post("/courses/{course_id}/quizzes", response_model=APIResponse[Quiz], status_code=status.HTTP_201_CREATED)
async def create_quiz(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int,
    quiz_in: QuizCreate,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    new_quiz = quiz_service.create_quiz(db, course_id=course_id, quiz_in=quiz_in, current_user_context=context)
    return APIResponse(message="Quiz created successfully.", data=Quiz.model_validate(new_quiz))


@router.get("/courses/{course_id}/quizzes", response_model=APIResponse[List[QuizListItem]])
async def list_quizzes_for_course(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    quizzes = quiz_service.list_quizzes_for_course(db, course_id=course_id, current_user_context=context)
    return APIResponse(message="Quizzes retrieved successfully.", data=quizzes)


@router.get("/quizzes/{quiz_id}", response_model=APIResponse[QuizDetails])
async def get_quiz_with_questions(
    *,
    db: Session = Depends(deps.get_db),
    quiz_id: int,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    details = quiz_service.get_quiz_with_questions(db, quiz_id=quiz_id)
    return APIResponse(message="Quiz retrieved successfully.", data=details)


@router.post("/quizzes/{quiz_id}/questions", response_model=APIResponse[QuizQuestionWithAnswers], status_code=status.HTTP_201_CREATED)
async def add_question_to_quiz(
    *,
    db: Session = Depends(deps.get_db),
    quiz_id: int,
    question_in: QuizQuestionCreate,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    question = quiz_service.add_question(db, quiz_id=quiz_id, question_in=question_in, current_user_context=context)
    return APIResponse(message="Question added successfully.", data=QuizQuestionWithAnswers.model_validate(question))


@router.post("/quizzes/{quiz_id}/submit", response_model=APIResponse[QuizSubmissionResult])
async def submit_quiz(
    *,
    db: Session = Depends(deps.get_db),
    quiz_id: int,
    submission_in: QuizSubmissionCreate,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    result = quiz_submission_service.submit_quiz(db, quiz_id=quiz_id, submission_in=submission_in, current_user_context=context)
    return APIResponse(message="Quiz submitted successfully.", data=result)
