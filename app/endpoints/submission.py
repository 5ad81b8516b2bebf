from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.schemas.response import APIResponse
from app.utils import deps
from app.schemas.quiz_submission import SubmissionDetails
from app.services.quiz_submission import quiz_submission_service
from app.schemas.user import UserContext

router = APIRouter()

@router.get("/{submission_id}", response_model=APIResponse[SubmissionDetails])
async def get_submission_result(
    *,
    db: Session = Depends(deps.get_db),
    submission_id: int,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    details = quiz_submission_service.get_submission_result(db, submission_id=submission_id, current_user_context=context)
    return APIResponse(message="Submission retrieved successfully.", data=details)
