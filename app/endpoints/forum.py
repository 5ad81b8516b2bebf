from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.schemas.response import APIResponse
from app.utils import deps
from app.schemas.forum import (
    AcceptAnswerResult,
    ForumReply,
    ForumReplyCreate,
    ForumThread,
    ForumThreadCreate,
    ForumThreadListItem,
    ThreadDetails,
)
from app.services.forum import forum_service
from app.schemas.user import UserContext

router = APIRouter()

@router.post("/courses/{course_id}/forum", response_model=APIResponse[ForumThread], status_code=status.HTTP_201_CREATED)
async def create_thread(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int,
    thread_in: ForumThreadCreate,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    thread = forum_service.create_thread(db, course_id=course_id, thread_in=thread_in, current_user_context=context)
    return APIResponse(message="Forum thread created successfully.", data=ForumThread.model_validate(thread))


@router.get("/courses/{course_id}/forum", response_model=APIResponse[List[ForumThreadListItem]])
async def list_threads_for_course(
    *,
    db: Session = Depends(deps.get_db),
    course_id: int,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    threads = forum_service.list_threads_for_course(db, course_id=course_id)
    return APIResponse(message="Forum threads retrieved successfully.", data=threads)


@router.get("/forum/threads/{thread_id}", response_model=APIResponse[ThreadDetails])
async def get_thread_with_replies(
    *,
    db: Session = Depends(deps.get_db),
    thread_id: int,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    details = forum_service.get_thread_with_replies(db, thread_id=thread_id)
    return APIResponse(message="Forum thread retrieved successfully.", data=details)


@router.post("/forum/threads/{thread_id}/replies", response_model=APIResponse[ForumReply], status_code=status.HTTP_201_CREATED)
async def create_reply(
    *,
    db: Session = Depends(deps.get_db),
    thread_id: int,
    reply_in: ForumReplyCreate,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    reply = forum_service.create_reply(db, thread_id=thread_id, reply_in=reply_in, current_user_context=context)
    return APIResponse(message="Reply added successfully.", data=ForumReply.model_validate(reply))


@router.put("/forum/replies/{reply_id}/accept", response_model=APIResponse[AcceptAnswerResult])
async def accept_answer(
    *,
    db: Session = Depends(deps.get_db),
    reply_id: int,
    context: UserContext = Depends(deps.get_current_user_with_context)
):
    result = forum_service.toggle_accepted_answer(db, reply_id=reply_id, current_user_context=context)
    state = "marked" if result.reply.is_accepted else "unmarked"
    return APIResponse(message=f"Reply {state} as accepted answer.", data=result)
