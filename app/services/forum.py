import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.crud.course import course as crud_course
from app.crud.forum_reply import forum_reply as crud_forum_reply
from app.crud.forum_thread import forum_thread as crud_forum_thread
from app.models.forum_reply import ForumReply
from app.models.forum_thread import ForumThread
from app.schemas.forum import (
    AcceptAnswerResult,
    AcceptedReply,
    ForumReplyCreate,
    ForumThreadCreate,
    ForumThreadListItem,
    ForumReply as ForumReplySchema,
    ForumThread as ForumThreadSchema,
    ThreadDetails,
)
from app.schemas.user import UserContext

logger = logging.getLogger(__name__)


class ForumService:

    def create_thread(self, db: Session, course_id: int, thread_in: ForumThreadCreate, current_user_context: UserContext) -> ForumThread:
        course = crud_course.get(db, id=course_id)
        if not course:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Course not found.")

        thread_data = thread_in.model_dump()
        thread_data.update(course_id=course_id, creator_id=current_user_context.user.id, is_resolved=False)
        try:
            return crud_forum_thread.create(db, obj_in=thread_data)
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Failed to create forum thread in course {course_id}", exc_info=True)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error creating forum thread.")

    def list_threads_for_course(self, db: Session, course_id: int) -> List[ForumThreadListItem]:
        rows = crud_forum_thread.get_by_course_with_reply_counts(db, course_id=course_id)
        return [
            ForumThreadListItem(**ForumThreadSchema.model_validate(thread).model_dump(), reply_count=reply_count or 0)
            for thread, reply_count in rows
        ]

    def get_thread_with_replies(self, db: Session, thread_id: int) -> ThreadDetails:
        thread = crud_forum_thread.get_with_creator(db, id=thread_id)
        if not thread:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Forum thread not found.")

        replies = crud_forum_reply.get_by_thread(db, thread_id=thread_id)
        return ThreadDetails(
            thread=ForumThreadSchema.model_validate(thread),
            replies=[ForumReplySchema.model_validate(r) for r in replies],
        )

    def create_reply(self, db: Session, thread_id: int, reply_in: ForumReplyCreate, current_user_context: UserContext) -> ForumReply:
        thread = crud_forum_thread.get(db, id=thread_id)
        if not thread:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Forum thread not found.")

        reply_data = {
            "thread_id": thread_id,
            "creator_id": current_user_context.user.id,
            "body": reply_in.body,
            "is_accepted_answer": False,
        }
        try:
            return crud_forum_reply.create(db, obj_in=reply_data)
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Failed to add reply to thread {thread_id}", exc_info=True)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error adding reply.")

    def toggle_accepted_answer(self, db: Session, reply_id: int, current_user_context: UserContext) -> AcceptAnswerResult:
        """Flip a reply's accepted flag on behalf of the thread creator.

        Accepting clears every other accepted reply of the thread first, and the
        thread's ``is_resolved`` is recomputed from the replies afterwards, so
        both flags commit together. Calling it again on the same reply
        un-accepts it.
        """
        user_id = current_user_context.user.id

        try:
            reply = crud_forum_reply.get(db, id=reply_id)
            if not reply:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reply not found.")

            thread = crud_forum_thread.get_for_update(db, id=reply.thread_id)
            if not thread:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Forum thread not found.")

            if thread.creator_id != user_id:
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="Only the thread creator can accept an answer."
                )

            # Re-read under the thread lock so the toggle sees the latest flag.
            reply = crud_forum_reply.get_for_update(db, id=reply_id)
            new_state = not reply.is_accepted_answer

            if new_state:
                crud_forum_reply.clear_accepted(db, thread_id=thread.id, exclude_reply_id=reply.id)

            reply.is_accepted_answer = new_state
            db.flush()

            thread_resolved = bool(crud_forum_reply.has_accepted(db, thread_id=thread.id))
            thread.is_resolved = thread_resolved
            db.flush()
            db.commit()
        except HTTPException:
            db.rollback()
            raise
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Failed to toggle accepted answer on reply {reply_id}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error updating answer status."
            )

        logger.info(
            f"User {user_id} {'marked' if new_state else 'unmarked'} reply {reply_id} as accepted; "
            f"thread {thread.id} resolved={thread_resolved}"
        )
        return AcceptAnswerResult(
            reply=AcceptedReply(id=reply_id, is_accepted=new_state),
            thread_resolved=thread_resolved,
        )


forum_service = ForumService()
