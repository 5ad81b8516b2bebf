from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from app.crud.base import CRUDBase
from app.models.forum_reply import ForumReply
from app.models.forum_thread import ForumThread
from app.schemas.forum import ForumThreadCreate

class CRUDForumThread(CRUDBase[ForumThread, ForumThreadCreate, ForumThreadCreate]):

    def get_with_creator(self, db: Session, *, id: int) -> Optional[ForumThread]:
        return (
            db.query(ForumThread)
            .options(selectinload(ForumThread.creator))
            .filter(ForumThread.id == id)
            .first()
        )

    def get_for_update(self, db: Session, *, id: int) -> Optional[ForumThread]:
        """Row-lock the thread so concurrent accept toggles on it serialize."""
        return (
            db.query(ForumThread)
            .filter(ForumThread.id == id)
            .with_for_update()
            .populate_existing()
            .first()
        )

    def get_by_course_with_reply_counts(self, db: Session, *, course_id: int) -> List[Tuple[ForumThread, int]]:
        reply_count = (
            db.query(func.count(ForumReply.id))
            .filter(ForumReply.thread_id == ForumThread.id)
            .correlate(ForumThread)
            .scalar_subquery()
        )
        return (
            db.query(ForumThread, reply_count)
            .options(selectinload(ForumThread.creator))
            .filter(ForumThread.course_id == course_id)
            .order_by(ForumThread.created_at.desc(), ForumThread.id.desc())
            .all()
        )

forum_thread = CRUDForumThread(ForumThread)
