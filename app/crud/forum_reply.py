from typing import List, Optional
from sqlalchemy import exists, update
from sqlalchemy.orm import Session, selectinload

from app.crud.base import CRUDBase
from app.models.forum_reply import ForumReply
from app.schemas.forum import ForumReplyCreate

class CRUDForumReply(CRUDBase[ForumReply, ForumReplyCreate, ForumReplyCreate]):

    def get_by_thread(self, db: Session, *, thread_id: int) -> List[ForumReply]:
        return (
            db.query(ForumReply)
            .options(selectinload(ForumReply.creator))
            .filter(ForumReply.thread_id == thread_id)
            .order_by(ForumReply.created_at.asc(), ForumReply.id.asc())
            .all()
        )

    def get_for_update(self, db: Session, *, id: int) -> Optional[ForumReply]:
        return (
            db.query(ForumReply)
            .filter(ForumReply.id == id)
            .with_for_update()
            .populate_existing()
            .first()
        )

    def clear_accepted(self, db: Session, *, thread_id: int, exclude_reply_id: int) -> None:
        """Unset the accepted flag on every other reply of the thread."""
        (
            db.query(ForumReply.id)
            .filter(ForumReply.thread_id == thread_id)
            .with_for_update()
            .all()
        )
        db.execute(
            update(ForumReply)
            .where(
                ForumReply.thread_id == thread_id,
                ForumReply.id != exclude_reply_id,
                ForumReply.is_accepted_answer.is_(True),
            )
            .values(is_accepted_answer=False)
            .execution_options(synchronize_session="fetch")
        )

    def has_accepted(self, db: Session, *, thread_id: int) -> bool:
        return db.query(
            exists().where(
                ForumReply.thread_id == thread_id,
                ForumReply.is_accepted_answer.is_(True),
            )
        ).scalar()

forum_reply = CRUDForumReply(ForumReply)
