from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime

from app.schemas.user import UserSummary

class ForumThreadCreate(BaseModel):
    title: str
    body: Optional[str] = None

    @field_validator("title")
    def validate_title(cls, v):
        if not v or not v.strip():
            raise ValueError("Thread title cannot be empty.")
        return v.strip()

class ForumReplyCreate(BaseModel):
    body: str

    @field_validator("body")
    def validate_body(cls, v):
        if not v or not v.strip():
            raise ValueError("Reply body cannot be empty.")
        return v

class ForumThread(BaseModel):
    id: int
    course_id: int
    creator_id: int
    title: str
    body: Optional[str] = None
    is_resolved: bool = False
    created_at: Optional[datetime] = None
    creator: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)

class ForumThreadListItem(ForumThread):
    reply_count: int = 0

class ForumReply(BaseModel):
    id: int
    thread_id: int
    creator_id: int
    body: str
    is_accepted_answer: bool = False
    created_at: Optional[datetime] = None
    creator: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)

class ThreadDetails(BaseModel):
    thread: ForumThread
    replies: List[ForumReply]


class AcceptedReply(BaseModel):
    id: int
    is_accepted: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class AcceptAnswerResult(BaseModel):
    reply: AcceptedReply
    thread_resolved: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
