from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

class UserSummary(BaseModel):
    """Public view of a user, embedded in forum payloads."""
    id: int
    name: str
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class User(UserSummary):
    email: str
    created_at: Optional[datetime] = None

class UserContext(BaseModel):
    """The authenticated caller, as resolved from the bearer token."""
    user: User
    model_config = ConfigDict(from_attributes=True)
