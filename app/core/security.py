from datetime import datetime, timedelta, timezone
from typing import Optional
import uuid

from jose import jwt

from app.core.config import settings

ALGORITHM = "HS256"

def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """Mint a bearer token for ``user_id``.

    Login lives in a separate service; this is the shape it must produce for
    ``deps.get_current_user_with_context`` to accept the token.
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"user_id": user_id, "exp": expire, "jti": str(uuid.uuid4())}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)

def decode_access_token(token: str) -> dict:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
