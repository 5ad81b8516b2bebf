from pydantic import BaseModel

class TokenPayload(BaseModel):
    user_id: int
    jti: str | None = None
    exp: int | None = None
