"""Public user representation. Never carries the password digest."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserSafe(BaseModel):
    """User record as returned to clients (no password field)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: str
    role: str
    is_verified: bool
    created_at: datetime
    updated_at: datetime
