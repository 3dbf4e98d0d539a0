"""User profile endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.routes.auth import get_current_user, require_admin
from app.core.database import get_db
from app.models.user import User
from app.schemas.common import ApiResponse
from app.schemas.user import UserSafe

router = APIRouter()


@router.get("/me", response_model=ApiResponse[UserSafe])
def get_me(
    current_user: Annotated[UserSafe, Depends(get_current_user)],
) -> ApiResponse[UserSafe]:
    """Return the authenticated user's profile."""
    return ApiResponse[UserSafe](message="User retrieved", data=current_user)


@router.get("", response_model=ApiResponse[list[UserSafe]])
def list_users(
    _admin: Annotated[UserSafe, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[list[UserSafe]]:
    """List all users (admin only)."""
    users = db.query(User).order_by(User.created_at, User.id).all()
    return ApiResponse[list[UserSafe]](
        message="Users retrieved",
        data=[UserSafe.model_validate(u) for u in users],
    )
