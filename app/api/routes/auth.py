"""Signup, login and logout, plus the auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import AppError
from app.core.security import USER_ID_CLAIM, decode_access_token
from app.models.user import User
from app.schemas.auth import LoginData, LoginRequest, SignupRequest
from app.schemas.common import ApiResponse, MessageResponse
from app.schemas.user import UserSafe
from app.services.auth import login_user, signup_user

router = APIRouter()
security = HTTPBearer(auto_error=False)

# Name of the cookie carrying the session token.
SESSION_COOKIE = "token"


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Deliver the session token as an httpOnly, same-site strict cookie expiring with the token."""
    response.set_cookie(
        SESSION_COOKIE,
        value=token,
        max_age=settings.jwt_expire_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )


def extract_token(
    request: Request, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    """Bearer header first, then the 'token' cookie."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(SESSION_COOKIE) or None


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserSafe:
    """
    Dependency: require a valid session token and return the current user.

    The sanitized user is also stored on request.state.user. Raises 401 if the
    token is missing, invalid, expired, or names a user that no longer exists.
    """
    token = extract_token(request, credentials)
    if token is None:
        raise AppError.auth_error("Authentication required")
    try:
        payload = decode_access_token(token, settings)
    except jwt.PyJWTError:
        raise AppError.auth_error("Invalid or expired token")

    user_id = payload.get(USER_ID_CLAIM)
    if not user_id or not isinstance(user_id, str):
        raise AppError.auth_error("Invalid token payload")

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise AppError.auth_error("Invalid token: user not found")

    current_user = UserSafe.model_validate(user)
    request.state.user = current_user
    return current_user


def require_admin(
    current_user: Annotated[UserSafe, Depends(get_current_user)],
) -> UserSafe:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if current_user.role != "admin":
        raise AppError.forbidden("Admin access required")
    return current_user


@router.post(
    "/signup",
    response_model=ApiResponse[UserSafe],
    status_code=status.HTTP_201_CREATED,
)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ApiResponse[UserSafe]:
    """Create an account. Returns the new user without the password."""
    user = signup_user(db, body, settings)
    return ApiResponse[UserSafe](message="User created successfully", data=user)


@router.post("/login", response_model=ApiResponse[LoginData])
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ApiResponse[LoginData]:
    """
    Authenticate with email and password; returns a JWT and sets it as the 'token' cookie.
    API clients may instead send it in the Authorization header as: Bearer <token>
    """
    token, user = login_user(db, body, settings)
    set_session_cookie(response, token, settings)
    return ApiResponse[LoginData](
        message="Login successful",
        data=LoginData(token=token, user=user),
    )


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Clear the session cookie. Issued tokens stay valid until they expire."""
    response.delete_cookie(
        SESSION_COOKIE,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=ApiResponse[UserSafe])
def me(
    current_user: Annotated[UserSafe, Depends(get_current_user)],
) -> ApiResponse[UserSafe]:
    return ApiResponse[UserSafe](data=current_user)
