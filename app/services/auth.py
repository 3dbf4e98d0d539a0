"""Signup and login against the users table.

Uniqueness of email and username is enforced by the database's unique
indexes; the lookups below only give a friendly message for the common case.
A signup that loses a race to a concurrent one hits IntegrityError on commit
and is reported with the same Conflict error.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AppError
from app.core.security import create_access_token, hash_password, verify_password
from app.models import User
from app.schemas.auth import LoginRequest, SignupRequest
from app.schemas.user import UserSafe

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

EMAIL_IN_USE = "Email already in use"
USERNAME_IN_USE = "Username already in use"


def _get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def _get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def _ensure_available(db: Session, email: str, username: str) -> None:
    """Raise Conflict if the email (checked first) or username is taken."""
    if _get_user_by_email(db, email) is not None:
        raise AppError.conflict(EMAIL_IN_USE)
    if _get_user_by_username(db, username) is not None:
        raise AppError.conflict(USERNAME_IN_USE)


def signup_user(
    db: Session, body: SignupRequest, settings: "Settings", role: str = "user"
) -> UserSafe:
    """Create a user with a hashed password; return it without the password.

    The public signup route always creates "user" accounts; only the CLI passes role.
    """
    email = str(body.email)
    _ensure_available(db, email, body.username)

    user = User(
        username=body.username,
        email=email,
        password=hash_password(body.password, rounds=settings.BCRYPT_ROUNDS),
        role=role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Signup lost a uniqueness race for email=%s", email)
        _ensure_available(db, email, body.username)
        # Constraint fired but neither row is visible (e.g. the winner rolled back).
        raise AppError.conflict(EMAIL_IN_USE) from e
    db.refresh(user)

    logger.info("User created: id=%s username=%s", user.id, user.username)
    return UserSafe.model_validate(user)


def authenticate_user(db: Session, body: LoginRequest) -> User:
    """Return the user for valid credentials; raise AuthError otherwise."""
    user = _get_user_by_email(db, str(body.email))
    if user is None:
        logger.warning("Login failed: unknown email")
        raise AppError.auth_error("Invalid email")
    if not verify_password(body.password, user.password):
        logger.warning("Login failed: wrong password for user id=%s", user.id)
        raise AppError.auth_error("Invalid password")
    return user


def login_user(db: Session, body: LoginRequest, settings: "Settings") -> tuple[str, UserSafe]:
    """Verify credentials and issue a session token. Returns (token, user)."""
    user = authenticate_user(db, body)
    token = create_access_token(user.id, settings)
    return token, UserSafe.model_validate(user)
