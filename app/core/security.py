"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

if TYPE_CHECKING:
    from app.core.config import Settings

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128
# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72

# Claim holding the user id inside the session token.
USER_ID_CLAIM = "userId"


def password_too_long(plain_password: str) -> bool:
    """True if the UTF-8 encoding exceeds what bcrypt can hash without truncation."""
    return len(plain_password.encode("utf-8")) > BCRYPT_MAX_BYTES


def hash_password(plain_password: str, rounds: int = 12) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    if password_too_long(plain_password):
        raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
    pw_bytes = plain_password.encode("utf-8")
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never match."""
    # Nothing longer than the limit was ever hashed, so it cannot match.
    if password_too_long(plain_password):
        return False
    pw_bytes = plain_password.encode("utf-8")
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


def create_access_token(
    user_id: str,
    settings: "Settings",
    now: datetime | None = None,
) -> str:
    """Create a signed session token carrying userId, iat and exp."""
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(days=settings.JWT_EXPIRE_DAYS)
    payload: dict[str, Any] = {
        USER_ID_CLAIM: str(user_id),
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET_KEY.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: "Settings") -> dict[str, Any]:
    """
    Decode and validate a session token; return its claims.
    Raises jwt.PyJWTError on a bad signature, expired or malformed token.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET_KEY.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp"]},
    )
