"""Expired credential cleanup: delete OTP codes and OAuth tokens past expires_at."""

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from app.models import AuthToken, OtpCode

logger = logging.getLogger(__name__)


def purge_expired_credentials(
    session: Session, now: datetime | None = None
) -> tuple[int, int]:
    """
    Delete OTP codes and OAuth tokens whose expires_at is in the past.

    Returns (otp_codes_deleted, auth_tokens_deleted). Idempotent: safe to run repeatedly.
    """
    cutoff = now or datetime.now(timezone.utc)
    otp_deleted = (
        session.query(OtpCode)
        .filter(OtpCode.expires_at < cutoff)
        .delete(synchronize_session=False)
    )
    tokens_deleted = (
        session.query(AuthToken)
        .filter(AuthToken.expires_at < cutoff)
        .delete(synchronize_session=False)
    )
    session.commit()

    if otp_deleted or tokens_deleted:
        logger.info(
            "Cleanup run: cutoff=%s, otp_codes_deleted=%s, auth_tokens_deleted=%s",
            cutoff.isoformat(),
            otp_deleted,
            tokens_deleted,
        )
    return (otp_deleted, tokens_deleted)
