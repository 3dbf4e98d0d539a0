"""
CLI entrypoint for the expired credential cleanup job. Run from cron, e.g.:

  python -m app.cleanup

Or hourly: 0 * * * * cd /path/to/taskboard && .venv/bin/python -m app.cleanup
"""

import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.logging import configure_logging
from app.services.cleanup import purge_expired_credentials

logger = logging.getLogger(__name__)


def main() -> int:
    """Delete expired OTP codes and OAuth tokens."""
    configure_logging(get_settings())
    db = SessionLocal()
    try:
        otp_deleted, tokens_deleted = purge_expired_credentials(db)
        logger.info(
            "Cleanup completed: otp_codes_deleted=%s auth_tokens_deleted=%s",
            otp_deleted,
            tokens_deleted,
        )
        return 0
    except Exception as e:
        logger.exception("Cleanup job failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
