"""Logging setup: console output always, daily rotating file when LOG_DIR is set."""

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
LOG_FILE_NAME = "results.log"
LOG_BACKUP_DAYS = 14


def resolve_log_level(settings: "Settings") -> int:
    """LOG_LEVEL wins; otherwise DEBUG in development and WARNING elsewhere."""
    if settings.LOG_LEVEL:
        return logging.getLevelName(settings.LOG_LEVEL)
    if settings.APP_ENV == "development":
        return logging.DEBUG
    return logging.WARNING


def configure_logging(settings: "Settings") -> None:
    """Configure the root logger once for the API process."""
    level = resolve_log_level(settings)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if settings.LOG_DIR:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            os.path.join(settings.LOG_DIR, LOG_FILE_NAME),
            when="midnight",
            backupCount=LOG_BACKUP_DAYS,
            encoding="utf-8",
            utc=True,
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
