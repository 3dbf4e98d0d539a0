"""Core app configuration, database and error taxonomy."""

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.errors import AppError, ErrorType

__all__ = ["AppError", "ErrorType", "get_settings", "settings", "get_db"]
