"""SQLAlchemy ORM models."""

from app.models.auth_token import AuthToken
from app.models.base import Base
from app.models.otp_code import OtpCode
from app.models.report import Report
from app.models.task import Task
from app.models.todo import Todo
from app.models.user import User

__all__ = ["AuthToken", "Base", "OtpCode", "Report", "Task", "Todo", "User"]
