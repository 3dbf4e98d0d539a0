"""Pydantic request/response schemas."""

from app.schemas.auth import LoginData, LoginRequest, SignupRequest
from app.schemas.common import ApiResponse, MessageResponse
from app.schemas.health import HealthResponse, RootResponse
from app.schemas.task import TaskCreate, TaskRead, TaskStatus, TaskUpdate
from app.schemas.todo import TodoCreate, TodoRead, TodoUpdate
from app.schemas.user import UserSafe

__all__ = [
    "ApiResponse",
    "HealthResponse",
    "LoginData",
    "LoginRequest",
    "MessageResponse",
    "RootResponse",
    "SignupRequest",
    "TaskCreate",
    "TaskRead",
    "TaskStatus",
    "TaskUpdate",
    "TodoCreate",
    "TodoRead",
    "TodoUpdate",
    "UserSafe",
]
