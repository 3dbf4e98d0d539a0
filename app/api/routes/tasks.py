"""Task CRUD for the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.routes.auth import get_current_user
from app.core.database import get_db
from app.schemas.common import ApiResponse, MessageResponse
from app.schemas.task import TaskCreate, TaskRead, TaskStatus, TaskUpdate
from app.schemas.user import UserSafe
from app.services import tasks as task_service

router = APIRouter()


@router.get("", response_model=ApiResponse[list[TaskRead]])
def list_tasks(
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[UserSafe, Depends(get_current_user)],
    status_filter: Annotated[
        TaskStatus | None, Query(alias="status", description="Filter by status")
    ] = None,
) -> ApiResponse[list[TaskRead]]:
    """List the current user's tasks, newest first."""
    tasks = task_service.list_tasks(db, user.id, status=status_filter)
    return ApiResponse[list[TaskRead]](
        message="Tasks retrieved",
        data=[TaskRead.model_validate(t) for t in tasks],
    )


@router.post("", response_model=ApiResponse[TaskRead], status_code=status.HTTP_201_CREATED)
def create_task(
    body: TaskCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[UserSafe, Depends(get_current_user)],
) -> ApiResponse[TaskRead]:
    """
    Create a task. start_time and end_time are optional; when both are given
    end_time must not be before start_time.
    """
    task = task_service.create_task(db, user.id, body)
    return ApiResponse[TaskRead](message="Task created", data=TaskRead.model_validate(task))


@router.get("/{task_id}", response_model=ApiResponse[TaskRead])
def get_task(
    task_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[UserSafe, Depends(get_current_user)],
) -> ApiResponse[TaskRead]:
    task = task_service.get_task(db, user.id, task_id)
    return ApiResponse[TaskRead](message="Task retrieved", data=TaskRead.model_validate(task))


@router.patch("/{task_id}", response_model=ApiResponse[TaskRead])
def update_task(
    task_id: str,
    body: TaskUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[UserSafe, Depends(get_current_user)],
) -> ApiResponse[TaskRead]:
    task = task_service.update_task(db, user.id, task_id, body)
    return ApiResponse[TaskRead](message="Task updated", data=TaskRead.model_validate(task))


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[UserSafe, Depends(get_current_user)],
) -> MessageResponse:
    task_service.delete_task(db, user.id, task_id)
    return MessageResponse(message="Task deleted")
