"""Todo CRUD for the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.routes.auth import get_current_user
from app.core.database import get_db
from app.schemas.common import ApiResponse, MessageResponse
from app.schemas.todo import TodoCreate, TodoRead, TodoUpdate
from app.schemas.user import UserSafe
from app.services import todos as todo_service

router = APIRouter()


@router.get("", response_model=ApiResponse[list[TodoRead]])
def list_todos(
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[UserSafe, Depends(get_current_user)],
    completed: Annotated[bool | None, Query(description="Filter by completion")] = None,
) -> ApiResponse[list[TodoRead]]:
    """List the current user's todos, newest first."""
    todos = todo_service.list_todos(db, user.id, completed=completed)
    return ApiResponse[list[TodoRead]](
        message="Todos retrieved",
        data=[TodoRead.model_validate(t) for t in todos],
    )


@router.post("", response_model=ApiResponse[TodoRead], status_code=status.HTTP_201_CREATED)
def create_todo(
    body: TodoCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[UserSafe, Depends(get_current_user)],
) -> ApiResponse[TodoRead]:
    todo = todo_service.create_todo(db, user.id, body)
    return ApiResponse[TodoRead](message="Todo created", data=TodoRead.model_validate(todo))


@router.get("/{todo_id}", response_model=ApiResponse[TodoRead])
def get_todo(
    todo_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[UserSafe, Depends(get_current_user)],
) -> ApiResponse[TodoRead]:
    todo = todo_service.get_todo(db, user.id, todo_id)
    return ApiResponse[TodoRead](message="Todo retrieved", data=TodoRead.model_validate(todo))


@router.patch("/{todo_id}", response_model=ApiResponse[TodoRead])
def update_todo(
    todo_id: str,
    body: TodoUpdate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[UserSafe, Depends(get_current_user)],
) -> ApiResponse[TodoRead]:
    """Change only the fields present in the body."""
    todo = todo_service.update_todo(db, user.id, todo_id, body)
    return ApiResponse[TodoRead](message="Todo updated", data=TodoRead.model_validate(todo))


@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: str,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[UserSafe, Depends(get_current_user)],
) -> MessageResponse:
    todo_service.delete_todo(db, user.id, todo_id)
    return MessageResponse(message="Todo deleted")
