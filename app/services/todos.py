"""Todo CRUD scoped to the owning user."""

from sqlalchemy.orm import Session

from app.core.errors import AppError
from app.models import Todo
from app.schemas.todo import TodoCreate, TodoUpdate


def list_todos(db: Session, user_id: str, completed: bool | None = None) -> list[Todo]:
    """Return the user's todos, newest first, optionally filtered by completion."""
    query = db.query(Todo).filter(Todo.user_id == user_id)
    if completed is not None:
        query = query.filter(Todo.is_completed == completed)
    return query.order_by(Todo.created_at.desc(), Todo.id).all()


def get_todo(db: Session, user_id: str, todo_id: str) -> Todo:
    """Another user's todo is reported as missing."""
    todo = (
        db.query(Todo)
        .filter(Todo.id == todo_id, Todo.user_id == user_id)
        .first()
    )
    if todo is None:
        raise AppError.not_found("Todo not found")
    return todo


def create_todo(db: Session, user_id: str, body: TodoCreate) -> Todo:
    todo = Todo(user_id=user_id, title=body.title, description=body.description)
    db.add(todo)
    db.commit()
    db.refresh(todo)
    return todo


def update_todo(db: Session, user_id: str, todo_id: str, body: TodoUpdate) -> Todo:
    changes = body.model_dump(exclude_unset=True)
    if not changes:
        raise AppError.bad_request("No fields to update")
    if "title" in changes and changes["title"] is None:
        raise AppError.validation_error("title must not be null")
    if "is_completed" in changes and changes["is_completed"] is None:
        raise AppError.validation_error("is_completed must not be null")

    todo = get_todo(db, user_id, todo_id)
    for field, value in changes.items():
        setattr(todo, field, value)
    db.commit()
    db.refresh(todo)
    return todo


def delete_todo(db: Session, user_id: str, todo_id: str) -> None:
    todo = get_todo(db, user_id, todo_id)
    db.delete(todo)
    db.commit()
