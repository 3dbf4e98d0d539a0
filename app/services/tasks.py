"""Task CRUD scoped to the owning user."""

from datetime import datetime, timezone

from sqlalchemy.orm import Session

from app.core.errors import AppError
from app.models import Task
from app.schemas.task import TaskCreate, TaskUpdate

# Columns that may not be cleared to NULL through a partial update.
NON_NULLABLE_FIELDS = frozenset({"title", "status"})


def _as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes (as some drivers return them) as UTC so they compare."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def _check_time_range(start_time: datetime | None, end_time: datetime | None) -> None:
    start, end = _as_utc(start_time), _as_utc(end_time)
    if start is not None and end is not None and end < start:
        raise AppError.validation_error(
            "end_time must not be before start_time",
            {"start_time": start.isoformat(), "end_time": end.isoformat()},
        )


def list_tasks(db: Session, user_id: str, status: str | None = None) -> list[Task]:
    """Return the user's tasks, newest first, optionally filtered by status."""
    query = db.query(Task).filter(Task.user_id == user_id)
    if status is not None:
        query = query.filter(Task.status == status)
    return query.order_by(Task.created_at.desc(), Task.id).all()


def get_task(db: Session, user_id: str, task_id: str) -> Task:
    task = (
        db.query(Task)
        .filter(Task.id == task_id, Task.user_id == user_id)
        .first()
    )
    if task is None:
        raise AppError.not_found("Task not found")
    return task


def create_task(db: Session, user_id: str, body: TaskCreate) -> Task:
    _check_time_range(body.start_time, body.end_time)
    task = Task(user_id=user_id, **body.model_dump())
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def update_task(db: Session, user_id: str, task_id: str, body: TaskUpdate) -> Task:
    """Apply a partial update; the merged start/end must still form a valid range."""
    changes = body.model_dump(exclude_unset=True)
    if not changes:
        raise AppError.bad_request("No fields to update")
    for field in NON_NULLABLE_FIELDS:
        if field in changes and changes[field] is None:
            raise AppError.validation_error(f"{field} must not be null")

    task = get_task(db, user_id, task_id)
    _check_time_range(
        changes.get("start_time", task.start_time),
        changes.get("end_time", task.end_time),
    )
    for field, value in changes.items():
        setattr(task, field, value)
    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, user_id: str, task_id: str) -> None:
    task = get_task(db, user_id, task_id)
    db.delete(task)
    db.commit()
