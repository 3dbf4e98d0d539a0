"""Request/response schemas for task endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TaskStatus = Literal["pending", "in_progress", "completed", "cancelled"]


class TaskCreate(BaseModel):
    """New task. The start/end order is checked by the service once both are normalised to UTC."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=255, description="Task title")
    description: str | None = None
    status: TaskStatus = Field(default="pending", description="Task status")
    start_time: datetime | None = Field(default=None, description="Scheduled start")
    end_time: datetime | None = Field(default=None, description="Scheduled end")
    calendar_event_id: str | None = Field(
        default=None, max_length=255, description="Linked calendar event id"
    )


class TaskUpdate(BaseModel):
    """Partial update; the time range is re-checked against stored values by the service."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    calendar_event_id: str | None = Field(default=None, max_length=255)


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    description: str | None
    status: str
    start_time: datetime | None
    end_time: datetime | None
    calendar_event_id: str | None
    created_at: datetime
    updated_at: datetime
