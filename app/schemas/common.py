"""Response envelope shared by all endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Successful response: {success: true, message, data}."""

    success: bool = Field(default=True, description="Always true for successful responses")
    message: str = Field(default="Success", description="Human-readable outcome")
    data: T | None = None


class MessageResponse(BaseModel):
    """Successful response without a payload."""

    success: bool = True
    message: str
