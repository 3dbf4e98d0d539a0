"""SQLAlchemy declarative Base and shared model configuration."""

import uuid

from sqlalchemy.orm import DeclarativeBase


def new_uuid() -> str:
    """Primary key default: opaque UUID4 text, stable across renames."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass
