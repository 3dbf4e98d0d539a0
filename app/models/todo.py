"""ORM model for a user's todo items."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text, false, func
from sqlalchemy.orm import relationship

from app.models.base import Base, new_uuid


class Todo(Base):
    """Todo item owned by exactly one user."""

    __tablename__ = "todos"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    is_completed = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    user = relationship("User", back_populates="todos")
