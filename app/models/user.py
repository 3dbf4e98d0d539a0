"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Boolean, Column, DateTime, String, Text, false, func
from sqlalchemy.orm import relationship

from app.models.base import Base, new_uuid


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    email is the login key; password holds a bcrypt digest, never plaintext.
    role: 'admin' or 'user'
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_uuid)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(Text, nullable=False)
    role = Column(String(32), nullable=False, default="user", server_default="user")
    is_verified = Column(Boolean, nullable=False, default=False, server_default=false())
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

    todos = relationship("Todo", back_populates="user", cascade="all, delete-orphan")
    tasks = relationship("Task", back_populates="user", cascade="all, delete-orphan")
