"""ORM model for OAuth provider tokens linked to a user."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func

from app.models.base import Base, new_uuid


class AuthToken(Base):
    """OAuth access/refresh token pair issued by an external provider (google, github, ...)."""

    __tablename__ = "auth_tokens"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    access_token = Column(Text, nullable=False)
    refresh_token = Column(Text, nullable=False)
    provider = Column(String(50), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
