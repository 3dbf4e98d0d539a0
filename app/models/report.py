"""ORM model for generated reports stored in object storage."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func

from app.models.base import Base, new_uuid


class Report(Base):
    """
    Report file metadata with an optional AI summary.

    status: 'generating', 'completed' or 'failed'
    """

    __tablename__ = "reports"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(255), nullable=False)
    s3_url = Column(String(500), nullable=False)
    ai_summary = Column(Text, nullable=True)
    status = Column(String(50), nullable=False, default="generating", server_default="generating")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
