"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from choremarket.infrastructure.database import Base
from choremarket.utils import local_now_naive


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    chore_id = Column(Integer, ForeignKey("chore.id"), nullable=True, index=True)
    application_id = Column(Integer, nullable=True)
    payment_id = Column(Integer, nullable=True)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    link = Column(String(255), nullable=True)
    is_read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    created_at = Column(DateTime(), nullable=False, default=local_now_naive)
    read_at = Column(DateTime(), nullable=True)


__all__ = ["NotificationModel"]
