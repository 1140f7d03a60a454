"""SQLAlchemy model for user notification preferences."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.sql import expression

from choremarket.infrastructure.database import Base


class NotificationPreferenceModel(Base):
    __tablename__ = "notification_preference"

    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True)
    email = Column(Boolean, nullable=False, default=True, server_default=expression.true())
    sms = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    whatsapp = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    preferred = Column(String(20), nullable=False, default="any")
    mute_from = Column(Integer, nullable=True)
    mute_to = Column(Integer, nullable=True)


__all__ = ["NotificationPreferenceModel"]
