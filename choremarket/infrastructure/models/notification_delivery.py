"""SQLAlchemy model for the external delivery ledger."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from choremarket.infrastructure.database import Base
from choremarket.utils import local_now_naive


class NotificationDeliveryModel(Base):
    """One row per delivery attempt; rows are never updated."""

    __tablename__ = "notification_delivery"

    id = Column(Integer, primary_key=True, index=True)
    notification_id = Column(
        Integer,
        ForeignKey("notification.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    provider = Column(String(50), nullable=False)
    channel = Column(String(20), nullable=True)
    status = Column(String(20), nullable=False)
    provider_response = Column(Text, nullable=True)
    retry_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(), nullable=False, default=local_now_naive)


__all__ = ["NotificationDeliveryModel"]
