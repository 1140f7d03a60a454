"""SQLAlchemy model for chore cancellation requests."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, text

from choremarket.infrastructure.database import Base
from choremarket.utils import local_now_naive


class CancellationRequestModel(Base):
    """Database representation of a cancellation attempt against a chore."""

    __tablename__ = "cancellation_request"

    id = Column(Integer, primary_key=True, index=True)
    chore_id = Column(
        Integer,
        ForeignKey("chore.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    requested_by_id = Column(Integer, ForeignKey("user.id"), nullable=False)
    original_status = Column(String(30), nullable=False)
    reason = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="PENDING")
    created_at = Column(DateTime(), nullable=False, default=local_now_naive)
    resolved_at = Column(DateTime(), nullable=True)

    # At most one PENDING request per chore, even under concurrent writers.
    __table_args__ = (
        Index(
            "uq_cancellation_request_pending",
            "chore_id",
            unique=True,
            sqlite_where=text("status = 'PENDING'"),
            postgresql_where=text("status = 'PENDING'"),
        ),
    )


__all__ = ["CancellationRequestModel"]
