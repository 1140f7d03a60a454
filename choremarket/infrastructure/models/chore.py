"""SQLAlchemy model for chores."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text

from choremarket.infrastructure.database import Base
from choremarket.utils import local_now_naive


class ChoreModel(Base):
    """Database representation of a chore.

    ``version`` is the mapper's version counter: every UPDATE is issued with
    ``WHERE version = <loaded value>`` and fails with ``StaleDataError`` when
    another transaction got there first.
    """

    __tablename__ = "chore"

    id = Column(Integer, primary_key=True, index=True)
    created_by_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    assigned_worker_id = Column(Integer, ForeignKey("user.id"), nullable=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    budget = Column(Numeric(12, 2), nullable=False, default=0)
    status = Column(String(30), nullable=False, default="PUBLISHED", index=True)
    payment_status = Column(String(20), nullable=False, default="UNPAID")
    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(), nullable=False, default=local_now_naive)
    updated_at = Column(DateTime(), nullable=True, onupdate=local_now_naive)

    __mapper_args__ = {"version_id_col": version}


__all__ = ["ChoreModel"]
