"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, Integer, String

from choremarket.infrastructure.database import Base
from choremarket.utils import local_now_naive


class UserModel(Base):
    """Database representation of a marketplace account."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=True, index=True)
    phone = Column(String(20), nullable=True)
    role = Column(String(20), nullable=False, default="CUSTOMER")
    created_at = Column(DateTime(), nullable=False, default=local_now_naive)


__all__ = ["UserModel"]
