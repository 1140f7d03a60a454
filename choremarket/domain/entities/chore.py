"""Domain entity representing a chore posted by a customer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class ChoreStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    ASSIGNED = "ASSIGNED"
    IN_PROGRESS = "IN_PROGRESS"
    CANCELLATION_REQUESTED = "CANCELLATION_REQUESTED"
    COMPLETED = "COMPLETED"
    CLOSED = "CLOSED"
    CANCELLED = "CANCELLED"


class PaymentStatus(str, Enum):
    UNPAID = "UNPAID"
    PENDING = "PENDING"
    FUNDED = "FUNDED"
    REFUNDED = "REFUNDED"


@dataclass
class Chore:
    """Task posted by a customer and carried out by one assigned worker."""

    id: int | None
    created_by_id: int
    title: str
    description: str | None
    budget: Decimal
    status: ChoreStatus
    payment_status: PaymentStatus
    assigned_worker_id: int | None = None
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_owned_by(self, user_id: int) -> bool:
        return self.created_by_id == user_id

    def is_assigned_to(self, user_id: int) -> bool:
        return self.assigned_worker_id is not None and self.assigned_worker_id == user_id


__all__ = ["Chore", "ChoreStatus", "PaymentStatus"]
