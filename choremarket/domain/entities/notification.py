"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Known notification events; stored as plain strings so new ones can be added."""

    CANCELLATION_REQUESTED = "CANCELLATION_REQUESTED"
    CANCELLATION_DECIDED = "CANCELLATION_DECIDED"
    CHORE_ASSIGNED = "CHORE_ASSIGNED"
    CHORE_STARTED = "CHORE_STARTED"
    CHORE_COMPLETED = "CHORE_COMPLETED"
    CHORE_CLOSED = "CHORE_CLOSED"
    APPLICATION_REJECTED = "APPLICATION_REJECTED"
    PAYMENT_RECORDED = "PAYMENT_RECORDED"
    SYSTEM = "SYSTEM"


@dataclass
class Notification:
    """In-app message addressed to a single user."""

    id: int | None
    user_id: int
    type: str
    title: str
    message: str
    chore_id: int | None = None
    application_id: int | None = None
    payment_id: int | None = None
    link: str | None = None
    is_read: bool = False
    created_at: datetime | None = None
    read_at: datetime | None = None


__all__ = ["Notification", "NotificationType"]
