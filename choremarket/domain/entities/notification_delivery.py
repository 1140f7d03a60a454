"""Domain entity for one external delivery attempt."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

DELIVERY_STATUS_SENT = "sent"
DELIVERY_STATUS_FAILED = "failed"


@dataclass
class NotificationDelivery:
    id: int | None
    user_id: int
    provider: str
    status: str
    notification_id: int | None = None
    channel: str | None = None
    provider_response: str | None = None
    retry_count: int = 0
    created_at: datetime | None = None


__all__ = [
    "DELIVERY_STATUS_FAILED",
    "DELIVERY_STATUS_SENT",
    "NotificationDelivery",
]
