"""Domain entity recording one attempt to cancel a chore."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .chore import ChoreStatus


class CancellationRequestStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class CancellationDecision(str, Enum):
    APPROVE = "APPROVE"
    REJECT = "REJECT"


@dataclass
class CancellationRequest:
    """Cancellation attempt; ``original_status`` is restored on rejection."""

    id: int | None
    chore_id: int
    requested_by_id: int
    original_status: ChoreStatus
    status: CancellationRequestStatus
    reason: str | None = None
    created_at: datetime | None = None
    resolved_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        return self.status is CancellationRequestStatus.PENDING


__all__ = [
    "CancellationDecision",
    "CancellationRequest",
    "CancellationRequestStatus",
]
