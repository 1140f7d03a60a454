"""Schemas for chore and cancellation endpoints."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from choremarket.domain.entities import (
    CancellationDecision,
    CancellationRequestStatus,
    ChoreStatus,
    PaymentStatus,
)


class ChoreCreate(BaseModel):
    """Payload required to post a chore."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    budget: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    publish: bool = True

    model_config = ConfigDict(extra="forbid")


class ChoreRead(BaseModel):
    id: int
    created_by_id: int
    assigned_worker_id: int | None
    title: str
    description: str | None
    budget: Decimal
    status: ChoreStatus
    payment_status: PaymentStatus
    version: int
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class AssignWorkerRequest(BaseModel):
    worker_id: int


class CancellationRequestCreate(BaseModel):
    """Optional explanation sent with a cancellation."""

    reason: str | None = Field(default=None, max_length=1000)


class CancellationDecisionRequest(BaseModel):
    decision: CancellationDecision


class CancellationRequestRead(BaseModel):
    id: int
    chore_id: int
    requested_by_id: int
    original_status: ChoreStatus
    status: CancellationRequestStatus
    reason: str | None
    created_at: datetime | None
    resolved_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class CancellationOutcomeRead(BaseModel):
    """Chore and request as they stand after a cancellation step."""

    chore: ChoreRead
    request: CancellationRequestRead

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "AssignWorkerRequest",
    "CancellationDecisionRequest",
    "CancellationOutcomeRead",
    "CancellationRequestCreate",
    "CancellationRequestRead",
    "ChoreCreate",
    "ChoreRead",
]
