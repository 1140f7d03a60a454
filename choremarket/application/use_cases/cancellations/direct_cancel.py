"""Use case for the customer cancelling a chore nobody works on yet."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.application.use_cases.chores.validators import (
    ensure_owner,
    ensure_unchanged,
    load_chore,
)
from choremarket.domain.entities import (
    CancellationRequest,
    CancellationRequestStatus,
    Chore,
)
from choremarket.domain.lifecycle import ChoreAction, ensure_can_apply, next_status
from choremarket.infrastructure.repositories import (
    CancellationRequestRepository,
    ChoreRepository,
)
from choremarket.utils import local_now

from .outcome import CancellationOutcome


def direct_cancel(
    session: Session,
    *,
    chore_id: int,
    customer_id: int,
    reason: str | None = None,
) -> CancellationOutcome:
    """Cancel a DRAFT or PUBLISHED chore.

    An already APPROVED request is stored alongside the status change so the
    cancellation shows up in the chore's history. No worker is involved, so
    nobody is notified.
    """

    chores = ChoreRepository(session)
    requests = CancellationRequestRepository(session)

    chore = load_chore(chores, chore_id)
    ensure_owner(chore, customer_id, "cancel this chore")
    ensure_can_apply(chore.status, ChoreAction.CANCEL)

    def _cancel(current: Chore) -> CancellationRequest:
        now = local_now()
        request = requests.add(
            CancellationRequest(
                id=None,
                chore_id=chore_id,
                requested_by_id=customer_id,
                original_status=current.status,
                status=CancellationRequestStatus.APPROVED,
                reason=(reason or "").strip() or None,
                created_at=now,
                resolved_at=now,
            )
        )
        current.status = next_status(current.status, ChoreAction.CANCEL)
        return request

    updated, request = chores.atomic_update(
        chore_id, _cancel, check=lambda current: ensure_unchanged(chore, current)
    )
    return CancellationOutcome(chore=updated, request=request)


__all__ = ["direct_cancel"]
