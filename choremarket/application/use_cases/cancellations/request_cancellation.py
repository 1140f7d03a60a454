"""Use case for a worker asking to cancel their chore."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.application.use_cases.chores.validators import (
    CONCURRENT_CHANGE_MESSAGE,
    ensure_assigned_worker,
    ensure_unchanged,
    load_chore,
)
from choremarket.application.use_cases.notifications import notify_cancellation_requested
from choremarket.domain.entities import (
    CancellationRequest,
    CancellationRequestStatus,
    Chore,
)
from choremarket.domain.errors import ConflictError
from choremarket.domain.lifecycle import ChoreAction, ensure_can_apply, next_status
from choremarket.infrastructure.repositories import (
    CancellationRequestRepository,
    ChoreRepository,
)
from choremarket.utils import local_now

from .outcome import CancellationOutcome

PENDING_REQUEST_MESSAGE = "A cancellation request is already pending for this chore"


def request_cancellation(
    session: Session,
    *,
    chore_id: int,
    worker_id: int,
    reason: str | None = None,
) -> CancellationOutcome:
    """Open a PENDING cancellation request and notify the customer.

    The pending-request check runs again inside the write scope, so of two
    concurrent calls exactly one succeeds and the other gets
    :class:`ConflictError`.
    """

    chores = ChoreRepository(session)
    requests = CancellationRequestRepository(session)

    chore = load_chore(chores, chore_id)
    ensure_assigned_worker(chore, worker_id, "request cancellation")
    if requests.find_pending(chore_id) is not None:
        raise ConflictError(PENDING_REQUEST_MESSAGE)
    ensure_can_apply(chore.status, ChoreAction.REQUEST_CANCELLATION)

    normalized_reason = (reason or "").strip() or None

    def _check(current: Chore) -> None:
        if requests.find_pending(chore_id) is not None:
            raise ConflictError(PENDING_REQUEST_MESSAGE)
        ensure_unchanged(chore, current)
        if not current.is_assigned_to(worker_id):
            raise ConflictError(CONCURRENT_CHANGE_MESSAGE)

    def _open_request(current: Chore) -> CancellationRequest:
        request = requests.add(
            CancellationRequest(
                id=None,
                chore_id=chore_id,
                requested_by_id=worker_id,
                original_status=current.status,
                status=CancellationRequestStatus.PENDING,
                reason=normalized_reason,
                created_at=local_now(),
            )
        )
        current.status = next_status(current.status, ChoreAction.REQUEST_CANCELLATION)
        return request

    updated, request = chores.atomic_update(chore_id, _open_request, check=_check)
    notify_cancellation_requested(session, chore=updated, request=request)
    return CancellationOutcome(chore=updated, request=request)


__all__ = ["PENDING_REQUEST_MESSAGE", "request_cancellation"]
