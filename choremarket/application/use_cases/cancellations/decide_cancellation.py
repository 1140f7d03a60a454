"""Use case for the customer answering a cancellation request."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.application.use_cases.chores.validators import (
    ensure_owner,
    ensure_unchanged,
    load_chore,
)
from choremarket.application.use_cases.notifications import notify_cancellation_decided
from choremarket.domain.entities import (
    CancellationDecision,
    CancellationRequest,
    CancellationRequestStatus,
    Chore,
)
from choremarket.domain.errors import ConflictError, InvalidStateError
from choremarket.domain.lifecycle import ChoreAction, ensure_can_apply, next_status
from choremarket.infrastructure.repositories import (
    CancellationRequestRepository,
    ChoreRepository,
)
from choremarket.utils import local_now

from .outcome import CancellationOutcome

_ACTIONS = {
    CancellationDecision.APPROVE: ChoreAction.APPROVE_CANCELLATION,
    CancellationDecision.REJECT: ChoreAction.REJECT_CANCELLATION,
}
_RESOLUTIONS = {
    CancellationDecision.APPROVE: CancellationRequestStatus.APPROVED,
    CancellationDecision.REJECT: CancellationRequestStatus.REJECTED,
}


def decide_cancellation(
    session: Session,
    *,
    chore_id: int,
    customer_id: int,
    decision: CancellationDecision | str,
) -> CancellationOutcome:
    """Approve or reject the pending cancellation request of a chore.

    Approving cancels the chore and releases the worker. Rejecting restores the
    status captured when the request was filed, provided the same worker is
    still assigned. The decision only applies to the request loaded here: if
    another request became current in the meantime the call fails with
    :class:`ConflictError`.
    """

    decision = CancellationDecision(str(getattr(decision, "value", decision)).upper())
    action = _ACTIONS[decision]

    chores = ChoreRepository(session)
    requests = CancellationRequestRepository(session)

    chore = load_chore(chores, chore_id)
    ensure_owner(chore, customer_id, "decide on a cancellation request")
    ensure_can_apply(chore.status, action)
    pending = requests.find_pending(chore_id)
    if pending is None:
        raise InvalidStateError("There is no pending cancellation request for this chore")
    if action is ChoreAction.REJECT_CANCELLATION:
        next_status(chore.status, action, restore_to=pending.original_status)

    def _check(current: Chore) -> None:
        ensure_unchanged(chore, current)
        latest = requests.find_pending(chore_id)
        if latest is None or latest.id != pending.id:
            raise ConflictError(
                "The cancellation request changed while you were deciding. Reload the chore."
            )
        if action is ChoreAction.REJECT_CANCELLATION and not current.is_assigned_to(
            pending.requested_by_id
        ):
            raise ConflictError(
                "The chore is no longer assigned to the worker who asked to cancel"
            )

    def _resolve(current: Chore) -> CancellationRequest:
        resolved = requests.resolve(pending.id, _RESOLUTIONS[decision], local_now())
        if action is ChoreAction.APPROVE_CANCELLATION:
            current.status = next_status(current.status, action)
            current.assigned_worker_id = None
        else:
            current.status = next_status(
                current.status, action, restore_to=pending.original_status
            )
        return resolved

    updated, resolved = chores.atomic_update(chore_id, _resolve, check=_check)
    notify_cancellation_decided(
        session, chore=updated, worker_id=pending.requested_by_id, decision=decision
    )
    return CancellationOutcome(chore=updated, request=resolved)


__all__ = ["decide_cancellation"]
