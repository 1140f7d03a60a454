"""Chore status state machine.

Every legal status change is listed in :data:`TRANSITIONS`; use cases ask
:func:`next_status` for the target status instead of comparing statuses
inline, so the table is the single authority on what a chore may do next.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from choremarket.domain.entities.chore import ChoreStatus
from choremarket.domain.errors import InvalidStateError


class ChoreAction(str, Enum):
    """Actions that move a chore between statuses."""

    PUBLISH = "PUBLISH"
    ASSIGN = "ASSIGN"
    START = "START"
    COMPLETE = "COMPLETE"
    CLOSE = "CLOSE"
    CANCEL = "CANCEL"
    REQUEST_CANCELLATION = "REQUEST_CANCELLATION"
    APPROVE_CANCELLATION = "APPROVE_CANCELLATION"
    REJECT_CANCELLATION = "REJECT_CANCELLATION"


# Placeholder target: the status captured when cancellation was requested.
RESTORE_ORIGINAL: Final = object()

TRANSITIONS: Final[dict[tuple[ChoreStatus, ChoreAction], object]] = {
    (ChoreStatus.DRAFT, ChoreAction.PUBLISH): ChoreStatus.PUBLISHED,
    (ChoreStatus.PUBLISHED, ChoreAction.ASSIGN): ChoreStatus.ASSIGNED,
    (ChoreStatus.ASSIGNED, ChoreAction.START): ChoreStatus.IN_PROGRESS,
    (ChoreStatus.ASSIGNED, ChoreAction.COMPLETE): ChoreStatus.COMPLETED,
    (ChoreStatus.IN_PROGRESS, ChoreAction.COMPLETE): ChoreStatus.COMPLETED,
    (ChoreStatus.COMPLETED, ChoreAction.CLOSE): ChoreStatus.CLOSED,
    (ChoreStatus.DRAFT, ChoreAction.CANCEL): ChoreStatus.CANCELLED,
    (ChoreStatus.PUBLISHED, ChoreAction.CANCEL): ChoreStatus.CANCELLED,
    (ChoreStatus.ASSIGNED, ChoreAction.REQUEST_CANCELLATION): ChoreStatus.CANCELLATION_REQUESTED,
    (ChoreStatus.IN_PROGRESS, ChoreAction.REQUEST_CANCELLATION): ChoreStatus.CANCELLATION_REQUESTED,
    (ChoreStatus.CANCELLATION_REQUESTED, ChoreAction.APPROVE_CANCELLATION): ChoreStatus.CANCELLED,
    (ChoreStatus.CANCELLATION_REQUESTED, ChoreAction.REJECT_CANCELLATION): RESTORE_ORIGINAL,
}

# Statuses a cancellation request can be filed from, and so restored to.
CANCELLABLE_BY_REQUEST: Final = frozenset({ChoreStatus.ASSIGNED, ChoreStatus.IN_PROGRESS})

WORKER_BOUND_STATUSES: Final = frozenset(
    {
        ChoreStatus.ASSIGNED,
        ChoreStatus.IN_PROGRESS,
        ChoreStatus.CANCELLATION_REQUESTED,
        ChoreStatus.COMPLETED,
        ChoreStatus.CLOSED,
    }
)

_ACTION_DESCRIPTIONS: Final[dict[ChoreAction, str]] = {
    ChoreAction.PUBLISH: "be published",
    ChoreAction.ASSIGN: "be assigned",
    ChoreAction.START: "be started",
    ChoreAction.COMPLETE: "be completed",
    ChoreAction.CLOSE: "be closed",
    ChoreAction.CANCEL: "be cancelled directly",
    ChoreAction.REQUEST_CANCELLATION: "have cancellation requested",
    ChoreAction.APPROVE_CANCELLATION: "have its cancellation approved",
    ChoreAction.REJECT_CANCELLATION: "have its cancellation rejected",
}


def allowed_sources(action: ChoreAction) -> tuple[ChoreStatus, ...]:
    """Return the statuses from which ``action`` is legal, in declaration order."""

    return tuple(source for source, candidate in TRANSITIONS if candidate is action)


def can_apply(current: ChoreStatus | str, action: ChoreAction) -> bool:
    return (ChoreStatus(current), action) in TRANSITIONS


def ensure_can_apply(current: ChoreStatus | str, action: ChoreAction) -> None:
    """Raise :class:`InvalidStateError` when ``action`` is illegal from ``current``."""

    status = ChoreStatus(current)
    if (status, action) not in TRANSITIONS:
        sources = " or ".join(source.value for source in allowed_sources(action))
        raise InvalidStateError(
            f"Chore must be {sources} to {_ACTION_DESCRIPTIONS[action]} "
            f"(current status: {status.value})"
        )


def next_status(
    current: ChoreStatus | str,
    action: ChoreAction,
    *,
    restore_to: ChoreStatus | str | None = None,
) -> ChoreStatus:
    """Return the status a chore moves to when ``action`` is applied.

    ``restore_to`` is required for :attr:`ChoreAction.REJECT_CANCELLATION` and
    must be one of the statuses a cancellation can be requested from.

    Raises :class:`InvalidStateError` when the transition is not in the table.
    """

    ensure_can_apply(current, action)
    target = TRANSITIONS[(ChoreStatus(current), action)]
    if target is RESTORE_ORIGINAL:
        if restore_to is None:
            raise InvalidStateError("Original status is required to reject a cancellation")
        restored = ChoreStatus(restore_to)
        if restored not in CANCELLABLE_BY_REQUEST:
            raise InvalidStateError(
                f"Cannot restore chore to {restored.value} after a rejected cancellation"
            )
        return restored
    return target  # type: ignore[return-value]


def ensure_assignment_invariant(status: ChoreStatus | str, worker_id: int | None) -> None:
    """Raise when the worker assignment does not match ``status``."""

    status = ChoreStatus(status)
    bound = status in WORKER_BOUND_STATUSES
    if bound and worker_id is None:
        raise InvalidStateError(f"A {status.value} chore must have an assigned worker")
    if not bound and worker_id is not None:
        raise InvalidStateError(f"A {status.value} chore cannot have an assigned worker")


__all__ = [
    "CANCELLABLE_BY_REQUEST",
    "ChoreAction",
    "TRANSITIONS",
    "WORKER_BOUND_STATUSES",
    "allowed_sources",
    "can_apply",
    "ensure_can_apply",
    "ensure_assignment_invariant",
    "next_status",
]
