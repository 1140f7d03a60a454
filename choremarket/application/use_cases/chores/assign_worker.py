"""Use case for assigning a worker to a published chore."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.application.use_cases.notifications import notify_chore_assigned
from choremarket.domain.entities import Chore
from choremarket.domain.errors import LifecycleError, UserNotFoundError
from choremarket.domain.lifecycle import ChoreAction
from choremarket.infrastructure.repositories import UserRepository

from .transitions import apply_transition
from .validators import ensure_owner


def assign_worker(
    session: Session,
    *,
    chore_id: int,
    customer_id: int,
    worker_id: int,
) -> Chore:
    """Move a PUBLISHED chore to ASSIGNED with ``worker_id`` and notify them."""

    worker = UserRepository(session).get(worker_id)
    if worker is None:
        raise UserNotFoundError(worker_id)
    if not worker.is_worker():
        raise LifecycleError("Only workers can be assigned to a chore")

    def _assign(current: Chore) -> None:
        current.assigned_worker_id = worker_id

    chore = apply_transition(
        session,
        chore_id=chore_id,
        action=ChoreAction.ASSIGN,
        authorize=lambda chore: ensure_owner(chore, customer_id, "assign a worker"),
        mutate=_assign,
    )
    notify_chore_assigned(session, chore=chore)
    return chore
