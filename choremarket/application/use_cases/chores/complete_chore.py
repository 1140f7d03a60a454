"""Use case for a worker marking a chore as completed."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.application.use_cases.notifications import notify_chore_completed
from choremarket.domain.entities import Chore
from choremarket.domain.lifecycle import ChoreAction

from .transitions import apply_transition
from .validators import ensure_assigned_worker


def complete_chore(session: Session, *, chore_id: int, worker_id: int) -> Chore:
    """Complete an ASSIGNED or IN_PROGRESS chore; the customer is notified."""

    chore = apply_transition(
        session,
        chore_id=chore_id,
        action=ChoreAction.COMPLETE,
        authorize=lambda chore: ensure_assigned_worker(
            chore, worker_id, "complete this chore"
        ),
    )
    notify_chore_completed(session, chore=chore)
    return chore
