"""Use case for a worker starting an assigned chore."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.application.use_cases.notifications import notify_chore_started
from choremarket.domain.entities import Chore
from choremarket.domain.lifecycle import ChoreAction

from .transitions import apply_transition
from .validators import ensure_assigned_worker


def start_chore(session: Session, *, chore_id: int, worker_id: int) -> Chore:
    chore = apply_transition(
        session,
        chore_id=chore_id,
        action=ChoreAction.START,
        authorize=lambda chore: ensure_assigned_worker(chore, worker_id, "start this chore"),
    )
    notify_chore_started(session, chore=chore)
    return chore
