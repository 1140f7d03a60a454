"""Use case for the customer approving completed work."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.application.use_cases.notifications import notify_chore_closed
from choremarket.domain.entities import Chore
from choremarket.domain.lifecycle import ChoreAction

from .transitions import apply_transition
from .validators import ensure_owner


def close_chore(session: Session, *, chore_id: int, customer_id: int) -> Chore:
    chore = apply_transition(
        session,
        chore_id=chore_id,
        action=ChoreAction.CLOSE,
        authorize=lambda chore: ensure_owner(chore, customer_id, "approve this chore"),
    )
    notify_chore_closed(session, chore=chore)
    return chore
