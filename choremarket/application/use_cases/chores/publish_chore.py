"""Use case for publishing a draft chore."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.domain.entities import Chore
from choremarket.domain.lifecycle import ChoreAction

from .transitions import apply_transition
from .validators import ensure_owner


def publish_chore(session: Session, *, chore_id: int, customer_id: int) -> Chore:
    return apply_transition(
        session,
        chore_id=chore_id,
        action=ChoreAction.PUBLISH,
        authorize=lambda chore: ensure_owner(chore, customer_id, "publish this chore"),
    )
