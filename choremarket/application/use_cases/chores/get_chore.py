"""Use case for reading a chore."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.domain.entities import Chore
from choremarket.domain.errors import ForbiddenError
from choremarket.infrastructure.repositories import ChoreRepository

from .validators import load_chore


def get_chore(session: Session, *, chore_id: int, user_id: int) -> Chore:
    """Return the chore when ``user_id`` is its owner or assigned worker."""

    chore = load_chore(ChoreRepository(session), chore_id)
    if not (chore.is_owned_by(user_id) or chore.is_assigned_to(user_id)):
        raise ForbiddenError("You do not have access to this chore")
    return chore
