"""Use case for reading a chore's cancellation history."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from choremarket.application.use_cases.chores import get_chore
from choremarket.domain.entities import CancellationRequest
from choremarket.infrastructure.repositories import CancellationRequestRepository


def list_cancellation_requests(
    session: Session, *, chore_id: int, user_id: int
) -> Sequence[CancellationRequest]:
    """Return every request filed against the chore, newest first."""

    get_chore(session, chore_id=chore_id, user_id=user_id)
    return CancellationRequestRepository(session).list_for_chore(chore_id)


__all__ = ["list_cancellation_requests"]
