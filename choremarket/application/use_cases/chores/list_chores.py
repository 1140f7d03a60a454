"""Use case for listing the chores a customer has posted."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from choremarket.domain.entities import Chore
from choremarket.infrastructure.repositories import ChoreRepository


def list_chores(session: Session, *, customer_id: int) -> Sequence[Chore]:
    """Return the customer's chores, newest first."""

    return ChoreRepository(session).list_for_customer(customer_id)
