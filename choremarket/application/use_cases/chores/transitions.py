"""Shared driver for single-step chore transitions."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.orm import Session

from choremarket.domain.entities import Chore
from choremarket.domain.lifecycle import ChoreAction, ensure_can_apply, next_status
from choremarket.infrastructure.repositories import ChoreRepository

from .validators import ensure_unchanged, load_chore


def apply_transition(
    session: Session,
    *,
    chore_id: int,
    action: ChoreAction,
    authorize: Callable[[Chore], None],
    mutate: Callable[[Chore], None] | None = None,
) -> Chore:
    """Authorize, validate and persist ``action`` on a chore.

    Authorization and the transition table are consulted on the committed
    state first so callers get the precise error. The write then happens inside
    :meth:`ChoreRepository.atomic_update`, where any drift from that first read
    is reported as a conflict.
    """

    repository = ChoreRepository(session)
    chore = load_chore(repository, chore_id)
    authorize(chore)
    ensure_can_apply(chore.status, action)

    def _apply(current: Chore) -> None:
        current.status = next_status(current.status, action)
        if mutate is not None:
            mutate(current)

    updated, _ = repository.atomic_update(
        chore_id, _apply, check=lambda current: ensure_unchanged(chore, current)
    )
    return updated


__all__ = ["apply_transition"]
