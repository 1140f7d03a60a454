"""Validation helpers shared by chore and cancellation use cases."""

from __future__ import annotations

from choremarket.domain.entities import Chore
from choremarket.domain.errors import ChoreNotFoundError, ConflictError, ForbiddenError
from choremarket.infrastructure.repositories import ChoreRepository

CONCURRENT_CHANGE_MESSAGE = "This chore was changed by someone else. Reload it and try again."


def load_chore(repository: ChoreRepository, chore_id: int) -> Chore:
    chore = repository.get(chore_id)
    if chore is None:
        raise ChoreNotFoundError(chore_id)
    return chore


def ensure_owner(chore: Chore, customer_id: int, action: str) -> None:
    """Raise :class:`ForbiddenError` unless ``customer_id`` posted the chore."""

    if not chore.is_owned_by(customer_id):
        raise ForbiddenError(f"Only the chore owner can {action}")


def ensure_assigned_worker(chore: Chore, worker_id: int, action: str) -> None:
    """Raise :class:`ForbiddenError` unless ``worker_id`` is assigned to the chore."""

    if not chore.is_assigned_to(worker_id):
        raise ForbiddenError(f"Only the assigned worker can {action}")


def ensure_unchanged(before: Chore, current: Chore) -> None:
    """Raise :class:`ConflictError` when the chore moved since ``before`` was read."""

    if (
        current.status != before.status
        or current.assigned_worker_id != before.assigned_worker_id
    ):
        raise ConflictError(CONCURRENT_CHANGE_MESSAGE)


__all__ = [
    "CONCURRENT_CHANGE_MESSAGE",
    "ensure_assigned_worker",
    "ensure_owner",
    "ensure_unchanged",
    "load_chore",
]
