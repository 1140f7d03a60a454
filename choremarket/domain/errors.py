"""Errors raised by lifecycle operations and the notification store."""

from __future__ import annotations


class LifecycleError(ValueError):
    """Base class for failures reported synchronously to the caller."""


class NotFoundError(LifecycleError):
    """The requested entity does not exist."""


class ChoreNotFoundError(NotFoundError):
    def __init__(self, chore_id: int) -> None:
        super().__init__("Chore not found")
        self.chore_id = chore_id


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: int) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class NotificationNotFoundError(NotFoundError):
    """The notification does not exist or belongs to another user."""

    def __init__(self, notification_id: int) -> None:
        super().__init__("Notification not found or unauthorized")
        self.notification_id = notification_id


class ForbiddenError(LifecycleError):
    """The caller is not allowed to perform the requested transition."""


class InvalidStateError(LifecycleError):
    """The entity is not in a state that permits the requested transition."""


class ConflictError(LifecycleError):
    """A concurrent operation changed the precondition before the write."""


class DeliveryFailure(RuntimeError):
    """External delivery gave up; contained within the notification pipeline."""

    def __init__(self, reason: str, *, notification_id: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.notification_id = notification_id


__all__ = [
    "ChoreNotFoundError",
    "ConflictError",
    "DeliveryFailure",
    "ForbiddenError",
    "InvalidStateError",
    "LifecycleError",
    "NotFoundError",
    "NotificationNotFoundError",
    "UserNotFoundError",
]
