"""Public helpers for emitting domain notifications and reading the inbox."""

from .events import (
    chore_link,
    notify_cancellation_decided,
    notify_cancellation_requested,
    notify_chore_assigned,
    notify_chore_closed,
    notify_chore_completed,
    notify_chore_started,
    notify_system,
)
from .inbox import (
    get_notification_preferences,
    get_unread_count,
    list_deliveries,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    update_notification_preferences,
)

__all__ = [
    "chore_link",
    "notify_cancellation_requested",
    "notify_cancellation_decided",
    "notify_chore_assigned",
    "notify_chore_started",
    "notify_chore_completed",
    "notify_chore_closed",
    "notify_system",
    "list_notifications",
    "mark_notification_read",
    "mark_all_notifications_read",
    "get_unread_count",
    "get_notification_preferences",
    "update_notification_preferences",
    "list_deliveries",
]
