"""Use cases behind the user's notification inbox and settings."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from choremarket.domain.entities import Notification, NotificationDelivery, NotificationPreference
from choremarket.infrastructure.notifications import PreferenceResolver
from choremarket.infrastructure.repositories import (
    NotificationDeliveryRepository,
    NotificationPreferenceRepository,
    NotificationRepository,
)


def list_notifications(
    session: Session, *, user_id: int, only_unread: bool = False
) -> Sequence[Notification]:
    """Return the user's notifications, newest first."""

    return NotificationRepository(session).list_for_user(user_id, only_unread=only_unread)


def mark_notification_read(
    session: Session, *, notification_id: int, user_id: int
) -> Notification:
    return NotificationRepository(session).mark_read(notification_id, user_id=user_id)


def mark_all_notifications_read(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).mark_all_read(user_id)


def get_unread_count(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).unread_count(user_id)


def get_notification_preferences(session: Session, *, user_id: int) -> NotificationPreference:
    """Return stored preferences or the defaults."""

    return PreferenceResolver(NotificationPreferenceRepository(session)).resolve(user_id)


def update_notification_preferences(
    session: Session, *, preference: NotificationPreference
) -> NotificationPreference:
    for bound in (preference.mute_from, preference.mute_to):
        if bound is not None and not 0 <= bound <= 23:
            raise ValueError("Quiet hours must be between 0 and 23")
    if preference.preferred not in ("any", "email", "sms", "whatsapp"):
        raise ValueError("Preferred channel must be email, sms, whatsapp or any")
    return NotificationPreferenceRepository(session).upsert(preference)


def list_deliveries(
    session: Session, *, user_id: int, limit: int | None = 50
) -> Sequence[NotificationDelivery]:
    return NotificationDeliveryRepository(session).list_for_user(user_id, limit=limit)


__all__ = [
    "get_notification_preferences",
    "get_unread_count",
    "list_deliveries",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "update_notification_preferences",
]
