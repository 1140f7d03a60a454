"""Tests for the in-app notification store."""

from __future__ import annotations

import pytest

from choremarket.application.use_cases.notifications import (
    get_unread_count,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    notify_system,
)
from choremarket.domain.entities import Notification, NotificationType
from choremarket.domain.errors import NotificationNotFoundError
from choremarket.infrastructure.repositories import NotificationRepository


def _store(session, user_id, title):
    return NotificationRepository(session).create(
        Notification(
            id=None,
            user_id=user_id,
            type=NotificationType.SYSTEM.value,
            title=title,
            message=f"{title} message",
        )
    )


def test_list_is_newest_first_and_filters_unread(session, users):
    first = _store(session, users.customer.id, "first")
    second = _store(session, users.customer.id, "second")
    _store(session, users.worker.id, "not mine")

    notifications = list_notifications(session, user_id=users.customer.id)
    assert [n.id for n in notifications] == [second.id, first.id]

    mark_notification_read(session, notification_id=first.id, user_id=users.customer.id)

    unread = list_notifications(session, user_id=users.customer.id, only_unread=True)
    assert [n.id for n in unread] == [second.id]


def test_mark_read_sets_timestamp_and_is_owner_only(session, users):
    notification = _store(session, users.customer.id, "hello")

    with pytest.raises(NotificationNotFoundError):
        mark_notification_read(
            session, notification_id=notification.id, user_id=users.worker.id
        )
    with pytest.raises(NotificationNotFoundError):
        mark_notification_read(session, notification_id=12345, user_id=users.customer.id)

    updated = mark_notification_read(
        session, notification_id=notification.id, user_id=users.customer.id
    )
    assert updated.is_read is True
    assert updated.read_at is not None

    again = mark_notification_read(
        session, notification_id=notification.id, user_id=users.customer.id
    )
    assert again.read_at == updated.read_at


def test_mark_all_read_is_idempotent(session, users):
    _store(session, users.customer.id, "one")
    _store(session, users.customer.id, "two")
    _store(session, users.worker.id, "other")

    assert get_unread_count(session, user_id=users.customer.id) == 2
    assert mark_all_notifications_read(session, user_id=users.customer.id) == 2
    assert mark_all_notifications_read(session, user_id=users.customer.id) == 0
    assert get_unread_count(session, user_id=users.customer.id) == 0
    assert get_unread_count(session, user_id=users.worker.id) == 1


def test_notify_system_stores_generic_notification(session, users):
    notification = notify_system(
        session,
        user_id=users.worker.id,
        title="New message",
        message="Asha sent you a message",
        link="/chat/1",
    )

    assert notification is not None
    assert notification.id is not None
    assert notification.type == "SYSTEM"
    stored = NotificationRepository(session).get(notification.id)
    assert stored.link == "/chat/1"
    assert stored.is_read is False
