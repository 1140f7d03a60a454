"""Tests for channel selection and skip rules."""

from __future__ import annotations

from datetime import datetime

import pytest

from choremarket.domain.entities import Notification, NotificationPreference, User
from choremarket.infrastructure.notifications import (
    REASON_MUTE_WINDOW,
    REASON_NO_CHANNEL,
    DeliveryResult,
    NotificationRouter,
    build_external_notification,
    select_channel,
)


class _StaticPreferences:
    def __init__(self, preference: NotificationPreference) -> None:
        self.preference = preference

    def resolve(self, user_id: int) -> NotificationPreference:
        return self.preference


class _RecordingDispatcher:
    def __init__(self) -> None:
        self.sent = []

    def send(self, notification):
        self.sent.append(notification)
        return DeliveryResult(ok=True, channel=notification.channel, status_code=200)


def _event():
    notification = Notification(
        id=5,
        user_id=1,
        type="CANCELLATION_REQUESTED",
        title="Cancellation requested",
        message="Ravi requested cancellation",
        chore_id=9,
        link="/chores/9",
    )
    user = User(id=1, name="Asha", email="asha@example.com", phone="+911", role="CUSTOMER")
    return build_external_notification(notification, user)


def _router(preference, hour=12):
    dispatcher = _RecordingDispatcher()
    router = NotificationRouter(
        _StaticPreferences(preference),
        dispatcher,
        clock=lambda: datetime(2024, 1, 1, hour, 0),
    )
    return router, dispatcher


@pytest.mark.parametrize(
    ("preference", "expected"),
    [
        (NotificationPreference(), "email"),
        (NotificationPreference(email=True, sms=True, preferred="sms"), "sms"),
        (NotificationPreference(email=False, sms=True, whatsapp=True, preferred="email"), "whatsapp"),
        (NotificationPreference(email=False, sms=True, whatsapp=False), "sms"),
        (NotificationPreference(email=False, sms=False, whatsapp=False), None),
    ],
)
def test_select_channel(preference, expected):
    assert select_channel(preference) == expected


def test_falls_back_to_whatsapp_when_preferred_channel_is_off():
    preference = NotificationPreference(email=False, sms=True, whatsapp=True, preferred="email")
    router, dispatcher = _router(preference)

    result = router.dispatch(_event())

    assert result.ok is True
    assert result.channel == "whatsapp"
    assert [sent.channel for sent in dispatcher.sent] == ["whatsapp"]


def test_mute_window_skips_without_dispatch():
    router, dispatcher = _router(NotificationPreference(mute_from=22, mute_to=6), hour=23)

    result = router.dispatch(_event())

    assert result.skipped is True
    assert result.reason == REASON_MUTE_WINDOW
    assert dispatcher.sent == []


def test_no_channel_skips_without_dispatch():
    router, dispatcher = _router(NotificationPreference(email=False))

    result = router.dispatch(_event())

    assert result.skipped is True
    assert result.reason == REASON_NO_CHANNEL
    assert dispatcher.sent == []


def test_payload_shape():
    payload = _event().to_payload()

    assert payload == {
        "userId": 1,
        "email": "asha@example.com",
        "phone": "+911",
        "channel": "any",
        "event": "CANCELLATION_REQUESTED",
        "title": "Cancellation requested",
        "message": "Ravi requested cancellation",
        "link": "/chores/9",
        "meta": {"choreId": 9, "applicationId": None, "paymentId": None},
    }
