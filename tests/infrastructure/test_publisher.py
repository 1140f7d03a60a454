"""Tests for background scheduling of external deliveries."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from choremarket.domain.entities import Notification
from choremarket.domain.errors import DeliveryFailure
from choremarket.infrastructure.notifications import (
    REASON_MAX_ATTEMPTS,
    REASON_NOT_CONFIGURED,
    DeliveryResult,
    NotificationPublisher,
)
from choremarket.infrastructure.repositories import NotificationRepository


class _FixedRouter:
    def __init__(self, result: DeliveryResult) -> None:
        self.result = result
        self.events = []

    def dispatch(self, event):
        self.events.append(event)
        return self.result


def _stored_notification(session, user_id):
    return NotificationRepository(session).create(
        Notification(id=None, user_id=user_id, type="SYSTEM", title="Hi", message="Hello")
    )


def _publisher(session_factory, router):
    return NotificationPublisher(
        session_factory,
        router_factory=lambda _session: router,
        executor=ThreadPoolExecutor(max_workers=1),
    )


def test_deliver_passes_user_contact_details(session, session_factory, users):
    router = _FixedRouter(DeliveryResult(ok=True, channel="email"))
    publisher = _publisher(session_factory, router)
    notification = _stored_notification(session, users.customer.id)

    result = publisher.dispatch(notification).result(timeout=10)
    publisher.shutdown()

    assert result.ok is True
    event = router.events[0]
    assert event.notification_id == notification.id
    assert event.email == "asha@example.com"
    assert event.phone == "+911111111111"
    assert event.event == "SYSTEM"


@pytest.mark.parametrize(
    "result",
    [
        DeliveryResult(ok=False, skipped=True, reason="muteWindow"),
        DeliveryResult(ok=False, reason=REASON_NOT_CONFIGURED),
    ],
)
def test_skips_are_not_failures(session, session_factory, users, result):
    publisher = _publisher(session_factory, _FixedRouter(result))

    assert publisher.deliver(_stored_notification(session, users.worker.id)) == result
    publisher.shutdown()


def test_exhausted_retries_raise_delivery_failure(session, session_factory, users):
    publisher = _publisher(
        session_factory, _FixedRouter(DeliveryResult(ok=False, reason=REASON_MAX_ATTEMPTS))
    )
    notification = _stored_notification(session, users.worker.id)

    with pytest.raises(DeliveryFailure) as excinfo:
        publisher.deliver(notification)
    assert excinfo.value.notification_id == notification.id

    future = publisher.dispatch(notification)
    publisher.shutdown()
    assert isinstance(future.exception(), DeliveryFailure)


def test_dispatch_after_shutdown_returns_none(session, session_factory, users):
    publisher = _publisher(session_factory, _FixedRouter(DeliveryResult(ok=True)))
    publisher.shutdown()

    assert publisher.dispatch(_stored_notification(session, users.worker.id)) is None
