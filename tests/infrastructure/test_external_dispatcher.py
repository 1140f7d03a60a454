"""Tests for webhook delivery, retries and the delivery ledger."""

from __future__ import annotations

import json

import httpx
import pytest

from choremarket.domain.entities import DELIVERY_STATUS_FAILED, DELIVERY_STATUS_SENT
from choremarket.infrastructure.notifications import (
    REASON_MAX_ATTEMPTS,
    REASON_NOT_CONFIGURED,
    ExternalDispatcher,
    ExternalNotification,
    WebhookConfig,
)
from choremarket.infrastructure.repositories import NotificationDeliveryRepository

WEBHOOK_URL = "https://hooks.example.com/notify"


def _notification(user_id: int) -> ExternalNotification:
    return ExternalNotification(
        user_id=user_id,
        email="asha@example.com",
        event="CHORE_COMPLETED",
        title="Chore completed",
        message="Ravi marked the chore as completed",
        channel="email",
        meta={"choreId": 3},
    )


def _dispatcher(session, handler, *, sleeps=None, **config):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    recorder = sleeps if sleeps is not None else []
    return ExternalDispatcher(
        WebhookConfig(url=WEBHOOK_URL, **config),
        NotificationDeliveryRepository(session),
        client=client,
        sleep=recorder.append,
    )


def test_retries_until_success(session, users):
    statuses = iter([500, 502, 200])
    bodies = []
    sleeps: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(next(statuses), text="ok")

    dispatcher = _dispatcher(session, handler, sleeps=sleeps)
    result = dispatcher.send(_notification(users.customer.id))

    assert result.ok is True
    assert result.attempts == 3
    assert result.status_code == 200
    assert sleeps == [0.5, 1.0]
    assert bodies[0]["userId"] == users.customer.id
    assert bodies[0]["channel"] == "email"
    assert bodies[0]["meta"] == {"choreId": 3}

    ledger = sorted(
        NotificationDeliveryRepository(session).list_for_user(users.customer.id),
        key=lambda delivery: delivery.id,
    )
    assert [d.status for d in ledger] == [
        DELIVERY_STATUS_FAILED,
        DELIVERY_STATUS_FAILED,
        DELIVERY_STATUS_SENT,
    ]
    assert [d.retry_count for d in ledger] == [0, 1, 2]
    assert ledger[0].provider_response == "status:500 body:ok"
    assert ledger[2].provider == "webhook"


def test_gives_up_after_max_attempts(session, users):
    sleeps: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="busy")

    result = _dispatcher(session, handler, sleeps=sleeps).send(_notification(users.customer.id))

    assert result.ok is False
    assert result.reason == REASON_MAX_ATTEMPTS
    assert len(sleeps) == 2
    ledger = NotificationDeliveryRepository(session).list_for_user(users.customer.id)
    assert len(ledger) == 3
    assert all(d.status == DELIVERY_STATUS_FAILED for d in ledger)


def test_transport_errors_are_recorded_not_raised(session, users):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    result = _dispatcher(session, handler, max_attempts=2).send(_notification(users.customer.id))

    assert result.ok is False
    assert result.reason == REASON_MAX_ATTEMPTS
    ledger = NotificationDeliveryRepository(session).list_for_user(users.customer.id)
    assert [d.provider_response for d in ledger] == ["timed out", "timed out"]


def test_not_configured_writes_no_ledger_row(session, users):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    dispatcher = ExternalDispatcher(
        WebhookConfig(url=None),
        NotificationDeliveryRepository(session),
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )

    result = dispatcher.send(_notification(users.customer.id))

    assert result.ok is False
    assert result.reason == REASON_NOT_CONFIGURED
    assert calls == []
    assert NotificationDeliveryRepository(session).list_for_user(users.customer.id) == []


@pytest.mark.parametrize(("attempt", "expected"), [(1, 0.5), (2, 1.0), (3, 2.0)])
def test_backoff_doubles_per_attempt(attempt, expected):
    assert WebhookConfig(url=WEBHOOK_URL).backoff_for(attempt) == expected
