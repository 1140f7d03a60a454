"""Notification failures must not affect lifecycle transitions."""

from __future__ import annotations

import httpx
import pytest
from sqlalchemy.exc import OperationalError

from choremarket.application.use_cases.cancellations import request_cancellation
from choremarket.application.use_cases.chores import assign_worker, create_chore
from choremarket.application.use_cases.notifications import events
from choremarket.domain.entities import (
    DELIVERY_STATUS_FAILED,
    CancellationRequestStatus,
    ChoreStatus,
)
from choremarket.infrastructure.notifications import WebhookConfig
from choremarket.infrastructure.repositories import (
    CancellationRequestRepository,
    ChoreRepository,
    NotificationDeliveryRepository,
    NotificationRepository,
)


@pytest.fixture()
def webhook_config() -> WebhookConfig:
    return WebhookConfig(url="http://notifications.invalid/hook", provider="test-hook")


@pytest.fixture()
def webhook_transport() -> httpx.BaseTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)


def test_request_cancellation_succeeds_when_webhook_is_unreachable(session, users, publisher):
    chore = create_chore(
        session, customer_id=users.customer.id, title="Clean the garage", budget="900"
    )
    chore = assign_worker(
        session, chore_id=chore.id, customer_id=users.customer.id, worker_id=users.worker.id
    )

    outcome = request_cancellation(session, chore_id=chore.id, worker_id=users.worker.id)

    assert outcome.chore.status is ChoreStatus.CANCELLATION_REQUESTED
    assert outcome.request.status is CancellationRequestStatus.PENDING
    stored = ChoreRepository(session).get(chore.id)
    assert stored.status is ChoreStatus.CANCELLATION_REQUESTED
    assert CancellationRequestRepository(session).find_pending(chore.id) is not None
    assert NotificationRepository(session).unread_count(users.customer.id) == 1

    publisher.shutdown(wait=True)

    deliveries = NotificationDeliveryRepository(session).list_for_user(users.customer.id)
    assert len(deliveries) == 3
    assert {delivery.status for delivery in deliveries} == {DELIVERY_STATUS_FAILED}
    assert sorted(delivery.retry_count for delivery in deliveries) == [0, 1, 2]
    assert all(delivery.channel == "email" for delivery in deliveries)
    assert all(delivery.provider == "test-hook" for delivery in deliveries)
    assert all("connection refused" in delivery.provider_response for delivery in deliveries)

    notification = NotificationRepository(session).list_for_user(users.customer.id)[0]
    per_notification = NotificationDeliveryRepository(session).list_for_notification(
        notification.id
    )
    assert [delivery.retry_count for delivery in per_notification] == [0, 1, 2]


def test_delivery_failure_is_logged_not_raised(session, users, publisher, caplog):
    chore = create_chore(
        session, customer_id=users.customer.id, title="Clean the garage", budget="900"
    )

    with caplog.at_level("WARNING", logger="choremarket.infrastructure.notifications.publisher"):
        assign_worker(
            session, chore_id=chore.id, customer_id=users.customer.id, worker_id=users.worker.id
        )
        publisher.shutdown(wait=True)

    assert any("max attempts reached" in record.getMessage() for record in caplog.records)


class _UnavailableUserRepository:
    def __init__(self, session) -> None:
        self.session = session

    def get(self, user_id: int):
        raise OperationalError("SELECT user", {"id": user_id}, Exception("database is down"))


def test_name_lookup_failure_does_not_fail_committed_request(
    session, users, monkeypatch, caplog
):
    chore = create_chore(
        session, customer_id=users.customer.id, title="Clean the garage", budget="900"
    )
    chore = assign_worker(
        session, chore_id=chore.id, customer_id=users.customer.id, worker_id=users.worker.id
    )
    monkeypatch.setattr(events, "UserRepository", _UnavailableUserRepository)

    with caplog.at_level("ERROR", logger=events.__name__):
        outcome = request_cancellation(session, chore_id=chore.id, worker_id=users.worker.id)

    assert outcome.chore.status is ChoreStatus.CANCELLATION_REQUESTED
    assert outcome.request.status is CancellationRequestStatus.PENDING
    assert any("display name" in record.getMessage() for record in caplog.records)

    notification = NotificationRepository(session).list_for_user(users.customer.id)[0]
    assert notification.message == 'The worker requested cancellation for "Clean the garage"'
