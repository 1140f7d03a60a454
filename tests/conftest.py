"""Shared fixtures: a throwaway SQLite database per test and an inline publisher."""

from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from types import SimpleNamespace

import httpx
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from choremarket.domain.entities import ROLE_CUSTOMER, ROLE_WORKER, User
from choremarket.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from choremarket.infrastructure.notifications import (
    ExternalDispatcher,
    NotificationPublisher,
    NotificationRouter,
    PreferenceResolver,
    WebhookConfig,
    set_notification_publisher,
)
from choremarket.infrastructure.repositories import (
    NotificationDeliveryRepository,
    NotificationPreferenceRepository,
    UserRepository,
)


@pytest.fixture()
def engine(tmp_path):
    """File-backed database so that every thread gets its own connection."""

    engine = build_engine(f"sqlite:///{tmp_path / 'choremarket.db'}")
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def users(session):
    """Seed one customer and two workers."""

    repository = UserRepository(session)
    customer = repository.create(
        User(id=None, name="Asha", email="asha@example.com", phone="+911111111111", role=ROLE_CUSTOMER)
    )
    worker = repository.create(
        User(id=None, name="Ravi", email="ravi@example.com", phone="+912222222222", role=ROLE_WORKER)
    )
    other_worker = repository.create(
        User(id=None, name="Meena", email="meena@example.com", phone=None, role=ROLE_WORKER)
    )
    return SimpleNamespace(customer=customer, worker=worker, other_worker=other_worker)


@pytest.fixture()
def webhook_config() -> WebhookConfig:
    """Webhook used by background deliveries; disabled unless a test overrides it."""

    return WebhookConfig(url=None)


@pytest.fixture()
def webhook_transport() -> httpx.BaseTransport | None:
    return None


@pytest.fixture(autouse=True)
def publisher(session_factory, webhook_config, webhook_transport):
    """Install a single-threaded publisher bound to the test database."""

    def router_factory(session):
        client = httpx.Client(transport=webhook_transport) if webhook_transport else None
        return NotificationRouter(
            PreferenceResolver(NotificationPreferenceRepository(session)),
            ExternalDispatcher(
                webhook_config,
                NotificationDeliveryRepository(session),
                client=client,
                sleep=lambda _seconds: None,
            ),
        )

    publisher = NotificationPublisher(
        session_factory,
        router_factory=router_factory,
        executor=ThreadPoolExecutor(max_workers=1),
    )
    set_notification_publisher(publisher)
    try:
        yield publisher
    finally:
        set_notification_publisher(None)
        publisher.shutdown(wait=True)
