"""Fire-and-forget scheduling of external notification delivery."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from functools import partial

from sqlalchemy.orm import Session, sessionmaker

from choremarket.config import get_settings
from choremarket.domain.entities import Notification
from choremarket.domain.errors import DeliveryFailure
from choremarket.infrastructure.repositories import (
    NotificationDeliveryRepository,
    NotificationPreferenceRepository,
    UserRepository,
)

from .external import REASON_NOT_CONFIGURED, DeliveryResult, ExternalDispatcher, WebhookConfig
from .preferences import PreferenceResolver
from .router import NotificationRouter, build_external_notification

logger = logging.getLogger(__name__)

RouterFactory = Callable[[Session], NotificationRouter]


def default_router_factory(session: Session) -> NotificationRouter:
    """Build a router wired to the configured webhook and ``session``."""

    return NotificationRouter(
        PreferenceResolver(NotificationPreferenceRepository(session)),
        ExternalDispatcher(
            WebhookConfig.from_settings(get_settings()),
            NotificationDeliveryRepository(session),
        ),
    )


class NotificationPublisher:
    """Hand notifications to a bounded worker pool for external delivery.

    :meth:`dispatch` returns as soon as the job is queued. Every job runs with
    its own session, and its outcome is inspected by :meth:`_supervise`, which
    logs failures instead of raising them into the code that created the
    notification.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        *,
        router_factory: RouterFactory = default_router_factory,
        executor: Executor | None = None,
        max_workers: int = 4,
    ) -> None:
        self._session_factory = session_factory
        self._router_factory = router_factory
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="notification-delivery"
        )

    def dispatch(self, notification: Notification) -> Future[DeliveryResult] | None:
        """Schedule external delivery of ``notification``."""

        try:
            future = self._executor.submit(self.deliver, notification)
        except RuntimeError:
            logger.exception(
                "Could not schedule external delivery for notification %s",
                notification.id,
            )
            return None
        future.add_done_callback(partial(self._supervise, notification))
        return future

    def deliver(self, notification: Notification) -> DeliveryResult:
        """Route and send ``notification`` synchronously.

        Raises :class:`DeliveryFailure` when the provider could not be reached
        after every retry.
        """

        session = self._session_factory()
        try:
            user = UserRepository(session).get(notification.user_id)
            router = self._router_factory(session)
            result = router.dispatch(build_external_notification(notification, user))
        finally:
            session.close()

        if result.ok or result.skipped or result.reason == REASON_NOT_CONFIGURED:
            return result
        raise DeliveryFailure(result.reason or "delivery failed", notification_id=notification.id)

    def shutdown(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    @staticmethod
    def _supervise(notification: Notification, future: Future[DeliveryResult]) -> None:
        if future.cancelled():
            logger.warning("External delivery for notification %s was cancelled", notification.id)
            return
        exc = future.exception()
        if exc is None:
            return
        if isinstance(exc, DeliveryFailure):
            logger.warning(
                "External delivery for notification %s to user %s failed: %s",
                notification.id,
                notification.user_id,
                exc.reason,
            )
            return
        logger.error(
            "Unexpected error delivering notification %s",
            notification.id,
            exc_info=(type(exc), exc, exc.__traceback__),
        )


_publisher: NotificationPublisher | None = None
_publisher_lock = threading.Lock()


def get_notification_publisher() -> NotificationPublisher:
    """Return the process-wide publisher, creating it on first use."""

    global _publisher
    with _publisher_lock:
        if _publisher is None:
            from choremarket.infrastructure.database import SessionLocal

            _publisher = NotificationPublisher(
                SessionLocal, max_workers=get_settings().notification_workers
            )
        return _publisher


def set_notification_publisher(publisher: NotificationPublisher | None) -> None:
    """Replace the process-wide publisher (``None`` resets to lazy creation)."""

    global _publisher
    with _publisher_lock:
        _publisher = publisher


def shutdown_notification_publisher(*, wait: bool = True) -> None:
    global _publisher
    with _publisher_lock:
        publisher, _publisher = _publisher, None
    if publisher is not None:
        publisher.shutdown(wait=wait)


def dispatch_notification(notification: Notification) -> None:
    """Public helper that delegates to the shared publisher instance."""

    get_notification_publisher().dispatch(notification)


__all__ = [
    "NotificationPublisher",
    "RouterFactory",
    "default_router_factory",
    "dispatch_notification",
    "get_notification_publisher",
    "set_notification_publisher",
    "shutdown_notification_publisher",
]
