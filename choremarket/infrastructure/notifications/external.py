"""Webhook delivery of notifications to the external messaging provider."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Final

import httpx
from sqlalchemy.exc import SQLAlchemyError

from choremarket.config import Settings
from choremarket.domain.entities import (
    DELIVERY_STATUS_FAILED,
    DELIVERY_STATUS_SENT,
    NotificationDelivery,
)
from choremarket.infrastructure.repositories import NotificationDeliveryRepository

logger = logging.getLogger(__name__)

REASON_NOT_CONFIGURED: Final = "not configured"
REASON_MAX_ATTEMPTS: Final = "max attempts reached"


@dataclass(frozen=True)
class WebhookConfig:
    """Provider endpoint and retry policy used by :class:`ExternalDispatcher`."""

    url: str | None
    provider: str = "webhook"
    max_attempts: int = 3
    backoff_base: float = 0.25
    timeout: float = 10.0

    @property
    def is_configured(self) -> bool:
        return bool(self.url)

    def backoff_for(self, attempt: int) -> float:
        """Seconds to wait after the failed ``attempt`` (counted from 1)."""

        return self.backoff_base * (2**attempt)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WebhookConfig":
        return cls(
            url=settings.notification_webhook_url,
            provider=settings.notification_provider,
            max_attempts=settings.notification_max_attempts,
            backoff_base=settings.notification_backoff_ms / 1000,
            timeout=settings.notification_timeout_seconds,
        )


@dataclass(frozen=True)
class ExternalNotification:
    """Everything the provider needs to deliver one message to one user."""

    user_id: int
    event: str
    title: str
    message: str
    notification_id: int | None = None
    email: str | None = None
    phone: str | None = None
    channel: str = "any"
    link: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body posted to the provider."""

        return {
            "userId": self.user_id,
            "email": self.email or None,
            "phone": self.phone or None,
            "channel": self.channel or "any",
            "event": self.event,
            "title": self.title,
            "message": self.message,
            "link": self.link or None,
            "meta": dict(self.meta or {}),
        }


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of a routing decision and, when attempted, the delivery itself."""

    ok: bool
    skipped: bool = False
    reason: str | None = None
    channel: str | None = None
    status_code: int | None = None
    text: str | None = None
    attempts: int = 0


class ExternalDispatcher:
    """POST notifications to the provider webhook with bounded retries.

    Each attempt is written to the delivery ledger as soon as it finishes.
    Transport errors count as failed attempts and never escape :meth:`send`.
    """

    def __init__(
        self,
        config: WebhookConfig,
        ledger: NotificationDeliveryRepository,
        *,
        client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._config = config
        self._ledger = ledger
        self._client = client
        self._sleep = sleep

    @property
    def config(self) -> WebhookConfig:
        return self._config

    def send(self, notification: ExternalNotification) -> DeliveryResult:
        if not self._config.is_configured:
            logger.debug(
                "Notification webhook not configured; skipping delivery to user %s",
                notification.user_id,
            )
            return DeliveryResult(ok=False, reason=REASON_NOT_CONFIGURED)

        body = notification.to_payload()
        owns_client = self._client is None
        client = self._client or httpx.Client(timeout=self._config.timeout)
        try:
            for attempt in range(1, self._config.max_attempts + 1):
                try:
                    response = client.post(self._config.url, json=body)
                except httpx.HTTPError as exc:
                    logger.warning(
                        "Delivery attempt %s for user %s failed: %s",
                        attempt,
                        notification.user_id,
                        exc,
                    )
                    self._record(notification, DELIVERY_STATUS_FAILED, str(exc) or repr(exc), attempt)
                else:
                    text = response.text
                    status = (
                        DELIVERY_STATUS_SENT if response.is_success else DELIVERY_STATUS_FAILED
                    )
                    self._record(
                        notification,
                        status,
                        f"status:{response.status_code} body:{text}",
                        attempt,
                    )
                    if response.is_success:
                        return DeliveryResult(
                            ok=True,
                            channel=notification.channel,
                            status_code=response.status_code,
                            text=text,
                            attempts=attempt,
                        )
                    logger.warning(
                        "Provider rejected delivery attempt %s for user %s with status %s",
                        attempt,
                        notification.user_id,
                        response.status_code,
                    )

                if attempt < self._config.max_attempts:
                    self._sleep(self._config.backoff_for(attempt))
        finally:
            if owns_client:
                client.close()

        return DeliveryResult(
            ok=False,
            reason=REASON_MAX_ATTEMPTS,
            channel=notification.channel,
            attempts=self._config.max_attempts,
        )

    def _record(
        self,
        notification: ExternalNotification,
        status: str,
        response: str,
        attempt: int,
    ) -> None:
        try:
            self._ledger.record(
                NotificationDelivery(
                    id=None,
                    notification_id=notification.notification_id,
                    user_id=notification.user_id,
                    provider=self._config.provider,
                    channel=notification.channel,
                    status=status,
                    provider_response=response,
                    retry_count=attempt - 1,
                )
            )
        except SQLAlchemyError:
            self._ledger.session.rollback()
            logger.exception(
                "Failed to write delivery ledger row for notification %s",
                notification.notification_id,
            )


__all__ = [
    "DeliveryResult",
    "ExternalDispatcher",
    "ExternalNotification",
    "REASON_MAX_ATTEMPTS",
    "REASON_NOT_CONFIGURED",
    "WebhookConfig",
]
