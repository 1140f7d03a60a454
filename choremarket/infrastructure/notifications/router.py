"""Channel selection for external notification delivery."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime
from typing import Final

from choremarket.domain.entities import (
    CHANNEL_PRIORITY,
    Channel,
    Notification,
    NotificationPreference,
    User,
)
from choremarket.utils import local_now

from .external import DeliveryResult, ExternalDispatcher, ExternalNotification
from .preferences import PreferenceResolver, is_in_mute_window

logger = logging.getLogger(__name__)

REASON_MUTE_WINDOW: Final = "muteWindow"
REASON_NO_CHANNEL: Final = "no channel allowed"


def select_channel(preference: NotificationPreference) -> Channel | None:
    """Pick the single channel to use, or ``None`` when every channel is off.

    An enabled preferred channel wins; otherwise the first enabled channel in
    :data:`CHANNEL_PRIORITY` order is used.
    """

    allowed = preference.allowed_channels()
    preferred = preference.preferred or "any"
    if preferred != "any" and allowed.get(preferred):  # type: ignore[call-overload]
        return preferred  # type: ignore[return-value]
    for channel in CHANNEL_PRIORITY:
        if allowed[channel]:
            return channel
    return None


def build_external_notification(
    notification: Notification, user: User | None
) -> ExternalNotification:
    """Translate a stored notification into the provider event for its owner."""

    return ExternalNotification(
        notification_id=notification.id,
        user_id=notification.user_id,
        email=user.email if user else None,
        phone=user.phone if user else None,
        event=notification.type,
        title=notification.title,
        message=notification.message,
        link=notification.link,
        meta={
            "choreId": notification.chore_id,
            "applicationId": notification.application_id,
            "paymentId": notification.payment_id,
        },
    )


class NotificationRouter:
    """Decide whether and where to deliver, then hand off to the dispatcher once."""

    def __init__(
        self,
        preferences: PreferenceResolver,
        dispatcher: ExternalDispatcher,
        *,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._preferences = preferences
        self._dispatcher = dispatcher
        self._clock = clock

    def dispatch(self, notification: ExternalNotification) -> DeliveryResult:
        preference = self._preferences.resolve(notification.user_id)
        if is_in_mute_window(preference, self._clock().hour):
            logger.info(
                "Skipping external delivery for user %s: inside quiet hours",
                notification.user_id,
            )
            return DeliveryResult(ok=False, skipped=True, reason=REASON_MUTE_WINDOW)

        channel = select_channel(preference)
        if channel is None:
            logger.info(
                "Skipping external delivery for user %s: no channel enabled",
                notification.user_id,
            )
            return DeliveryResult(ok=False, skipped=True, reason=REASON_NO_CHANNEL)

        return self._dispatcher.send(replace(notification, channel=channel))


__all__ = [
    "NotificationRouter",
    "REASON_MUTE_WINDOW",
    "REASON_NO_CHANNEL",
    "build_external_notification",
    "select_channel",
]
