"""External notification delivery helpers for the infrastructure layer."""

from .external import (
    REASON_MAX_ATTEMPTS,
    REASON_NOT_CONFIGURED,
    DeliveryResult,
    ExternalDispatcher,
    ExternalNotification,
    WebhookConfig,
)
from .preferences import DEFAULT_PREFERENCE, PreferenceResolver, is_in_mute_window
from .publisher import (
    NotificationPublisher,
    default_router_factory,
    dispatch_notification,
    get_notification_publisher,
    set_notification_publisher,
    shutdown_notification_publisher,
)
from .router import (
    REASON_MUTE_WINDOW,
    REASON_NO_CHANNEL,
    NotificationRouter,
    build_external_notification,
    select_channel,
)

__all__ = [
    "DEFAULT_PREFERENCE",
    "DeliveryResult",
    "ExternalDispatcher",
    "ExternalNotification",
    "NotificationPublisher",
    "NotificationRouter",
    "PreferenceResolver",
    "REASON_MAX_ATTEMPTS",
    "REASON_MUTE_WINDOW",
    "REASON_NOT_CONFIGURED",
    "REASON_NO_CHANNEL",
    "WebhookConfig",
    "build_external_notification",
    "default_router_factory",
    "dispatch_notification",
    "get_notification_publisher",
    "is_in_mute_window",
    "select_channel",
    "set_notification_publisher",
    "shutdown_notification_publisher",
]
