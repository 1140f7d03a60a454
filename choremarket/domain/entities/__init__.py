"""Domain entities exposed by the application."""

from .cancellation_request import (
    CancellationDecision,
    CancellationRequest,
    CancellationRequestStatus,
)
from .chore import Chore, ChoreStatus, PaymentStatus
from .notification import Notification, NotificationType
from .notification_delivery import (
    DELIVERY_STATUS_FAILED,
    DELIVERY_STATUS_SENT,
    NotificationDelivery,
)
from .notification_preference import (
    CHANNEL_PRIORITY,
    Channel,
    NotificationPreference,
    PreferredChannel,
)
from .user import ROLE_ADMIN, ROLE_CUSTOMER, ROLE_WORKER, User

__all__ = [
    "CancellationDecision",
    "CancellationRequest",
    "CancellationRequestStatus",
    "Chore",
    "ChoreStatus",
    "PaymentStatus",
    "Notification",
    "NotificationType",
    "NotificationDelivery",
    "DELIVERY_STATUS_SENT",
    "DELIVERY_STATUS_FAILED",
    "NotificationPreference",
    "CHANNEL_PRIORITY",
    "Channel",
    "PreferredChannel",
    "User",
    "ROLE_CUSTOMER",
    "ROLE_WORKER",
    "ROLE_ADMIN",
]
