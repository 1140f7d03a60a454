"""Repository implementations for infrastructure layer."""

from .cancellation_request_repository import CancellationRequestRepository
from .chore_repository import ChoreRepository
from .notification_delivery_repository import NotificationDeliveryRepository
from .notification_preference_repository import NotificationPreferenceRepository
from .notification_repository import NotificationRepository
from .user_repository import UserRepository

__all__ = [
    "CancellationRequestRepository",
    "ChoreRepository",
    "NotificationDeliveryRepository",
    "NotificationPreferenceRepository",
    "NotificationRepository",
    "UserRepository",
]
