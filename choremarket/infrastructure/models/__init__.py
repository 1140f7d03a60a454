"""ORM models used by the application infrastructure."""

from .user import UserModel
from .chore import ChoreModel
from .cancellation_request import CancellationRequestModel
from .notification import NotificationModel
from .notification_delivery import NotificationDeliveryModel
from .notification_preference import NotificationPreferenceModel

__all__ = [
    "UserModel",
    "ChoreModel",
    "CancellationRequestModel",
    "NotificationModel",
    "NotificationDeliveryModel",
    "NotificationPreferenceModel",
]
