from .chore import (
    AssignWorkerRequest,
    CancellationDecisionRequest,
    CancellationOutcomeRead,
    CancellationRequestCreate,
    CancellationRequestRead,
    ChoreCreate,
    ChoreRead,
)
from .notification import (
    MarkAllReadResponse,
    NotificationDeliveryRead,
    NotificationMarkReadRequest,
    NotificationPreferenceRead,
    NotificationPreferenceUpdate,
    NotificationRead,
    UnreadCountRead,
)

__all__ = [
    "AssignWorkerRequest",
    "CancellationDecisionRequest",
    "CancellationOutcomeRead",
    "CancellationRequestCreate",
    "CancellationRequestRead",
    "ChoreCreate",
    "ChoreRead",
    "MarkAllReadResponse",
    "NotificationDeliveryRead",
    "NotificationMarkReadRequest",
    "NotificationPreferenceRead",
    "NotificationPreferenceUpdate",
    "NotificationRead",
    "UnreadCountRead",
]
