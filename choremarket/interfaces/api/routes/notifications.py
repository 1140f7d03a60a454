"""Endpoints for the in-app notification inbox."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from choremarket.application.use_cases.notifications import (
    get_notification_preferences as get_notification_preferences_uc,
    get_unread_count as get_unread_count_uc,
    list_deliveries as list_deliveries_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read as mark_all_notifications_read_uc,
    mark_notification_read as mark_notification_read_uc,
    update_notification_preferences as update_notification_preferences_uc,
)
from choremarket.domain.entities import Notification, NotificationPreference, User
from choremarket.infrastructure.database import get_db
from choremarket.interfaces.api.dependencies import get_current_user
from choremarket.interfaces.api.routes_helpers import http_error_for
from choremarket.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationDeliveryRead,
    NotificationMarkReadRequest,
    NotificationPreferenceRead,
    NotificationPreferenceUpdate,
    NotificationRead,
    UnreadCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    only_unread: bool = Query(default=False),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return the notifications of the calling user, newest first."""

    notifications = list_notifications_uc(
        db, user_id=current_user.id, only_unread=only_unread
    )
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UnreadCountRead:
    return UnreadCountRead(count=get_unread_count_uc(db, user_id=current_user.id))


@router.post("/mark-read", response_model=NotificationRead)
def mark_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationRead:
    try:
        notification = mark_notification_read_uc(
            db, notification_id=payload.id, user_id=current_user.id
        )
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _notification_to_schema(notification)


@router.post("/mark-all-read", response_model=MarkAllReadResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MarkAllReadResponse:
    """Mark every unread notification of the caller as read."""

    updated = mark_all_notifications_read_uc(db, user_id=current_user.id)
    return MarkAllReadResponse(updated=updated)


@router.get("/preferences", response_model=NotificationPreferenceRead)
def read_preferences(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationPreferenceRead:
    preference = get_notification_preferences_uc(db, user_id=current_user.id)
    return NotificationPreferenceRead.model_validate(preference)


@router.put(
    "/preferences",
    response_model=NotificationPreferenceRead,
    status_code=status.HTTP_200_OK,
)
def update_preferences(
    payload: NotificationPreferenceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationPreferenceRead:
    """Store channel settings and quiet hours for external delivery."""

    try:
        preference = update_notification_preferences_uc(
            db,
            preference=NotificationPreference(user_id=current_user.id, **payload.model_dump()),
        )
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return NotificationPreferenceRead.model_validate(preference)


@router.get("/deliveries", response_model=list[NotificationDeliveryRead])
def list_deliveries(
    limit: int = Query(default=50, ge=1, le=200),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationDeliveryRead]:
    """Return recent external delivery attempts for the caller."""

    deliveries = list_deliveries_uc(db, user_id=current_user.id, limit=limit)
    return [NotificationDeliveryRead.model_validate(delivery) for delivery in deliveries]
