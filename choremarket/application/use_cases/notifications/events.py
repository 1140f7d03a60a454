"""Utility helpers to generate and dispatch domain notifications.

Every helper here runs after the triggering transition has committed. The
in-app row is written first and then handed to the publisher for external
delivery; neither step may undo or fail the transition, so storage errors are
logged and swallowed at this boundary only.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from choremarket.domain.entities import (
    CancellationDecision,
    CancellationRequest,
    Chore,
    Notification,
    NotificationType,
)
from choremarket.infrastructure.notifications import dispatch_notification
from choremarket.infrastructure.repositories import NotificationRepository, UserRepository
from choremarket.utils import local_now

logger = logging.getLogger(__name__)


def chore_link(chore_id: int | None) -> str:
    return f"/chores/{chore_id}"


def _persist_notification(
    session: Session,
    *,
    user_id: int,
    type: NotificationType | str,
    title: str,
    message: str,
    chore_id: int | None = None,
    application_id: int | None = None,
    payment_id: int | None = None,
    link: str | None = None,
) -> Notification | None:
    notification = Notification(
        id=None,
        user_id=user_id,
        type=str(getattr(type, "value", type)),
        title=title,
        message=message,
        chore_id=chore_id,
        application_id=application_id,
        payment_id=payment_id,
        link=link,
        created_at=local_now(),
    )
    try:
        saved = NotificationRepository(session).create(notification)
    except SQLAlchemyError:
        session.rollback()
        logger.exception(
            "Could not store %s notification for user %s", notification.type, user_id
        )
        return None
    dispatch_notification(saved)
    return saved


def _display_name(session: Session, user_id: int | None, fallback: str) -> str:
    if not user_id:
        return fallback
    try:
        user = UserRepository(session).get(user_id)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Could not load display name for user %s", user_id)
        return fallback
    return user.name if user and user.name else fallback


def notify_cancellation_requested(
    session: Session, *, chore: Chore, request: CancellationRequest
) -> Notification | None:
    """Tell the customer that the assigned worker wants to cancel."""

    worker_name = _display_name(session, request.requested_by_id, "The worker")
    message = f'{worker_name} requested cancellation for "{chore.title}"'
    if request.reason:
        message = f"{message}: {request.reason}"
    return _persist_notification(
        session,
        user_id=chore.created_by_id,
        type=NotificationType.CANCELLATION_REQUESTED,
        title="Cancellation requested",
        message=message,
        chore_id=chore.id,
        link=chore_link(chore.id),
    )


def notify_cancellation_decided(
    session: Session,
    *,
    chore: Chore,
    worker_id: int,
    decision: CancellationDecision,
) -> Notification | None:
    """Tell the worker how the customer answered their cancellation request."""

    outcome = "APPROVED" if decision is CancellationDecision.APPROVE else "REJECTED"
    return _persist_notification(
        session,
        user_id=worker_id,
        type=NotificationType.CANCELLATION_DECIDED,
        title="Cancellation decision",
        message=f'"{chore.title}" cancellation was {outcome}',
        chore_id=chore.id,
        link=chore_link(chore.id),
    )


def notify_chore_assigned(session: Session, *, chore: Chore) -> Notification | None:
    if chore.assigned_worker_id is None:
        return None
    return _persist_notification(
        session,
        user_id=chore.assigned_worker_id,
        type=NotificationType.CHORE_ASSIGNED,
        title="You got the chore",
        message=f'You have been assigned to "{chore.title}"',
        chore_id=chore.id,
        link=chore_link(chore.id),
    )


def notify_chore_started(session: Session, *, chore: Chore) -> Notification | None:
    worker_name = _display_name(session, chore.assigned_worker_id, "The worker")
    return _persist_notification(
        session,
        user_id=chore.created_by_id,
        type=NotificationType.CHORE_STARTED,
        title="Chore started",
        message=f'{worker_name} started working on "{chore.title}"',
        chore_id=chore.id,
        link=chore_link(chore.id),
    )


def notify_chore_completed(session: Session, *, chore: Chore) -> Notification | None:
    worker_name = _display_name(session, chore.assigned_worker_id, "The worker")
    return _persist_notification(
        session,
        user_id=chore.created_by_id,
        type=NotificationType.CHORE_COMPLETED,
        title="Chore completed",
        message=f'{worker_name} marked "{chore.title}" as completed. Review and approve it.',
        chore_id=chore.id,
        link=chore_link(chore.id),
    )


def notify_chore_closed(session: Session, *, chore: Chore) -> Notification | None:
    if chore.assigned_worker_id is None:
        return None
    return _persist_notification(
        session,
        user_id=chore.assigned_worker_id,
        type=NotificationType.CHORE_CLOSED,
        title="Work approved",
        message=f'The customer approved your work on "{chore.title}"',
        chore_id=chore.id,
        link=chore_link(chore.id),
    )


def notify_system(
    session: Session,
    *,
    user_id: int,
    title: str,
    message: str,
    chore_id: int | None = None,
    link: str | None = None,
) -> Notification | None:
    """Generic notification for adjacent flows such as chat."""

    return _persist_notification(
        session,
        user_id=user_id,
        type=NotificationType.SYSTEM,
        title=title,
        message=message,
        chore_id=chore_id,
        link=link,
    )


__all__ = [
    "chore_link",
    "notify_cancellation_decided",
    "notify_cancellation_requested",
    "notify_chore_assigned",
    "notify_chore_closed",
    "notify_chore_completed",
    "notify_chore_started",
    "notify_system",
]
