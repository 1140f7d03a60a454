"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from choremarket.domain.entities import Notification
from choremarket.domain.errors import NotificationNotFoundError
from choremarket.infrastructure.models import NotificationModel
from choremarket.utils import from_storage, local_now, to_storage


class NotificationRepository:
    """Store of in-app notifications, one row per triggering event."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self,
        user_id: int,
        *,
        only_unread: bool = False,
        limit: int | None = None,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.user_id == user_id)
        if only_unread:
            query = query.filter(NotificationModel.is_read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            user_id=notification.user_id,
            type=str(getattr(notification.type, "value", notification.type)),
            chore_id=notification.chore_id,
            application_id=notification.application_id,
            payment_id=notification.payment_id,
            title=notification.title,
            message=notification.message,
            link=notification.link,
            is_read=notification.is_read,
            created_at=to_storage(
                notification.created_at or local_now()
            ),
            read_at=to_storage(notification.read_at),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_read(self, notification_id: int, *, user_id: int) -> Notification:
        """Mark one notification as read on behalf of its owner."""

        model = self.session.get(NotificationModel, notification_id)
        if model is None or model.user_id != user_id:
            raise NotificationNotFoundError(notification_id)
        if not model.is_read:
            model.is_read = True
            model.read_at = to_storage(local_now())
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_read(self, user_id: int) -> int:
        """Mark every unread notification of ``user_id`` as read; return the count."""

        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.read_at: to_storage(
                        local_now()
                    ),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return int(updated or 0)

    def unread_count(self, user_id: int) -> int:
        count = (
            self.session.query(func.count(NotificationModel.id))
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .scalar()
        )
        return int(count or 0)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            title=model.title,
            message=model.message,
            chore_id=model.chore_id,
            application_id=model.application_id,
            payment_id=model.payment_id,
            link=model.link,
            is_read=bool(model.is_read),
            created_at=from_storage(model.created_at),
            read_at=from_storage(model.read_at),
        )


__all__ = ["NotificationRepository"]
