"""Append-only ledger of external notification delivery attempts."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from choremarket.domain.entities import NotificationDelivery
from choremarket.infrastructure.models import NotificationDeliveryModel
from choremarket.utils import from_storage, local_now, to_storage


class NotificationDeliveryRepository:
    """Record delivery attempts; there is deliberately no update operation."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def record(self, delivery: NotificationDelivery) -> NotificationDelivery:
        model = NotificationDeliveryModel(
            notification_id=delivery.notification_id,
            user_id=delivery.user_id,
            provider=delivery.provider,
            channel=delivery.channel,
            status=delivery.status,
            provider_response=delivery.provider_response,
            retry_count=delivery.retry_count,
            created_at=to_storage(
                delivery.created_at or local_now()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_notification(self, notification_id: int) -> Sequence[NotificationDelivery]:
        query = (
            self.session.query(NotificationDeliveryModel)
            .filter(NotificationDeliveryModel.notification_id == notification_id)
            .order_by(NotificationDeliveryModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_user(
        self, user_id: int, *, limit: int | None = 50
    ) -> Sequence[NotificationDelivery]:
        query = (
            self.session.query(NotificationDeliveryModel)
            .filter(NotificationDeliveryModel.user_id == user_id)
            .order_by(NotificationDeliveryModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: NotificationDeliveryModel) -> NotificationDelivery:
        return NotificationDelivery(
            id=model.id,
            notification_id=model.notification_id,
            user_id=model.user_id,
            provider=model.provider,
            channel=model.channel,
            status=model.status,
            provider_response=model.provider_response,
            retry_count=model.retry_count,
            created_at=from_storage(model.created_at),
        )


__all__ = ["NotificationDeliveryRepository"]
