"""Persistence helpers for notification preferences."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.domain.entities import NotificationPreference
from choremarket.infrastructure.models import NotificationPreferenceModel


class NotificationPreferenceRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_for_user(self, user_id: int) -> NotificationPreference | None:
        model = self.session.get(NotificationPreferenceModel, user_id)
        return self._to_entity(model) if model else None

    def upsert(self, preference: NotificationPreference) -> NotificationPreference:
        if preference.user_id is None:
            raise ValueError("Notification preferences require a user id")
        model = self.session.get(NotificationPreferenceModel, preference.user_id)
        if model is None:
            model = NotificationPreferenceModel(user_id=preference.user_id)
        model.email = preference.email
        model.sms = preference.sms
        model.whatsapp = preference.whatsapp
        model.preferred = preference.preferred or "any"
        model.mute_from = preference.mute_from
        model.mute_to = preference.mute_to
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: NotificationPreferenceModel) -> NotificationPreference:
        return NotificationPreference(
            user_id=model.user_id,
            email=bool(model.email),
            sms=bool(model.sms),
            whatsapp=bool(model.whatsapp),
            preferred=model.preferred or "any",
            mute_from=model.mute_from,
            mute_to=model.mute_to,
        )


__all__ = ["NotificationPreferenceRepository"]
