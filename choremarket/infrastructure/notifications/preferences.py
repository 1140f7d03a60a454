"""Resolution of a user's external notification preferences."""

from __future__ import annotations

from dataclasses import replace
from typing import Final

from choremarket.domain.entities import NotificationPreference
from choremarket.infrastructure.repositories import NotificationPreferenceRepository

DEFAULT_PREFERENCE: Final = NotificationPreference()


class PreferenceResolver:
    """Return stored preferences, falling back to :data:`DEFAULT_PREFERENCE`."""

    def __init__(self, repository: NotificationPreferenceRepository) -> None:
        self._repository = repository

    def resolve(self, user_id: int) -> NotificationPreference:
        stored = self._repository.get_for_user(user_id)
        if stored is not None:
            return stored
        return replace(DEFAULT_PREFERENCE, user_id=user_id)


def is_in_mute_window(preference: NotificationPreference, now_hour: int) -> bool:
    """Return ``True`` when ``now_hour`` falls inside the user's quiet hours.

    The window is half-open, ``[mute_from, mute_to)``. When ``mute_from`` is
    greater than ``mute_to`` the window wraps past midnight.
    """

    start = preference.mute_from
    end = preference.mute_to
    if start is None or end is None:
        return False
    if start <= end:
        return start <= now_hour < end
    return now_hour >= start or now_hour < end


__all__ = ["DEFAULT_PREFERENCE", "PreferenceResolver", "is_in_mute_window"]
