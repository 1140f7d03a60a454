"""Per-user settings for external notification delivery."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal

Channel = Literal["email", "sms", "whatsapp"]
PreferredChannel = Literal["email", "sms", "whatsapp", "any"]

CHANNEL_PRIORITY: Final[tuple[Channel, ...]] = ("email", "whatsapp", "sms")


@dataclass(frozen=True)
class NotificationPreference:
    """Channel flags and quiet hours; the defaults are used when nothing is stored."""

    user_id: int | None = None
    email: bool = True
    sms: bool = False
    whatsapp: bool = False
    preferred: PreferredChannel = "any"
    mute_from: int | None = None
    mute_to: int | None = None

    def allowed_channels(self) -> dict[Channel, bool]:
        return {"email": self.email, "sms": self.sms, "whatsapp": self.whatsapp}


__all__ = [
    "CHANNEL_PRIORITY",
    "Channel",
    "NotificationPreference",
    "PreferredChannel",
]
