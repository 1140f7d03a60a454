"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a single notification as read."""

    id: int = Field(..., gt=0, description="Notification identifier")


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    type: str
    title: str
    message: str
    chore_id: int | None = None
    application_id: int | None = None
    payment_id: int | None = None
    link: str | None = None
    is_read: bool
    created_at: datetime | None
    read_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class UnreadCountRead(BaseModel):
    count: int


class MarkAllReadResponse(BaseModel):
    updated: int


class NotificationPreferenceBase(BaseModel):
    email: bool = True
    sms: bool = False
    whatsapp: bool = False
    preferred: Literal["email", "sms", "whatsapp", "any"] = "any"
    mute_from: int | None = Field(default=None, ge=0, le=23)
    mute_to: int | None = Field(default=None, ge=0, le=23)


class NotificationPreferenceUpdate(NotificationPreferenceBase):
    """Channel settings and quiet hours chosen by the user."""

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _mute_window_is_complete(self) -> "NotificationPreferenceUpdate":
        if (self.mute_from is None) != (self.mute_to is None):
            raise ValueError("mute_from and mute_to must be set together")
        return self


class NotificationPreferenceRead(NotificationPreferenceBase):
    model_config = ConfigDict(from_attributes=True)


class NotificationDeliveryRead(BaseModel):
    id: int
    notification_id: int | None
    provider: str
    channel: str | None
    status: str
    provider_response: str | None
    retry_count: int
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "MarkAllReadResponse",
    "NotificationDeliveryRead",
    "NotificationMarkReadRequest",
    "NotificationPreferenceRead",
    "NotificationPreferenceUpdate",
    "NotificationRead",
    "UnreadCountRead",
]
