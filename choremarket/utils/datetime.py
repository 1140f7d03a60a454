"""Clock and storage conventions for timestamps.

Rows keep naive wall-clock time in the application timezone (SQLite has no
offset-aware ``DATETIME``). Repositories call :func:`to_storage` on the way in
and :func:`from_storage` on the way out, so entities always carry aware values.
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from choremarket.config import get_settings


def app_timezone() -> ZoneInfo:
    """Zone used for timestamps and for evaluating quiet hours."""

    return ZoneInfo(get_settings().app_timezone)


def local_now() -> datetime:
    return datetime.now(tz=app_timezone())


def local_now_naive() -> datetime:
    """Column default: the current wall-clock time in storage form."""

    return datetime.now(tz=app_timezone()).replace(tzinfo=None)


def from_storage(value: datetime | None) -> datetime | None:
    """Attach the app timezone to a stored value; aware values are converted."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=app_timezone())
    return value.astimezone(app_timezone())


def to_storage(value: datetime | None) -> datetime | None:
    localized = from_storage(value)
    return localized.replace(tzinfo=None) if localized is not None else None
