"""Aggregate application use cases."""

from .cancellations import decide_cancellation, direct_cancel, request_cancellation
from .users import create_user

__all__ = [
    "create_user",
    "decide_cancellation",
    "direct_cancel",
    "request_cancellation",
]
