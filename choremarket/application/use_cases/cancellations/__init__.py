"""Use cases for the chore cancellation workflow."""

from .decide_cancellation import decide_cancellation
from .direct_cancel import direct_cancel
from .list_cancellation_requests import list_cancellation_requests
from .outcome import CancellationOutcome
from .request_cancellation import request_cancellation

__all__ = [
    "CancellationOutcome",
    "decide_cancellation",
    "direct_cancel",
    "list_cancellation_requests",
    "request_cancellation",
]
