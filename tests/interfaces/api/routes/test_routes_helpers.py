"""Tests for the error translation shared by route handlers."""

import pytest

pytest.importorskip("fastapi")

from choremarket.domain.errors import (
    ChoreNotFoundError,
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    LifecycleError,
    NotificationNotFoundError,
)
from choremarket.interfaces.api.routes_helpers import http_error_for


@pytest.mark.parametrize(
    ("error", "expected_status"),
    [
        (ChoreNotFoundError(1), 404),
        (NotificationNotFoundError(1), 404),
        (ForbiddenError("nope"), 403),
        (InvalidStateError("wrong state"), 400),
        (ConflictError("try again"), 409),
        (LifecycleError("Only workers can be assigned to a chore"), 400),
        (ValueError("Chore title is required"), 400),
    ],
)
def test_http_error_for(error, expected_status):
    http_error = http_error_for(error)

    assert http_error.status_code == expected_status
    assert http_error.detail == str(error)
