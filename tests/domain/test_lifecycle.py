"""Tests for the chore transition table."""

from __future__ import annotations

import pytest

from choremarket.domain.entities import ChoreStatus
from choremarket.domain.errors import InvalidStateError
from choremarket.domain.lifecycle import (
    ChoreAction,
    allowed_sources,
    can_apply,
    ensure_assignment_invariant,
    next_status,
)


@pytest.mark.parametrize(
    ("current", "action", "expected"),
    [
        (ChoreStatus.DRAFT, ChoreAction.PUBLISH, ChoreStatus.PUBLISHED),
        (ChoreStatus.PUBLISHED, ChoreAction.ASSIGN, ChoreStatus.ASSIGNED),
        (ChoreStatus.ASSIGNED, ChoreAction.START, ChoreStatus.IN_PROGRESS),
        (ChoreStatus.ASSIGNED, ChoreAction.COMPLETE, ChoreStatus.COMPLETED),
        (ChoreStatus.IN_PROGRESS, ChoreAction.COMPLETE, ChoreStatus.COMPLETED),
        (ChoreStatus.COMPLETED, ChoreAction.CLOSE, ChoreStatus.CLOSED),
        (ChoreStatus.DRAFT, ChoreAction.CANCEL, ChoreStatus.CANCELLED),
        (ChoreStatus.PUBLISHED, ChoreAction.CANCEL, ChoreStatus.CANCELLED),
        (ChoreStatus.ASSIGNED, ChoreAction.REQUEST_CANCELLATION, ChoreStatus.CANCELLATION_REQUESTED),
        (ChoreStatus.IN_PROGRESS, ChoreAction.REQUEST_CANCELLATION, ChoreStatus.CANCELLATION_REQUESTED),
        (ChoreStatus.CANCELLATION_REQUESTED, ChoreAction.APPROVE_CANCELLATION, ChoreStatus.CANCELLED),
    ],
)
def test_next_status_follows_table(current, action, expected):
    assert next_status(current, action) is expected


@pytest.mark.parametrize("original", [ChoreStatus.ASSIGNED, ChoreStatus.IN_PROGRESS])
def test_reject_restores_original_status(original):
    restored = next_status(
        ChoreStatus.CANCELLATION_REQUESTED,
        ChoreAction.REJECT_CANCELLATION,
        restore_to=original,
    )

    assert restored is original


def test_reject_requires_a_restorable_status():
    with pytest.raises(InvalidStateError):
        next_status(ChoreStatus.CANCELLATION_REQUESTED, ChoreAction.REJECT_CANCELLATION)
    with pytest.raises(InvalidStateError):
        next_status(
            ChoreStatus.CANCELLATION_REQUESTED,
            ChoreAction.REJECT_CANCELLATION,
            restore_to=ChoreStatus.PUBLISHED,
        )


def test_illegal_transition_names_allowed_sources():
    with pytest.raises(InvalidStateError) as excinfo:
        next_status(ChoreStatus.ASSIGNED, ChoreAction.CANCEL)

    message = str(excinfo.value)
    assert "DRAFT or PUBLISHED" in message
    assert "ASSIGNED" in message


def test_close_error_does_not_read_like_cancellation_approval():
    with pytest.raises(
        InvalidStateError,
        match=r"^Chore must be COMPLETED to be closed \(current status: IN_PROGRESS\)$",
    ):
        next_status(ChoreStatus.IN_PROGRESS, ChoreAction.CLOSE)


def test_statuses_are_accepted_as_strings():
    assert next_status("DRAFT", ChoreAction.PUBLISH) is ChoreStatus.PUBLISHED
    assert can_apply("COMPLETED", ChoreAction.CLOSE)
    assert not can_apply("CLOSED", ChoreAction.CLOSE)


def test_allowed_sources_for_request_cancellation():
    assert allowed_sources(ChoreAction.REQUEST_CANCELLATION) == (
        ChoreStatus.ASSIGNED,
        ChoreStatus.IN_PROGRESS,
    )


def test_terminal_statuses_have_no_way_out():
    for status in (ChoreStatus.CLOSED, ChoreStatus.CANCELLED):
        assert not any(can_apply(status, action) for action in ChoreAction)


@pytest.mark.parametrize(
    ("status", "worker_id", "valid"),
    [
        (ChoreStatus.DRAFT, None, True),
        (ChoreStatus.PUBLISHED, None, True),
        (ChoreStatus.CANCELLED, None, True),
        (ChoreStatus.ASSIGNED, 7, True),
        (ChoreStatus.CANCELLATION_REQUESTED, 7, True),
        (ChoreStatus.CLOSED, 7, True),
        (ChoreStatus.PUBLISHED, 7, False),
        (ChoreStatus.CANCELLED, 7, False),
        (ChoreStatus.IN_PROGRESS, None, False),
        (ChoreStatus.COMPLETED, None, False),
    ],
)
def test_assignment_invariant(status, worker_id, valid):
    if valid:
        ensure_assignment_invariant(status, worker_id)
    else:
        with pytest.raises(InvalidStateError):
            ensure_assignment_invariant(status, worker_id)
