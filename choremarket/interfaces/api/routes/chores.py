"""Routes for the chore lifecycle and its cancellation workflow."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from choremarket.application.use_cases.cancellations import (
    CancellationOutcome,
    decide_cancellation as decide_cancellation_uc,
    direct_cancel as direct_cancel_uc,
    list_cancellation_requests as list_cancellation_requests_uc,
    request_cancellation as request_cancellation_uc,
)
from choremarket.application.use_cases.chores import (
    assign_worker as assign_worker_uc,
    close_chore as close_chore_uc,
    complete_chore as complete_chore_uc,
    create_chore as create_chore_uc,
    get_chore as get_chore_uc,
    list_chores as list_chores_uc,
    publish_chore as publish_chore_uc,
    start_chore as start_chore_uc,
)
from choremarket.domain.entities import CancellationRequest, Chore, User
from choremarket.infrastructure.database import get_db
from choremarket.interfaces.api.dependencies import get_current_user
from choremarket.interfaces.api.routes_helpers import http_error_for
from choremarket.interfaces.api.schemas import (
    AssignWorkerRequest,
    CancellationDecisionRequest,
    CancellationOutcomeRead,
    CancellationRequestCreate,
    CancellationRequestRead,
    ChoreCreate,
    ChoreRead,
)

router = APIRouter(prefix="/chores", tags=["chores"])


def _to_read_model(chore: Chore) -> ChoreRead:
    return ChoreRead.model_validate(chore)


def _request_to_read_model(request: CancellationRequest) -> CancellationRequestRead:
    return CancellationRequestRead.model_validate(request)


def _outcome_to_read_model(outcome: CancellationOutcome) -> CancellationOutcomeRead:
    return CancellationOutcomeRead(
        chore=_to_read_model(outcome.chore),
        request=_request_to_read_model(outcome.request),
    )


@router.post("/", response_model=ChoreRead, status_code=status.HTTP_201_CREATED)
def create_chore(
    chore_in: ChoreCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChoreRead:
    """Post a new chore for the calling customer."""

    try:
        chore = create_chore_uc(
            db,
            customer_id=current_user.id,
            title=chore_in.title,
            description=chore_in.description,
            budget=chore_in.budget,
            publish=chore_in.publish,
        )
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _to_read_model(chore)


@router.get("/", response_model=list[ChoreRead])
def list_chores(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[ChoreRead]:
    """Return the chores posted by the calling customer."""

    return [_to_read_model(chore) for chore in list_chores_uc(db, customer_id=current_user.id)]


@router.get("/{chore_id}", response_model=ChoreRead)
def read_chore(
    chore_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChoreRead:
    try:
        chore = get_chore_uc(db, chore_id=chore_id, user_id=current_user.id)
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _to_read_model(chore)


@router.get("/{chore_id}/cancellation-requests", response_model=list[CancellationRequestRead])
def list_cancellation_requests(
    chore_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[CancellationRequestRead]:
    """Return the chore's cancellation history, newest first."""

    try:
        requests = list_cancellation_requests_uc(
            db, chore_id=chore_id, user_id=current_user.id
        )
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return [_request_to_read_model(request) for request in requests]


@router.post("/{chore_id}/publish", response_model=ChoreRead)
def publish_chore(
    chore_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChoreRead:
    try:
        chore = publish_chore_uc(db, chore_id=chore_id, customer_id=current_user.id)
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _to_read_model(chore)


@router.post("/{chore_id}/assign-worker", response_model=ChoreRead)
def assign_worker(
    chore_id: int,
    payload: AssignWorkerRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChoreRead:
    """Give the chore to a worker; usually called when a bid is accepted."""

    try:
        chore = assign_worker_uc(
            db,
            chore_id=chore_id,
            customer_id=current_user.id,
            worker_id=payload.worker_id,
        )
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _to_read_model(chore)


@router.post("/{chore_id}/start", response_model=ChoreRead)
def start_chore(
    chore_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChoreRead:
    try:
        chore = start_chore_uc(db, chore_id=chore_id, worker_id=current_user.id)
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _to_read_model(chore)


@router.post("/{chore_id}/complete", response_model=ChoreRead)
def complete_chore(
    chore_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChoreRead:
    try:
        chore = complete_chore_uc(db, chore_id=chore_id, worker_id=current_user.id)
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _to_read_model(chore)


@router.post("/{chore_id}/approve", response_model=ChoreRead)
def approve_chore(
    chore_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ChoreRead:
    """Accept the completed work and close the chore."""

    try:
        chore = close_chore_uc(db, chore_id=chore_id, customer_id=current_user.id)
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _to_read_model(chore)


@router.post("/{chore_id}/cancel", response_model=CancellationOutcomeRead)
def cancel_chore(
    chore_id: int,
    payload: CancellationRequestCreate | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CancellationOutcomeRead:
    """Cancel a chore that has not been assigned yet."""

    try:
        outcome = direct_cancel_uc(
            db,
            chore_id=chore_id,
            customer_id=current_user.id,
            reason=payload.reason if payload else None,
        )
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _outcome_to_read_model(outcome)


@router.post(
    "/{chore_id}/cancel-request",
    response_model=CancellationOutcomeRead,
    status_code=status.HTTP_201_CREATED,
)
def request_cancellation(
    chore_id: int,
    payload: CancellationRequestCreate | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CancellationOutcomeRead:
    """Ask the customer to release the calling worker from the chore."""

    try:
        outcome = request_cancellation_uc(
            db,
            chore_id=chore_id,
            worker_id=current_user.id,
            reason=payload.reason if payload else None,
        )
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _outcome_to_read_model(outcome)


@router.post("/{chore_id}/cancel-request/decision", response_model=CancellationOutcomeRead)
def decide_cancellation(
    chore_id: int,
    payload: CancellationDecisionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CancellationOutcomeRead:
    try:
        outcome = decide_cancellation_uc(
            db,
            chore_id=chore_id,
            customer_id=current_user.id,
            decision=payload.decision,
        )
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return _outcome_to_read_model(outcome)
