"""Persistence helpers for cancellation requests.

Writes here only flush: requests are created and resolved as part of a chore
transition, and :meth:`ChoreRepository.atomic_update` owns the commit.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from choremarket.domain.entities import (
    CancellationRequest,
    CancellationRequestStatus,
    ChoreStatus,
)
from choremarket.domain.errors import ConflictError
from choremarket.infrastructure.models import CancellationRequestModel
from choremarket.utils import from_storage, local_now, to_storage


class CancellationRequestRepository:
    """Provide create/lookup/resolve operations for cancellation requests."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, request: CancellationRequest) -> CancellationRequest:
        model = CancellationRequestModel(
            chore_id=request.chore_id,
            requested_by_id=request.requested_by_id,
            original_status=ChoreStatus(request.original_status).value,
            reason=request.reason,
            status=CancellationRequestStatus(request.status).value,
            created_at=to_storage(
                request.created_at or local_now()
            ),
            resolved_at=to_storage(request.resolved_at),
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def find_pending(self, chore_id: int) -> CancellationRequest | None:
        """Return the most recent PENDING request for ``chore_id``."""

        model = (
            self.session.query(CancellationRequestModel)
            .filter(
                CancellationRequestModel.chore_id == chore_id,
                CancellationRequestModel.status == CancellationRequestStatus.PENDING.value,
            )
            .order_by(
                CancellationRequestModel.created_at.desc(),
                CancellationRequestModel.id.desc(),
            )
            .populate_existing()
            .first()
        )
        return self._to_entity(model) if model else None

    def list_for_chore(self, chore_id: int) -> Sequence[CancellationRequest]:
        query = (
            self.session.query(CancellationRequestModel)
            .filter(CancellationRequestModel.chore_id == chore_id)
            .order_by(
                CancellationRequestModel.created_at.desc(),
                CancellationRequestModel.id.desc(),
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def resolve(
        self,
        request_id: int,
        status: CancellationRequestStatus,
        resolved_at: datetime,
    ) -> CancellationRequest:
        """Move a PENDING request to ``status``.

        The update is conditional on the row still being PENDING; resolved
        requests are immutable, so losing that race raises :class:`ConflictError`.
        """

        status = CancellationRequestStatus(status)
        if status is CancellationRequestStatus.PENDING:
            raise ValueError("A cancellation request cannot be resolved as PENDING")

        updated = (
            self.session.query(CancellationRequestModel)
            .filter(
                CancellationRequestModel.id == request_id,
                CancellationRequestModel.status == CancellationRequestStatus.PENDING.value,
            )
            .update(
                {
                    CancellationRequestModel.status: status.value,
                    CancellationRequestModel.resolved_at: to_storage(
                        resolved_at
                    ),
                },
                synchronize_session=False,
            )
        )
        if updated != 1:
            raise ConflictError(
                "This cancellation request was already resolved. Reload the chore."
            )
        model = self.session.get(CancellationRequestModel, request_id, populate_existing=True)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CancellationRequestModel) -> CancellationRequest:
        return CancellationRequest(
            id=model.id,
            chore_id=model.chore_id,
            requested_by_id=model.requested_by_id,
            original_status=ChoreStatus(model.original_status),
            status=CancellationRequestStatus(model.status),
            reason=model.reason,
            created_at=from_storage(model.created_at),
            resolved_at=from_storage(model.resolved_at),
        )


__all__ = ["CancellationRequestRepository"]
