"""Persistence helpers for chore entities."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace
from decimal import Decimal
from typing import TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from choremarket.domain.entities import Chore, ChoreStatus, PaymentStatus
from choremarket.domain.errors import ChoreNotFoundError, ConflictError
from choremarket.domain.lifecycle import ensure_assignment_invariant
from choremarket.infrastructure.models import ChoreModel
from choremarket.utils import from_storage, local_now, to_storage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChoreRepository:
    """Provide read operations and the atomic transition scope for chores."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, chore_id: int) -> Chore | None:
        model = self.session.get(ChoreModel, chore_id, populate_existing=True)
        return self._to_entity(model) if model else None

    def list_for_customer(self, customer_id: int) -> Sequence[Chore]:
        query = (
            self.session.query(ChoreModel)
            .filter(ChoreModel.created_by_id == customer_id)
            .order_by(ChoreModel.created_at.desc(), ChoreModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, chore: Chore) -> Chore:
        ensure_assignment_invariant(chore.status, chore.assigned_worker_id)
        model = ChoreModel()
        model.created_by_id = chore.created_by_id
        model.created_at = to_storage(
            chore.created_at or local_now()
        )
        self._apply_entity_to_model(model, chore)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def atomic_update(
        self,
        chore_id: int,
        mutate: Callable[[Chore], T],
        *,
        check: Callable[[Chore], None] | None = None,
    ) -> tuple[Chore, T]:
        """Run one lifecycle transition as a single all-or-nothing unit.

        The chore row is re-read inside the transaction (``FOR UPDATE`` where
        the database supports it) and ``check`` is evaluated against that fresh
        copy. ``mutate`` edits the entity's status fields and may write
        subordinate rows through other repositories bound to the same session;
        those helpers flush but never commit. The chore UPDATE carries the
        version guard, so a concurrent writer that slipped past the row lock
        surfaces as :class:`ConflictError`. Any exception rolls everything back.
        """

        try:
            model = (
                self.session.query(ChoreModel)
                .filter(ChoreModel.id == chore_id)
                .populate_existing()
                .with_for_update()
                .one_or_none()
            )
            if model is None:
                raise ChoreNotFoundError(chore_id)

            current = self._to_entity(model)
            if check is not None:
                check(replace(current))
            result = mutate(current)
            ensure_assignment_invariant(current.status, current.assigned_worker_id)
            self._apply_entity_to_model(model, current)
            self.session.flush()
            self.session.commit()
        except (StaleDataError, IntegrityError) as exc:
            self.session.rollback()
            logger.info("Concurrent update detected for chore %s: %s", chore_id, exc)
            raise ConflictError(
                "This chore was changed by someone else. Reload it and try again."
            ) from exc
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(model)
        return self._to_entity(model), result

    @staticmethod
    def _apply_entity_to_model(model: ChoreModel, chore: Chore) -> None:
        model.title = chore.title
        model.description = chore.description
        model.budget = chore.budget
        model.status = ChoreStatus(chore.status).value
        model.payment_status = PaymentStatus(chore.payment_status).value
        model.assigned_worker_id = chore.assigned_worker_id

    @staticmethod
    def _to_entity(model: ChoreModel) -> Chore:
        return Chore(
            id=model.id,
            created_by_id=model.created_by_id,
            title=model.title,
            description=model.description,
            budget=Decimal(model.budget if model.budget is not None else 0),
            status=ChoreStatus(model.status),
            payment_status=PaymentStatus(model.payment_status),
            assigned_worker_id=model.assigned_worker_id,
            version=model.version,
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
        )


__all__ = ["ChoreRepository"]
