"""Use case for posting a new chore."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from sqlalchemy.orm import Session

from choremarket.domain.entities import Chore, ChoreStatus, PaymentStatus
from choremarket.domain.errors import ForbiddenError, UserNotFoundError
from choremarket.infrastructure.repositories import ChoreRepository, UserRepository
from choremarket.utils import local_now


def create_chore(
    session: Session,
    *,
    customer_id: int,
    title: str,
    budget: Decimal | int | float | str,
    description: str | None = None,
    publish: bool = True,
) -> Chore:
    """Create a chore owned by ``customer_id``.

    The chore is listed straight away unless ``publish`` is false, in which
    case it stays a DRAFT until :func:`publish_chore` is called.
    """

    customer = UserRepository(session).get(customer_id)
    if customer is None:
        raise UserNotFoundError(customer_id)
    if not customer.is_customer():
        raise ForbiddenError("Only customers can post chores")

    normalized_title = (title or "").strip()
    if not normalized_title:
        raise ValueError("Chore title is required")

    try:
        amount = Decimal(str(budget))
    except (InvalidOperation, ValueError) as exc:
        raise ValueError("Chore budget must be a number") from exc
    if amount <= 0:
        raise ValueError("Chore budget must be greater than zero")

    chore = Chore(
        id=None,
        created_by_id=customer_id,
        title=normalized_title,
        description=description.strip() if description else None,
        budget=amount.quantize(Decimal("0.01")),
        status=ChoreStatus.PUBLISHED if publish else ChoreStatus.DRAFT,
        payment_status=PaymentStatus.UNPAID,
        created_at=local_now(),
    )
    return ChoreRepository(session).create(chore)
