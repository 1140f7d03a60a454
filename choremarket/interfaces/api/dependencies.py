"""FastAPI dependency utilities."""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from choremarket.domain.entities import User
from choremarket.infrastructure.database import get_db
from choremarket.infrastructure.repositories import UserRepository


def resolve_current_user(raw_user_id: str | None, db: Session) -> User:
    """Resolve the calling user from the ``X-User-Id`` header value.

    Authentication happens upstream; this service only trusts the identity the
    gateway forwards.
    """

    if not raw_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing user identity",
        )
    try:
        user_id = int(raw_user_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user identity",
        ) from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


def get_current_user(
    x_user_id: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """Return the user making the request."""

    return resolve_current_user(x_user_id, db)
