"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from choremarket.domain.entities import User
from choremarket.infrastructure.models import UserModel
from choremarket.utils import from_storage


class UserRepository:
    """Provide lookups for marketplace accounts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.email == email)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel(
            name=user.name,
            email=user.email,
            phone=user.phone,
            role=user.role.upper(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            role=model.role,
            created_at=from_storage(model.created_at),
        )


__all__ = ["UserRepository"]
