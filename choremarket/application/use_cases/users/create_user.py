"""Use case for creating marketplace accounts."""

from sqlalchemy.orm import Session

from choremarket.domain.entities import ROLE_ADMIN, ROLE_CUSTOMER, ROLE_WORKER, User
from choremarket.infrastructure.repositories import UserRepository
from choremarket.utils import local_now

ALLOWED_ROLES = (ROLE_CUSTOMER, ROLE_WORKER, ROLE_ADMIN)


def create_user(
    session: Session,
    *,
    name: str,
    role: str,
    email: str | None = None,
    phone: str | None = None,
) -> User:
    """Create a new user ensuring unique email addresses."""

    normalized_role = (role or "").strip().upper()
    if normalized_role not in ALLOWED_ROLES:
        raise ValueError(f"Role must be one of {', '.join(ALLOWED_ROLES)}")

    normalized_name = (name or "").strip()
    if not normalized_name:
        raise ValueError("Name is required")

    repository = UserRepository(session)
    normalized_email = email.strip().lower() if email else None
    if normalized_email and repository.get_by_email(normalized_email):
        raise ValueError("Email is already registered")

    user = User(
        id=None,
        name=normalized_name,
        email=normalized_email,
        phone=phone.strip() if phone else None,
        role=normalized_role,
        created_at=local_now(),
    )
    return repository.create(user)
