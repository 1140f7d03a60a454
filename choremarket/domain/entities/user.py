"""Domain entity representing a marketplace user."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

ROLE_CUSTOMER = "CUSTOMER"
ROLE_WORKER = "WORKER"
ROLE_ADMIN = "ADMIN"


@dataclass
class User:
    """Account details the core reads for authorization and contact data."""

    id: int | None
    name: str
    email: str | None
    phone: str | None
    role: str
    created_at: datetime | None = None

    def has_role(self, role: str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role.upper() == role.upper()

    def is_customer(self) -> bool:
        return self.has_role(ROLE_CUSTOMER)

    def is_worker(self) -> bool:
        return self.has_role(ROLE_WORKER)


__all__ = ["ROLE_ADMIN", "ROLE_CUSTOMER", "ROLE_WORKER", "User"]
