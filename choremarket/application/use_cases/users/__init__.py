"""Use cases for managing marketplace accounts."""

from .create_user import ALLOWED_ROLES, create_user

__all__ = ["ALLOWED_ROLES", "create_user"]
