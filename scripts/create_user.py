"""Utility script to seed a marketplace account in the database."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from choremarket.application.use_cases.users import ALLOWED_ROLES, create_user
from choremarket.infrastructure.database import SessionLocal, initialize_database


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create a customer, worker or admin account for the chore marketplace.",
    )
    parser.add_argument("--name", required=True, help="Display name of the user")
    parser.add_argument(
        "--role",
        default="CUSTOMER",
        type=str.upper,
        choices=ALLOWED_ROLES,
        help="Account role (default: CUSTOMER)",
    )
    parser.add_argument("--email", default=None, help="Email used for notifications")
    parser.add_argument("--phone", default=None, help="Phone number used for SMS/WhatsApp")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args(argv)

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            name=args.name,
            role=args.role,
            email=args.email,
            phone=args.phone,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store the user in the database: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Role: {user.role}\n"
            f"  Email: {user.email or '-'}\n"
            f"  Phone: {user.phone or '-'}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
