"""Create a dashboard user.

Usage:
    python -m src.veloria.scripts.create_admin --email info@veloria.in --name "Veloria Admin"

The password is read from --password or prompted for. Pass --migrate to
upgrade the database schema first.
"""

import argparse
import asyncio
import getpass
import sys

from pydantic import ValidationError

from src.veloria.core.config import get_settings
from src.veloria.core.db import dispose_engine, get_session, run_migrations_sync
from src.veloria.core.logging import get_logger, setup_logging
from src.veloria.models import UserRole
from src.veloria.repositories import UserRepository
from src.veloria.schemas.user import UserCreate
from src.veloria.services import AuthService

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a Veloria dashboard user")
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", default="Veloria Admin")
    parser.add_argument("--password")
    parser.add_argument(
        "--role", choices=[role.value for role in UserRole], default=UserRole.ADMIN.value
    )
    parser.add_argument("--migrate", action="store_true", help="Run alembic upgrade head first")
    return parser.parse_args(argv)


async def create_user(data: UserCreate) -> bool:
    """Returns False if a user with the email already exists."""
    try:
        async with get_session() as session:
            service = AuthService(UserRepository(session), session)
            try:
                user = await service.create_user(data)
            except ValueError as e:
                logger.warning("User not created", email=data.email, reason=str(e))
                return False
            logger.info("User created", user_id=str(user.id), email=user.email, role=user.role)
            return True
    finally:
        await dispose_engine()


def main(argv: list[str] | None = None) -> int:
    setup_logging(get_settings().debug)
    args = parse_args(argv)
    password = args.password or getpass.getpass("Password: ")

    try:
        data = UserCreate(email=args.email, name=args.name, password=password, role=args.role)
    except ValidationError as e:
        for error in e.errors():
            print(f"{'.'.join(map(str, error['loc']))}: {error['msg']}", file=sys.stderr)
        return 2

    if args.migrate:
        run_migrations_sync()

    return 0 if asyncio.run(create_user(data)) else 1


if __name__ == "__main__":
    sys.exit(main())
