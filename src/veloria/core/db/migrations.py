"""Alembic migration runner for deployment scripts."""

from alembic.config import Config

from alembic import command


def run_migrations_sync(revision: str = "head", config_path: str = "alembic.ini") -> None:
    """Upgrade the database to ``revision``.

    Alembic's env.py drives its own event loop, so call this outside one.
    """
    alembic_cfg = Config(config_path)
    command.upgrade(alembic_cfg, revision)
