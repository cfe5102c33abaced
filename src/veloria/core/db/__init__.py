"""Database utilities - engine, session, migrations."""

from src.veloria.core.db.engine import dispose_engine, get_engine
from src.veloria.core.db.migrations import run_migrations_sync
from src.veloria.core.db.session import get_session

__all__ = [
    "dispose_engine",
    "get_engine",
    "get_session",
    "run_migrations_sync",
]
