"""Database utilities - engine, session, migrations."""

from src.hrdesk.core.db.engine import (
    dispose_engine,
    enable_sqlite_foreign_keys,
    get_engine,
    get_sync_database_url,
)
from src.hrdesk.core.db.migrations import run_migrations_sync
from src.hrdesk.core.db.session import unit_of_work

__all__ = [
    # Engine
    "dispose_engine",
    "enable_sqlite_foreign_keys",
    "get_engine",
    "get_sync_database_url",
    # Session
    "unit_of_work",
    # Migrations
    "run_migrations_sync",
]
