"""Engine access for the ledger database.

``LEDGER_DB_URL`` selects the store (PostgreSQL in deployments, a SQLite
file locally). One pooled engine is shared by the dashboard and the CLIs.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

# Seconds a SQLite connection waits on another writer's lock.
SQLITE_LOCK_TIMEOUT_SECONDS = 30


def _get_env_var(name: str) -> str:
    """Return a required setting, reading ``.env`` first.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build the ledger engine.

    Summary reads fan out over several pooled connections and purchase
    writes adjust card balances concurrently, so SQLite connections wait
    for the write lock instead of failing fast.
    """
    options = {}
    if db_url.startswith("sqlite"):
        options["connect_args"] = {"timeout": SQLITE_LOCK_TIMEOUT_SECONDS}
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        **options,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Return the process-wide ledger engine, creating it on first use."""
    global _ledger_engine
    if _ledger_engine is None:
        _ledger_engine = _create_engine(_get_env_var("LEDGER_DB_URL"))
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Serves the shared ledger engine to the repository."""

    def get_ledger_engine(self) -> Engine:
        return get_ledger_engine()


__all__ = [
    "SQLITE_LOCK_TIMEOUT_SECONDS",
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
