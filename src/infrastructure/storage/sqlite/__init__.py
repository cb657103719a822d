"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from src.infrastructure.storage.sqlite.snapshot_store import SQLiteSnapshotStore

# Aliases used by the application lifespan
get_connection_pool = get_pool
close_connection_pool = close_pool

# Singleton instance
_snapshot_store: SQLiteSnapshotStore | None = None


async def get_snapshot_store() -> SQLiteSnapshotStore:
    """Get singleton snapshot store instance."""
    global _snapshot_store
    if _snapshot_store is None:
        _snapshot_store = SQLiteSnapshotStore()
    return _snapshot_store


def reset_snapshot_store() -> None:
    """Forget the singleton (for testing)."""
    global _snapshot_store
    _snapshot_store = None


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    "get_connection_pool",
    "close_connection_pool",
    # Stores
    "SQLiteSnapshotStore",
    "get_snapshot_store",
    "reset_snapshot_store",
]
