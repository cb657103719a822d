"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteSnapshotStore,
    close_pool,
    get_connection,
    get_pool,
    get_snapshot_store,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteSnapshotStore",
    "get_snapshot_store",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
