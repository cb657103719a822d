"""SQLite implementation of the inventory snapshot store."""

from datetime import UTC, datetime

import aiosqlite
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger, get_settings
from src.core.entities.inventory import InventoryItem
from src.core.exceptions import DatabaseError
from src.core.interfaces.snapshot_store import ISnapshotStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)

_items_adapter = TypeAdapter(list[InventoryItem])


class SQLiteSnapshotStore(ISnapshotStore):
    """Keeps the inventory as a JSON array under one key of the kv_store table."""

    def __init__(self, key: str | None = None):
        self.key = key or get_settings().storage.snapshot_key

    async def load(self) -> list[InventoryItem]:
        """Load saved items; a missing or unreadable blob yields an empty list."""
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (self.key,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError("load_snapshot", str(e)) from e

        if row is None:
            logger.info("snapshot_missing", key=self.key)
            return []

        try:
            items = _items_adapter.validate_json(row["value"])
        except PydanticValidationError as e:
            logger.warning(
                "snapshot_unreadable",
                key=self.key,
                errors=e.error_count(),
            )
            return []

        logger.info("snapshot_loaded", key=self.key, items=len(items))
        return items

    async def save(self, items: list[InventoryItem]) -> None:
        """Replace the saved items with the given list."""
        blob = _items_adapter.dump_json(items).decode("utf-8")
        try:
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (self.key, blob, datetime.now(UTC).isoformat()),
                )
        except aiosqlite.Error as e:
            raise DatabaseError("save_snapshot", str(e)) from e

        logger.info("snapshot_saved", key=self.key, items=len(items), size=len(blob))

    async def clear(self) -> None:
        try:
            async with get_transaction() as conn:
                await conn.execute("DELETE FROM kv_store WHERE key = ?", (self.key,))
        except aiosqlite.Error as e:
            raise DatabaseError("clear_snapshot", str(e)) from e

        logger.info("snapshot_cleared", key=self.key)
