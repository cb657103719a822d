"""Shared wiring for use cases that mutate the stock ledger."""

import asyncio
import weakref

from src.application.dto.responses import InventoryItemResponse
from src.core.entities.inventory import InventoryItem
from src.core.interfaces.snapshot_store import ISnapshotStore
from src.core.services.stock_ledger import StockLedger

# Snapshot and save happen under one lock per event loop so saves land in ledger order
_persist_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
    weakref.WeakKeyDictionary()
)


def _persist_lock() -> asyncio.Lock:
    loop = asyncio.get_running_loop()
    lock = _persist_locks.get(loop)
    if lock is None:
        lock = _persist_locks[loop] = asyncio.Lock()
    return lock


class LedgerUseCase:
    """
    Base for ledger commands.

    Runs the ledger operation first and persists the full snapshot only
    after it succeeded; a failed command leaves the stored snapshot as is.
    """

    def __init__(
        self,
        ledger: StockLedger | None = None,
        snapshot_store: ISnapshotStore | None = None,
    ):
        self._ledger = ledger
        self._snapshot_store = snapshot_store

    def _get_ledger(self) -> StockLedger:
        if self._ledger is None:
            from src.application.services import get_stock_ledger

            self._ledger = get_stock_ledger()
        return self._ledger

    async def _get_snapshot_store(self) -> ISnapshotStore:
        if self._snapshot_store is None:
            from src.infrastructure.storage.sqlite import get_snapshot_store

            self._snapshot_store = await get_snapshot_store()
        return self._snapshot_store

    async def _persist(self) -> None:
        store = await self._get_snapshot_store()
        async with _persist_lock():
            await store.save(self._get_ledger().snapshot())

    def to_response(self, item: InventoryItem) -> InventoryItemResponse:
        """Convert an item snapshot to its API response."""
        return InventoryItemResponse.from_entity(item)
