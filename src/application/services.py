"""
Service factory functions for dependency injection.

Wires the process-wide stock ledger to its configuration and restores it
from the persisted snapshot. Use cases and routes import from here instead
of constructing ledgers themselves.
"""

from typing import TYPE_CHECKING

from src.config import get_logger, get_settings
from src.core.services import StockLedger

if TYPE_CHECKING:
    from src.core.interfaces import ISnapshotStore

logger = get_logger(__name__)

# Singleton ledger instance
_stock_ledger: StockLedger | None = None


def get_stock_ledger() -> StockLedger:
    """Get or create the process-wide StockLedger from settings."""
    global _stock_ledger
    if _stock_ledger is None:
        _stock_ledger = StockLedger.from_settings(get_settings().ledger)
    return _stock_ledger


def reset_stock_ledger() -> None:
    """Forget the process-wide ledger (for testing)."""
    global _stock_ledger
    _stock_ledger = None


async def restore_stock_ledger(
    snapshot_store: "ISnapshotStore | None" = None,
    ledger: StockLedger | None = None,
) -> StockLedger:
    """
    Load the persisted snapshot into a ledger.

    Args:
        snapshot_store: Store to read from; defaults to the SQLite store.
        ledger: Ledger to fill; defaults to the process-wide one.

    Returns:
        The restored ledger.
    """
    if snapshot_store is None:
        # Lazy import infrastructure to avoid circular imports
        from src.infrastructure.storage.sqlite import get_snapshot_store

        snapshot_store = await get_snapshot_store()

    ledger = ledger if ledger is not None else get_stock_ledger()
    items = await snapshot_store.load()
    count = ledger.load(items)
    logger.info("stock_ledger_restored", items=count)
    return ledger
