"""
Dependency injection container for FastAPI.

Provides the ledger, stores and use cases to route handlers. Tests swap
any of these through `app.dependency_overrides`.
"""

from functools import lru_cache

from fastapi import Depends

from src.application.services import get_stock_ledger
from src.application.use_cases import (
    ApplyMovementUseCase,
    RegisterItemUseCase,
    SetDiscontinuedUseCase,
    UpdateItemDetailsUseCase,
)
from src.config import Settings, get_settings
from src.core.interfaces import ISnapshotStore
from src.core.services import StockLedger
from src.infrastructure.storage.sqlite import get_snapshot_store


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Ledger dependency
def get_ledger() -> StockLedger:
    """Get the process-wide stock ledger."""
    return get_stock_ledger()


# Store dependencies
async def get_snap_store() -> ISnapshotStore:
    """Get inventory snapshot store."""
    return await get_snapshot_store()


# Use case dependencies
def get_register_item_use_case(
    ledger: StockLedger = Depends(get_ledger),
    store: ISnapshotStore = Depends(get_snap_store),
) -> RegisterItemUseCase:
    """Get register item use case."""
    return RegisterItemUseCase(ledger=ledger, snapshot_store=store)


def get_apply_movement_use_case(
    ledger: StockLedger = Depends(get_ledger),
    store: ISnapshotStore = Depends(get_snap_store),
) -> ApplyMovementUseCase:
    """Get apply movement use case."""
    return ApplyMovementUseCase(ledger=ledger, snapshot_store=store)


def get_set_discontinued_use_case(
    ledger: StockLedger = Depends(get_ledger),
    store: ISnapshotStore = Depends(get_snap_store),
) -> SetDiscontinuedUseCase:
    """Get set discontinued use case."""
    return SetDiscontinuedUseCase(ledger=ledger, snapshot_store=store)


def get_update_item_details_use_case(
    ledger: StockLedger = Depends(get_ledger),
    store: ISnapshotStore = Depends(get_snap_store),
) -> UpdateItemDetailsUseCase:
    """Get update item details use case."""
    return UpdateItemDetailsUseCase(ledger=ledger, snapshot_store=store)
