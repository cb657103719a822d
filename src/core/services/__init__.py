"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.inventory_queries import (
    InventorySummary,
    MovementFeedEntry,
    filter_items,
    movement_feed,
    summarize,
)
from src.core.services.stock_ledger import MovementHistory, StockLedger
from src.core.services.stock_status import (
    derive_status,
    floored,
    replay_stock,
    signed_delta,
)

__all__ = [
    # Ledger
    "StockLedger",
    "MovementHistory",
    # Status rules
    "derive_status",
    "signed_delta",
    "floored",
    "replay_stock",
    # Queries
    "InventorySummary",
    "MovementFeedEntry",
    "filter_items",
    "movement_feed",
    "summarize",
]
