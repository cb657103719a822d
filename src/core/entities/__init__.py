"""Core domain entities."""

from src.core.entities.inventory import (
    InventoryItem,
    ItemDetailsUpdate,
    ItemSpec,
    ItemStatus,
    MovementSpec,
    MovementType,
    StockMovement,
)

__all__ = [
    "InventoryItem",
    "StockMovement",
    "ItemStatus",
    "MovementType",
    "ItemSpec",
    "MovementSpec",
    "ItemDetailsUpdate",
]
