"""
Pure stock rules shared by the ledger and its consumers.

Status derivation lives here and only here; every mutation path in the
ledger calls `derive_status` afterwards.
"""

from collections.abc import Iterable

from src.core.entities.inventory import ItemStatus, MovementType, StockMovement

INBOUND_TYPES = frozenset({MovementType.IN, MovementType.ADJUSTMENT})
OUTBOUND_TYPES = frozenset({MovementType.OUT, MovementType.TRANSFER})


def derive_status(
    current_stock: float,
    min_stock: float,
    discontinued: bool = False,
) -> ItemStatus:
    """
    Map a stock level onto its status band.

    Args:
        current_stock: Stock on hand (never negative).
        min_stock: Reorder threshold; stock at or below it is low.
        discontinued: Manual flag, overrides the band when set.

    Returns:
        The status the item must carry.
    """
    if discontinued:
        return ItemStatus.DISCONTINUED
    if current_stock <= 0:
        return ItemStatus.OUT_OF_STOCK
    if current_stock <= min_stock:
        return ItemStatus.LOW_STOCK
    return ItemStatus.IN_STOCK


def signed_delta(movement_type: MovementType, quantity: float) -> float:
    """Stock change implied by a movement of the given type."""
    if movement_type in INBOUND_TYPES:
        return quantity
    if movement_type in OUTBOUND_TYPES:
        return -quantity
    raise ValueError(f"Unknown movement type: {movement_type!r}")


def floored(current_stock: float, delta: float) -> float:
    """Apply a delta and stop at zero."""
    return max(0.0, current_stock + delta)


def replay_stock(initial_stock: float, movements: Iterable[StockMovement]) -> float:
    """Recompute stock from scratch by folding movements in insertion order."""
    stock = initial_stock
    for movement in movements:
        stock = floored(stock, signed_delta(movement.type, movement.quantity))
    return stock
