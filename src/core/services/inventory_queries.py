"""
Read-side helpers for the dashboard views.

All functions take item snapshots and never touch the ledger itself.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from src.core.entities.inventory import (
    InventoryItem,
    ItemStatus,
    StockMovement,
)
from src.core.services.stock_status import signed_delta

SEARCHABLE_FIELDS = ("name", "barcode", "supplier", "location")


@dataclass(frozen=True)
class MovementFeedEntry:
    """A movement flattened together with the item it belongs to."""

    item_id: str
    item_name: str
    unit: str
    movement: StockMovement

    @property
    def date(self) -> datetime:
        return self.movement.date

    @property
    def signed_quantity(self) -> float:
        return signed_delta(self.movement.type, self.movement.quantity)


@dataclass
class InventorySummary:
    """Headline numbers for the inventory dashboard."""

    total_items: int = 0
    low_stock_count: int = 0
    out_of_stock_count: int = 0
    total_value: float = 0.0
    by_status: dict[str, int] = field(default_factory=dict)
    by_category: dict[str, int] = field(default_factory=dict)


def _matches_search(item: InventoryItem, needle: str) -> bool:
    for name in SEARCHABLE_FIELDS:
        value = getattr(item, name)
        if value and needle in value.lower():
            return True
    return False


def filter_items(
    items: Iterable[InventoryItem],
    search: str | None = None,
    category: str | None = None,
    status: ItemStatus | None = None,
) -> list[InventoryItem]:
    """
    Narrow a list of items the way the inventory table does.

    Args:
        items: Item snapshots.
        search: Case-insensitive substring matched against name, barcode,
            supplier and location.
        category: Exact category match.
        status: Exact status match.

    Returns:
        Matching items in their original order.
    """
    needle = search.strip().lower() if search else ""
    result = []
    for item in items:
        if category and item.category != category:
            continue
        if status is not None and item.status != status:
            continue
        if needle and not _matches_search(item, needle):
            continue
        result.append(item)
    return result


def movement_feed(
    items: Iterable[InventoryItem], limit: int | None = None
) -> list[MovementFeedEntry]:
    """All movements across items, newest effective date first."""
    entries = [
        MovementFeedEntry(
            item_id=item.id,
            item_name=item.name,
            unit=item.unit,
            movement=movement,
        )
        for item in items
        for movement in item.movements
    ]
    # Ties on date list the most recently applied movement first
    entries.reverse()
    entries.sort(key=lambda entry: entry.date, reverse=True)
    if limit is not None:
        return entries[:limit]
    return entries


def summarize(items: Iterable[InventoryItem]) -> InventorySummary:
    """Count items per status and category and total the stock value."""
    summary = InventorySummary()
    statuses: Counter[str] = Counter()
    categories: Counter[str] = Counter()

    for item in items:
        summary.total_items += 1
        summary.total_value += item.total_value
        statuses[item.status.value] += 1
        categories[item.category] += 1

    summary.out_of_stock_count = statuses[ItemStatus.OUT_OF_STOCK.value]
    summary.low_stock_count = (
        statuses[ItemStatus.LOW_STOCK.value] + summary.out_of_stock_count
    )
    summary.by_status = {status.value: statuses[status.value] for status in ItemStatus}
    summary.by_category = dict(sorted(categories.items()))
    return summary
