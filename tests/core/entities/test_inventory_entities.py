"""Unit tests for inventory entities."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.core.entities.inventory import (
    InventoryItem,
    ItemDetailsUpdate,
    ItemStatus,
    MovementSpec,
    MovementType,
    StockMovement,
)


class TestStockMovement:
    def test_is_frozen(self):
        movement = StockMovement(id="m1", type=MovementType.IN, quantity=5, reason="delivery")
        with pytest.raises(PydanticValidationError):
            movement.quantity = 10

    def test_defaults(self):
        movement = StockMovement(id="m1", type="out", quantity=5, reason="cut")
        assert movement.type == MovementType.OUT
        assert movement.reference is None
        assert movement.created_by == "system"
        assert movement.date.tzinfo is not None

    def test_naive_date_taken_as_utc(self):
        movement = StockMovement(
            id="m1", type="in", quantity=1, reason="x", date=datetime(2024, 1, 1, 12, 0)
        )
        assert movement.date == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def test_offset_date_converted_to_utc(self):
        spec = MovementSpec(
            type="in", quantity=1, reason="x",
            date=datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2))),
        )
        assert spec.date == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        assert spec.date.utcoffset() == timedelta(0)


class TestInventoryItem:
    def test_total_value(self):
        item = InventoryItem(
            id="i1", name="Denim", category="fabric", unit="m", location="A-1",
            current_stock=12.5, cost_per_unit=4.0,
        )
        assert item.total_value == 50.0

    def test_is_discontinued(self):
        item = InventoryItem(
            id="i1", name="Denim", category="fabric", unit="m", location="A-1",
            status=ItemStatus.DISCONTINUED,
        )
        assert item.is_discontinued

    def test_status_values(self):
        assert [s.value for s in ItemStatus] == [
            "in_stock", "low_stock", "out_of_stock", "discontinued",
        ]


class TestItemDetailsUpdate:
    def test_changes_only_lists_sent_fields(self):
        update = ItemDetailsUpdate(name="Denim", supplier=None)
        assert update.changes() == {"name": "Denim", "supplier": None}

    def test_empty(self):
        assert ItemDetailsUpdate().changes() == {}
