"""Tests for the dashboard query helpers."""

from datetime import UTC, datetime

import pytest

from src.core.entities.inventory import ItemSpec, ItemStatus, MovementSpec, MovementType
from src.core.services.inventory_queries import (
    InventorySummary,
    filter_items,
    movement_feed,
    summarize,
)


@pytest.fixture
def stocked_ledger(ledger, denim_spec, buttons_spec):
    ledger.register_item(denim_spec)
    ledger.register_item(buttons_spec)
    ledger.register_item(
        ItemSpec(
            name="Cotton lining",
            category="fabric",
            unit="m",
            location="Rack A-2",
            supplier="Textile House",
        )
    )
    return ledger


class TestFilterItems:
    def test_no_filters_returns_everything(self, stocked_ledger):
        items = stocked_ledger.list_items()
        assert filter_items(items) == items

    def test_search_is_case_insensitive(self, stocked_ledger):
        names = [i.name for i in filter_items(stocked_ledger.list_items(), search="DENIM")]
        assert names == ["Denim 12oz, indigo"]

    @pytest.mark.parametrize(
        "needle,expected",
        [
            ("dn-12", ["Denim 12oz, indigo"]),
            ("textile", ["Denim 12oz, indigo", "Cotton lining"]),
            ("drawer", ["Metal buttons 17mm"]),
            ("velvet", []),
        ],
    )
    def test_search_matches_barcode_supplier_location(self, stocked_ledger, needle, expected):
        found = filter_items(stocked_ledger.list_items(), search=needle)
        assert [i.name for i in found] == expected

    def test_category(self, stocked_ledger):
        found = filter_items(stocked_ledger.list_items(), category="fabric")
        assert len(found) == 2

    def test_status(self, stocked_ledger):
        found = filter_items(stocked_ledger.list_items(), status=ItemStatus.OUT_OF_STOCK)
        assert [i.name for i in found] == ["Cotton lining"]

    def test_filters_combine(self, stocked_ledger):
        found = filter_items(
            stocked_ledger.list_items(),
            search="textile",
            status=ItemStatus.LOW_STOCK,
        )
        assert [i.name for i in found] == ["Denim 12oz, indigo"]

    def test_blank_search_ignored(self, stocked_ledger):
        assert len(filter_items(stocked_ledger.list_items(), search="   ")) == 3


class TestMovementFeed:
    def test_newest_first_across_items(self, stocked_ledger):
        denim, buttons, _ = stocked_ledger.list_items()
        stocked_ledger.apply_movement(
            denim.id, MovementSpec(type=MovementType.IN, quantity=10, reason="a")
        )
        stocked_ledger.apply_movement(
            buttons.id, MovementSpec(type=MovementType.OUT, quantity=5, reason="b")
        )
        stocked_ledger.apply_movement(
            denim.id,
            MovementSpec(
                type=MovementType.OUT, quantity=1, reason="backdated",
                date=datetime(2020, 1, 1, tzinfo=UTC),
            ),
        )

        feed = movement_feed(stocked_ledger.list_items())

        assert [e.movement.reason for e in feed] == ["b", "a", "backdated"]
        assert feed[0].item_name == "Metal buttons 17mm"
        assert feed[0].unit == "pcs"
        assert feed[0].signed_quantity == -5

    def test_same_date_lists_latest_applied_first(self, ledger, denim_spec):
        item = ledger.register_item(denim_spec)
        same_day = datetime(2024, 5, 1, tzinfo=UTC)
        for reason in ("first", "second"):
            ledger.apply_movement(
                item.id,
                MovementSpec(type=MovementType.IN, quantity=1, reason=reason, date=same_day),
            )

        feed = movement_feed(ledger.list_items())
        assert [e.movement.reason for e in feed] == ["second", "first"]

    def test_naive_and_aware_dates_sort_together(self, ledger, denim_spec):
        item = ledger.register_item(denim_spec)
        ledger.apply_movement(
            item.id, MovementSpec(type=MovementType.IN, quantity=1, reason="now")
        )
        ledger.apply_movement(
            item.id,
            MovementSpec(
                type=MovementType.IN, quantity=1, reason="naive",
                date=datetime(2024, 1, 1, 0, 0),
            ),
        )

        feed = movement_feed(ledger.list_items())
        assert [e.movement.reason for e in feed] == ["now", "naive"]

    def test_limit(self, ledger, buttons_spec):
        item = ledger.register_item(buttons_spec)
        for _ in range(5):
            ledger.apply_movement(
                item.id, MovementSpec(type=MovementType.OUT, quantity=1, reason="pick")
            )
        assert len(movement_feed(ledger.list_items(), limit=3)) == 3

    def test_empty(self):
        assert movement_feed([]) == []


class TestSummarize:
    def test_counts_and_value(self, stocked_ledger):
        summary = summarize(stocked_ledger.list_items())

        assert summary.total_items == 3
        assert summary.out_of_stock_count == 1
        # low stock includes out of stock items
        assert summary.low_stock_count == 2
        assert summary.total_value == pytest.approx(15 * 450.0 + 500 * 3.5)
        assert summary.by_category == {"accessories": 1, "fabric": 2}
        assert summary.by_status == {
            "in_stock": 1,
            "low_stock": 1,
            "out_of_stock": 1,
            "discontinued": 0,
        }

    def test_empty(self):
        assert summarize([]) == InventorySummary(
            by_status={status.value: 0 for status in ItemStatus}
        )
