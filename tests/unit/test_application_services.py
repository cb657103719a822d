"""Tests for ledger wiring in the application layer."""

from unittest.mock import AsyncMock

import pytest

from src.application.services import get_stock_ledger, reset_stock_ledger, restore_stock_ledger
from src.config.settings import reset_settings
from src.core.exceptions import ValidationError


@pytest.fixture(autouse=True)
def fresh_singletons():
    reset_settings()
    reset_stock_ledger()
    yield
    reset_stock_ledger()
    reset_settings()


def test_ledger_singleton():
    assert get_stock_ledger() is get_stock_ledger()


def test_ledger_uses_configured_policy(monkeypatch):
    monkeypatch.setenv("LEDGER_UNDERFLOW_POLICY", "reject")
    assert get_stock_ledger().underflow_policy == "reject"


async def test_restore_loads_snapshot(ledger, denim_spec, buttons_spec, clock):
    from src.core.services import StockLedger

    ledger.register_item(denim_spec)
    ledger.register_item(buttons_spec)
    store = AsyncMock()
    store.load.return_value = ledger.snapshot()

    target = StockLedger(clock=clock)
    restored = await restore_stock_ledger(snapshot_store=store, ledger=target)

    assert restored is target
    assert len(target) == 2


async def test_restore_empty_store(ledger):
    store = AsyncMock()
    store.load.return_value = []

    await restore_stock_ledger(snapshot_store=store, ledger=ledger)
    assert len(ledger) == 0


async def test_restore_rejects_duplicate_ids(ledger, denim_spec):
    item = ledger.register_item(denim_spec)
    store = AsyncMock()
    store.load.return_value = [item, item]

    with pytest.raises(ValidationError):
        await restore_stock_ledger(snapshot_store=store, ledger=ledger)
