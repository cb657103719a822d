"""End-to-end: use cases write through SQLite and a fresh ledger restores the state."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import src.infrastructure.storage.sqlite.connection as conn_module
from src.application.dto.requests import (
    ApplyMovementRequest,
    RegisterItemRequest,
    SetDiscontinuedRequest,
)
from src.application.services import restore_stock_ledger
from src.application.use_cases import (
    ApplyMovementUseCase,
    RegisterItemUseCase,
    SetDiscontinuedUseCase,
)
from src.core.entities.inventory import ItemStatus, MovementType
from src.core.services import StockLedger
from src.infrastructure.storage.sqlite import SQLiteSnapshotStore, close_pool


@pytest.fixture
async def sqlite_store(tmp_path: Path):
    mock_settings = MagicMock()
    mock_settings.storage.db_path = tmp_path / "flow.db"
    mock_settings.storage.pool_size = 2
    mock_settings.storage.busy_timeout = 5000

    await close_pool()
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        yield SQLiteSnapshotStore(key="inventory")
        await close_pool()


async def test_state_survives_restart(sqlite_store):
    ledger = StockLedger()
    register = RegisterItemUseCase(ledger=ledger, snapshot_store=sqlite_store)
    move = ApplyMovementUseCase(ledger=ledger, snapshot_store=sqlite_store)
    discontinue = SetDiscontinuedUseCase(ledger=ledger, snapshot_store=sqlite_store)

    denim = await register.execute(
        RegisterItemRequest(
            name="Denim 12oz", category="fabric", initial_stock=15, min_stock=20,
            max_stock=100, unit="m", cost_per_unit=450, location="Rack A-1",
        )
    )
    await move.execute(
        denim.id, ApplyMovementRequest(type=MovementType.IN, quantity=50, reason="Delivery")
    )
    await move.execute(
        denim.id, ApplyMovementRequest(type=MovementType.OUT, quantity=80, reason="Big order")
    )
    await discontinue.execute(denim.id, SetDiscontinuedRequest(discontinued=True))

    restarted = await restore_stock_ledger(snapshot_store=sqlite_store, ledger=StockLedger())
    item = restarted.get_item(denim.id)

    assert item.current_stock == 0
    assert item.status == ItemStatus.DISCONTINUED
    assert [m.type for m in item.movements] == [MovementType.IN, MovementType.OUT]
    assert restarted.verify_item(denim.id)
