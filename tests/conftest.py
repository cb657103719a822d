"""Pytest configuration and fixtures."""

import itertools
from collections.abc import AsyncGenerator, Callable
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import TypeAdapter

from src.core.entities.inventory import InventoryItem, ItemSpec
from src.core.interfaces.snapshot_store import ISnapshotStore
from src.core.services.stock_ledger import StockLedger

_items_adapter = TypeAdapter(list[InventoryItem])


class TickingClock:
    """Deterministic clock that advances one minute per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 3, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.now += timedelta(minutes=1)
        return self.now


class InMemorySnapshotStore(ISnapshotStore):
    """Snapshot store that keeps the serialized blob in memory."""

    def __init__(self):
        self.blob: str | None = None
        self.saves = 0

    async def load(self) -> list[InventoryItem]:
        if self.blob is None:
            return []
        return _items_adapter.validate_json(self.blob)

    async def save(self, items: list[InventoryItem]) -> None:
        self.blob = _items_adapter.dump_json(items).decode()
        self.saves += 1

    async def clear(self) -> None:
        self.blob = None


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def id_factory() -> Callable[[], str]:
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def ledger(clock, id_factory) -> StockLedger:
    """Ledger using the default floor policy."""
    return StockLedger(clock=clock, id_factory=id_factory)


@pytest.fixture
def strict_ledger(clock, id_factory) -> StockLedger:
    """Ledger that rejects over-withdrawals."""
    return StockLedger(underflow_policy="reject", clock=clock, id_factory=id_factory)


@pytest.fixture
def memory_store() -> InMemorySnapshotStore:
    return InMemorySnapshotStore()


@pytest.fixture
def denim_spec() -> ItemSpec:
    """Denim roll that starts below its reorder threshold."""
    return ItemSpec(
        name="Denim 12oz, indigo",
        category="fabric",
        initial_stock=15,
        min_stock=20,
        max_stock=100,
        unit="m",
        cost_per_unit=450.0,
        location="Rack A-1",
        supplier="Textile House",
        barcode="DN-12-IND",
    )


@pytest.fixture
def buttons_spec() -> ItemSpec:
    return ItemSpec(
        name="Metal buttons 17mm",
        category="accessories",
        initial_stock=500,
        min_stock=100,
        max_stock=2000,
        unit="pcs",
        cost_per_unit=3.5,
        location="Drawer B-4",
    )


@pytest.fixture
async def api_client(ledger, memory_store) -> AsyncGenerator[AsyncClient, None]:
    """Async client against the app with an isolated ledger and in-memory store."""
    from src.api.dependencies import get_ledger, get_snap_store
    from src.api.main import app

    app.dependency_overrides[get_ledger] = lambda: ledger
    app.dependency_overrides[get_snap_store] = lambda: memory_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_ledger, None)
    app.dependency_overrides.pop(get_snap_store, None)
