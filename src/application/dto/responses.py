"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.core.entities.inventory import InventoryItem, StockMovement
from src.core.services.inventory_queries import InventorySummary, MovementFeedEntry


class ProviderHealthResponse(BaseModel):
    """Dependency health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    items: int | None = None
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. ITEM_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    invalid_fields: list[str] | None = Field(default=None, description="Offending input fields")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)


# --- Inventory ---


class StockMovementResponse(BaseModel):
    """Stock movement response DTO."""

    id: str
    type: str
    quantity: float
    reason: str
    reference: str | None = None
    date: datetime
    created_by: str

    @classmethod
    def from_entity(cls, movement: StockMovement) -> "StockMovementResponse":
        return cls(
            id=movement.id,
            type=movement.type.value,
            quantity=movement.quantity,
            reason=movement.reason,
            reference=movement.reference,
            date=movement.date,
            created_by=movement.created_by,
        )


class InventoryItemResponse(BaseModel):
    """Inventory item response DTO."""

    id: str
    name: str
    category: str
    unit: str
    location: str
    supplier: str | None = None
    barcode: str | None = None
    description: str | None = None
    initial_stock: float
    current_stock: float
    min_stock: float
    max_stock: float
    cost_per_unit: float
    total_value: float
    status: str
    movements: list[StockMovementResponse] = Field(default_factory=list)
    last_restocked: datetime
    updated_at: datetime
    created_by: str

    @classmethod
    def from_entity(cls, item: InventoryItem) -> "InventoryItemResponse":
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            unit=item.unit,
            location=item.location,
            supplier=item.supplier,
            barcode=item.barcode,
            description=item.description,
            initial_stock=item.initial_stock,
            current_stock=item.current_stock,
            min_stock=item.min_stock,
            max_stock=item.max_stock,
            cost_per_unit=item.cost_per_unit,
            total_value=item.total_value,
            status=item.status.value,
            movements=[StockMovementResponse.from_entity(m) for m in item.movements],
            last_restocked=item.last_restocked,
            updated_at=item.updated_at,
            created_by=item.created_by,
        )


class InventoryListResponse(BaseModel):
    """List of inventory items."""

    items: list[InventoryItemResponse]
    total: int


class MovementHistoryResponse(BaseModel):
    """Movement ledger of one item, oldest first."""

    item_id: str
    movements: list[StockMovementResponse]
    total: int


class MovementFeedEntryResponse(BaseModel):
    """A movement listed together with its item."""

    item_id: str
    item_name: str
    unit: str
    signed_quantity: float
    movement: StockMovementResponse

    @classmethod
    def from_entry(cls, entry: MovementFeedEntry) -> "MovementFeedEntryResponse":
        return cls(
            item_id=entry.item_id,
            item_name=entry.item_name,
            unit=entry.unit,
            signed_quantity=entry.signed_quantity,
            movement=StockMovementResponse.from_entity(entry.movement),
        )


class MovementFeedResponse(BaseModel):
    """Movements across all items, newest first."""

    entries: list[MovementFeedEntryResponse]
    total: int


class InventorySummaryResponse(BaseModel):
    """Headline inventory numbers."""

    total_items: int
    low_stock_count: int
    out_of_stock_count: int
    total_value: float
    by_status: dict[str, int]
    by_category: dict[str, int]

    @classmethod
    def from_summary(cls, summary: InventorySummary) -> "InventorySummaryResponse":
        return cls(
            total_items=summary.total_items,
            low_stock_count=summary.low_stock_count,
            out_of_stock_count=summary.out_of_stock_count,
            total_value=round(summary.total_value, 2),
            by_status=summary.by_status,
            by_category=summary.by_category,
        )
