"""Inventory domain entities."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utcnow() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime | None) -> datetime | None:
    """Normalize a datetime to aware UTC; naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class ItemStatus(str, Enum):
    """Stock status bands, plus the manual discontinued state."""

    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    DISCONTINUED = "discontinued"


class MovementType(str, Enum):
    """Types of stock movements."""

    IN = "in"
    OUT = "out"
    ADJUSTMENT = "adjustment"
    TRANSFER = "transfer"


class StockMovement(BaseModel):
    """A single recorded stock movement. Never edited once appended."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: MovementType
    quantity: float  # always positive, sign implied by type
    reason: str
    reference: str | None = None  # e.g. purchase order or cutting ticket
    date: datetime = Field(default_factory=utcnow)  # effective date
    created_by: str = "system"

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        return as_utc(v)


class InventoryItem(BaseModel):
    """An item on the shop floor with its stock level and movement ledger."""

    id: str
    name: str
    category: str
    unit: str
    location: str
    supplier: str | None = None
    barcode: str | None = None
    description: str | None = None

    initial_stock: float = 0.0
    current_stock: float = 0.0
    min_stock: float = 0.0
    max_stock: float = 0.0
    cost_per_unit: float = 0.0

    status: ItemStatus = ItemStatus.OUT_OF_STOCK
    movements: list[StockMovement] = Field(default_factory=list)

    last_restocked: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    created_by: str = "system"

    @property
    def total_value(self) -> float:
        """Stock value at the current unit cost."""
        return self.current_stock * self.cost_per_unit

    @property
    def is_discontinued(self) -> bool:
        return self.status == ItemStatus.DISCONTINUED


class ItemSpec(BaseModel):
    """Fields supplied when registering a new item.

    Range checks are left to the ledger so that every offending field can
    be reported in one error.
    """

    name: str = ""
    category: str = ""
    initial_stock: float = 0.0
    min_stock: float = 0.0
    max_stock: float = 0.0
    unit: str = ""
    cost_per_unit: float = 0.0
    location: str = ""
    supplier: str | None = None
    barcode: str | None = None
    description: str | None = None


class MovementSpec(BaseModel):
    """Fields supplied when applying a movement to an item."""

    type: MovementType
    quantity: float
    reason: str = ""
    reference: str | None = None
    date: datetime | None = None  # defaults to the ledger clock

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class ItemDetailsUpdate(BaseModel):
    """Partial edit of an item's metadata and thresholds.

    Stock is not editable here; it only changes through movements.
    """

    name: str | None = None
    category: str | None = None
    unit: str | None = None
    location: str | None = None
    supplier: str | None = None
    barcode: str | None = None
    description: str | None = None
    min_stock: float | None = None
    max_stock: float | None = None
    cost_per_unit: float | None = None

    def changes(self) -> dict:
        """Fields explicitly set on this update."""
        return self.model_dump(exclude_unset=True)
