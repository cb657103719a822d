"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.

Shape and range checks happen here; cross-field rules such as
min_stock <= max_stock are enforced by the ledger itself.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.core.entities.inventory import MovementType


class RegisterItemRequest(BaseModel):
    """Request to add a new item to the inventory."""

    name: str = Field(..., min_length=1, description="Item name", examples=["Cotton twill, navy"])
    category: str = Field(
        ...,
        min_length=1,
        description="Item category",
        examples=["fabric", "accessories", "equipment", "materials"],
    )
    initial_stock: float = Field(..., ge=0, description="Stock on hand at registration")
    min_stock: float = Field(..., ge=0, description="Reorder threshold")
    max_stock: float = Field(..., ge=0, description="Upper stock threshold")
    unit: str = Field(..., min_length=1, description="Unit of measure", examples=["m", "pcs", "kg"])
    cost_per_unit: float = Field(..., ge=0, description="Cost per unit")
    location: str = Field(..., min_length=1, description="Storage location")
    supplier: str | None = Field(default=None, description="Supplier name")
    barcode: str | None = Field(default=None, description="Barcode or SKU")
    description: str | None = Field(default=None, description="Free-text description")
    created_by: str | None = Field(default=None, description="Acting user")


class ApplyMovementRequest(BaseModel):
    """Request to record a stock movement on an item."""

    type: MovementType = Field(..., description="Movement type")
    quantity: float = Field(..., gt=0, description="Quantity moved, always positive")
    reason: str = Field(..., min_length=1, description="Why the stock moved")
    reference: str | None = Field(default=None, description="Order or document reference")
    date: datetime | None = Field(
        default=None,
        description="Effective date of the movement (defaults to now)",
    )
    created_by: str | None = Field(default=None, description="Acting user")


class SetDiscontinuedRequest(BaseModel):
    """Request to set or clear the discontinued flag."""

    discontinued: bool = Field(..., description="True to discontinue the item")


class UpdateItemDetailsRequest(BaseModel):
    """Partial edit of item metadata and thresholds. Stock is not editable."""

    name: str | None = None
    category: str | None = None
    unit: str | None = None
    location: str | None = None
    supplier: str | None = None
    barcode: str | None = None
    description: str | None = None
    min_stock: float | None = Field(default=None, ge=0)
    max_stock: float | None = Field(default=None, ge=0)
    cost_per_unit: float | None = Field(default=None, ge=0)
