"""Data Transfer Objects for API contracts."""

from src.application.dto.requests import (
    ApplyMovementRequest,
    RegisterItemRequest,
    SetDiscontinuedRequest,
    UpdateItemDetailsRequest,
)
from src.application.dto.responses import (
    ErrorResponse,
    HealthResponse,
    InventoryItemResponse,
    InventoryListResponse,
    InventorySummaryResponse,
    MovementFeedEntryResponse,
    MovementFeedResponse,
    MovementHistoryResponse,
    ProviderHealthResponse,
    StockMovementResponse,
)

__all__ = [
    # Requests
    "RegisterItemRequest",
    "ApplyMovementRequest",
    "SetDiscontinuedRequest",
    "UpdateItemDetailsRequest",
    # Responses
    "ErrorResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "InventoryItemResponse",
    "InventoryListResponse",
    "StockMovementResponse",
    "MovementHistoryResponse",
    "MovementFeedEntryResponse",
    "MovementFeedResponse",
    "InventorySummaryResponse",
]
