"""Inventory management endpoints."""

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import (
    get_apply_movement_use_case,
    get_ledger,
    get_register_item_use_case,
    get_set_discontinued_use_case,
    get_update_item_details_use_case,
)
from src.application.dto.requests import (
    ApplyMovementRequest,
    RegisterItemRequest,
    SetDiscontinuedRequest,
    UpdateItemDetailsRequest,
)
from src.application.dto.responses import (
    ErrorResponse,
    InventoryItemResponse,
    InventoryListResponse,
    InventorySummaryResponse,
    MovementFeedEntryResponse,
    MovementFeedResponse,
    MovementHistoryResponse,
    StockMovementResponse,
)
from src.application.use_cases import (
    ApplyMovementUseCase,
    RegisterItemUseCase,
    SetDiscontinuedUseCase,
    UpdateItemDetailsUseCase,
)
from src.core.entities.inventory import ItemStatus
from src.core.services import StockLedger, filter_items, movement_feed, summarize

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.post(
    "/items",
    response_model=InventoryItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def register_item(
    request: RegisterItemRequest,
    use_case: RegisterItemUseCase = Depends(get_register_item_use_case),
) -> InventoryItemResponse:
    """Register a new inventory item with its opening stock."""
    item = await use_case.execute(request)
    return use_case.to_response(item)


@router.get("/items", response_model=InventoryListResponse)
async def list_items(
    search: str | None = Query(default=None, description="Match name, barcode, supplier or location"),
    category: str | None = None,
    item_status: ItemStatus | None = Query(default=None, alias="status"),
    ledger: StockLedger = Depends(get_ledger),
) -> InventoryListResponse:
    """List inventory items, optionally filtered."""
    items = filter_items(ledger.list_items(), search=search, category=category, status=item_status)
    return InventoryListResponse(
        items=[InventoryItemResponse.from_entity(item) for item in items],
        total=len(items),
    )


@router.get(
    "/items/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_item(
    item_id: str,
    ledger: StockLedger = Depends(get_ledger),
) -> InventoryItemResponse:
    """Get one inventory item."""
    return InventoryItemResponse.from_entity(ledger.get_item(item_id))


@router.patch(
    "/items/{item_id}",
    response_model=InventoryItemResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_item_details(
    item_id: str,
    request: UpdateItemDetailsRequest,
    use_case: UpdateItemDetailsUseCase = Depends(get_update_item_details_use_case),
) -> InventoryItemResponse:
    """Edit item metadata and thresholds. Stock only changes through movements."""
    item = await use_case.execute(item_id, request)
    return use_case.to_response(item)


@router.post(
    "/items/{item_id}/movements",
    response_model=InventoryItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def apply_movement(
    item_id: str,
    request: ApplyMovementRequest,
    use_case: ApplyMovementUseCase = Depends(get_apply_movement_use_case),
) -> InventoryItemResponse:
    """Record a stock movement and return the updated item."""
    item = await use_case.execute(item_id, request)
    return use_case.to_response(item)


@router.get(
    "/items/{item_id}/movements",
    response_model=MovementHistoryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_movement_history(
    item_id: str,
    ledger: StockLedger = Depends(get_ledger),
) -> MovementHistoryResponse:
    """Get the movement ledger of an item, oldest first."""
    history = ledger.movement_history(item_id)
    return MovementHistoryResponse(
        item_id=item_id,
        movements=[StockMovementResponse.from_entity(m) for m in history],
        total=len(history),
    )


@router.put(
    "/items/{item_id}/discontinued",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def set_discontinued(
    item_id: str,
    request: SetDiscontinuedRequest,
    use_case: SetDiscontinuedUseCase = Depends(get_set_discontinued_use_case),
) -> InventoryItemResponse:
    """Discontinue an item or bring it back."""
    item = await use_case.execute(item_id, request)
    return use_case.to_response(item)


@router.get("/alerts", response_model=InventoryListResponse)
async def get_low_stock_alerts(
    ledger: StockLedger = Depends(get_ledger),
) -> InventoryListResponse:
    """Items that are low or out of stock, emptiest first."""
    items = ledger.query_low_stock()
    return InventoryListResponse(
        items=[InventoryItemResponse.from_entity(item) for item in items],
        total=len(items),
    )


@router.get("/movements", response_model=MovementFeedResponse)
async def get_movement_feed(
    limit: int | None = Query(default=None, ge=1, le=1000),
    ledger: StockLedger = Depends(get_ledger),
) -> MovementFeedResponse:
    """Movements across all items, newest effective date first."""
    entries = movement_feed(ledger.list_items(), limit=limit)
    return MovementFeedResponse(
        entries=[MovementFeedEntryResponse.from_entry(entry) for entry in entries],
        total=len(entries),
    )


@router.get("/summary", response_model=InventorySummaryResponse)
async def get_summary(
    ledger: StockLedger = Depends(get_ledger),
) -> InventorySummaryResponse:
    """Headline numbers for the inventory dashboard."""
    return InventorySummaryResponse.from_summary(summarize(ledger.list_items()))
