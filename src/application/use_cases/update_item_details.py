"""Update Item Details Use Case: edit metadata and thresholds, never stock."""

from src.application.dto.requests import UpdateItemDetailsRequest
from src.application.use_cases.base import LedgerUseCase
from src.config import get_logger
from src.core.entities.inventory import InventoryItem, ItemDetailsUpdate

logger = get_logger(__name__)


class UpdateItemDetailsUseCase(LedgerUseCase):
    """Edit an item's descriptive fields and persist the snapshot."""

    async def execute(self, item_id: str, request: UpdateItemDetailsRequest) -> InventoryItem:
        """Execute update item details use case."""
        changes = request.model_dump(exclude_unset=True)
        logger.info("update_item_started", item_id=item_id, fields=sorted(changes))

        item = self._get_ledger().update_item_details(item_id, ItemDetailsUpdate(**changes))
        await self._persist()
        return item
