"""Register Item Use Case: add a new item with its opening stock."""

from src.application.dto.requests import RegisterItemRequest
from src.application.use_cases.base import LedgerUseCase
from src.config import get_logger
from src.core.entities.inventory import InventoryItem, ItemSpec

logger = get_logger(__name__)


class RegisterItemUseCase(LedgerUseCase):
    """Register an inventory item and persist the snapshot."""

    async def execute(self, request: RegisterItemRequest) -> InventoryItem:
        """Execute register item use case."""
        logger.info(
            "register_item_started",
            name=request.name,
            initial_stock=request.initial_stock,
        )

        spec = ItemSpec(**request.model_dump(exclude={"created_by"}))
        item = self._get_ledger().register_item(spec, created_by=request.created_by)
        await self._persist()

        logger.info("register_item_complete", item_id=item.id, status=item.status.value)
        return item
