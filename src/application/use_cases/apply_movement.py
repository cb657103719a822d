"""Apply Movement Use Case: record an in/out/adjustment/transfer on an item."""

from src.application.dto.requests import ApplyMovementRequest
from src.application.use_cases.base import LedgerUseCase
from src.config import get_logger, log_context
from src.core.entities.inventory import InventoryItem, MovementSpec

logger = get_logger(__name__)


class ApplyMovementUseCase(LedgerUseCase):
    """Apply a stock movement and persist the snapshot."""

    async def execute(self, item_id: str, request: ApplyMovementRequest) -> InventoryItem:
        """Execute apply movement use case."""
        with log_context(item_id=item_id):
            logger.info(
                "apply_movement_started",
                type=request.type.value,
                quantity=request.quantity,
            )

            spec = MovementSpec(
                type=request.type,
                quantity=request.quantity,
                reason=request.reason,
                reference=request.reference,
                date=request.date,
            )
            item = self._get_ledger().apply_movement(
                item_id, spec, created_by=request.created_by
            )
            await self._persist()

            logger.info(
                "apply_movement_complete",
                current_stock=item.current_stock,
                status=item.status.value,
            )
            return item
