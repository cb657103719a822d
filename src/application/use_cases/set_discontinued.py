"""Set Discontinued Use Case: toggle the sticky discontinued status."""

from src.application.dto.requests import SetDiscontinuedRequest
from src.application.use_cases.base import LedgerUseCase
from src.core.entities.inventory import InventoryItem


class SetDiscontinuedUseCase(LedgerUseCase):
    """Discontinue or reinstate an item and persist the snapshot."""

    async def execute(self, item_id: str, request: SetDiscontinuedRequest) -> InventoryItem:
        item = self._get_ledger().set_discontinued(item_id, request.discontinued)
        await self._persist()
        return item
