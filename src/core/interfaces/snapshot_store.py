"""Abstract interface for inventory snapshot persistence."""

from abc import ABC, abstractmethod

from src.core.entities.inventory import InventoryItem


class ISnapshotStore(ABC):
    """
    Persists the whole inventory as one blob.

    A convenience cache, not a transaction log: the application writes the
    full item list after every mutation and reads it back at startup.
    """

    @abstractmethod
    async def load(self) -> list[InventoryItem]:
        """Load the saved items, or an empty list if nothing usable is stored."""
        pass

    @abstractmethod
    async def save(self, items: list[InventoryItem]) -> None:
        """Replace the saved items."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove the saved items."""
        pass
