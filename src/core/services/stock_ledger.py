"""
Stock Ledger Service.

Owns the inventory items and their append-only movement ledgers. Every
public operation either completes with all invariants holding or raises
without touching state:

- current_stock never drops below zero
- status always matches current_stock against min_stock (unless discontinued)
- movements are only ever appended, in the order they were applied

Callers receive deep copies, so nothing outside the ledger can mutate
its items.
"""

from __future__ import annotations

import math
import threading
import uuid
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime
from typing import TYPE_CHECKING, Literal

from src.config import get_logger
from src.core.entities.inventory import (
    InventoryItem,
    ItemDetailsUpdate,
    ItemSpec,
    ItemStatus,
    MovementSpec,
    MovementType,
    StockMovement,
    utcnow,
)
from src.core.exceptions import (
    ConfigurationError,
    InsufficientStockError,
    ItemNotFoundError,
    ValidationError,
)
from src.core.services.stock_status import (
    derive_status,
    floored,
    replay_stock,
    signed_delta,
)

if TYPE_CHECKING:
    from src.config.settings import LedgerSettings

logger = get_logger(__name__)

UnderflowPolicy = Literal["floor", "reject"]
UNDERFLOW_POLICIES: tuple[str, ...] = ("floor", "reject")

REQUIRED_TEXT_FIELDS = ("name", "category", "unit", "location")
LOW_STOCK_STATUSES = frozenset({ItemStatus.LOW_STOCK, ItemStatus.OUT_OF_STOCK})


def _new_id() -> str:
    return uuid.uuid4().hex


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _check_amount(
    errors: dict[str, str], field: str, value: float | None, positive: bool = False
) -> None:
    """Record a problem if value is not a finite, non-negative (or positive) number."""
    if value is None or not math.isfinite(value):
        errors[field] = "must be a finite number"
    elif positive and value <= 0:
        errors[field] = "must be greater than zero"
    elif value < 0:
        errors[field] = "must not be negative"


def _check_thresholds(
    errors: dict[str, str], min_stock: float, max_stock: float, cost_per_unit: float
) -> None:
    _check_amount(errors, "min_stock", min_stock)
    _check_amount(errors, "max_stock", max_stock)
    _check_amount(errors, "cost_per_unit", cost_per_unit)
    if "min_stock" not in errors and "max_stock" not in errors and min_stock > max_stock:
        errors["min_stock"] = f"must not exceed max_stock ({max_stock})"


class MovementHistory:
    """
    Restartable view of one item's movements, oldest first.

    Captured at call time: later movements on the item do not show up in
    an existing history object.
    """

    def __init__(self, item_id: str, movements: Iterable[StockMovement]) -> None:
        self.item_id = item_id
        self._movements = tuple(movements)

    def __iter__(self) -> Iterator[StockMovement]:
        yield from self._movements

    def __len__(self) -> int:
        return len(self._movements)

    def __repr__(self) -> str:
        return f"MovementHistory(item_id={self.item_id!r}, movements={len(self)})"


class StockLedger:
    """
    In-memory ledger of inventory items and their stock movements.

    A single re-entrant lock guards all state, so the read/clamp/append
    sequence of a movement is one critical section even when the ledger
    is shared between threads.
    """

    def __init__(
        self,
        underflow_policy: UnderflowPolicy = "floor",
        default_actor: str = "system",
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        if underflow_policy not in UNDERFLOW_POLICIES:
            raise ConfigurationError(
                f"Unknown underflow policy: {underflow_policy}",
                code="INVALID_UNDERFLOW_POLICY",
                details={"allowed": list(UNDERFLOW_POLICIES)},
            )
        self.underflow_policy = underflow_policy
        self.default_actor = default_actor
        self._clock = clock or utcnow
        self._id_factory = id_factory or _new_id
        self._items: dict[str, InventoryItem] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: LedgerSettings, **kwargs) -> StockLedger:
        """Build a ledger using the configured policy and default actor."""
        return cls(
            underflow_policy=settings.underflow_policy,
            default_actor=settings.default_actor,
            **kwargs,
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        # An empty ledger is still a ledger
        return True

    def __contains__(self, item_id: object) -> bool:
        with self._lock:
            return item_id in self._items

    # Lifecycle

    def reset(self) -> None:
        """Drop every item."""
        with self._lock:
            self._items.clear()
        logger.info("stock_ledger_reset")

    def load(self, items: Iterable[InventoryItem]) -> int:
        """
        Replace the ledger contents with previously persisted items.

        Stored status is not trusted: it is derived again from stock and
        thresholds, keeping only the discontinued flag. Negative stock from
        older data is floored at zero.

        Returns:
            Number of items loaded.

        Raises:
            ValidationError: If two items share an id or an item carries
                negative or inverted thresholds. Nothing is replaced.
        """
        restored: dict[str, InventoryItem] = {}
        for item in items:
            if item.id in restored:
                raise ValidationError("id", "duplicate item id in snapshot", item.id)
            errors: dict[str, str] = {}
            _check_thresholds(errors, item.min_stock, item.max_stock, item.cost_per_unit)
            if errors:
                logger.error("snapshot_invalid_thresholds", item_id=item.id, errors=errors)
                error = ValidationError.from_errors(errors)
                error.details["item_id"] = item.id
                raise error
            stock = item.current_stock
            if stock < 0:
                logger.warning(
                    "snapshot_negative_stock_floored",
                    item_id=item.id,
                    current_stock=stock,
                )
                stock = 0.0
            restored[item.id] = item.model_copy(
                deep=True,
                update={
                    "current_stock": stock,
                    "status": derive_status(stock, item.min_stock, item.is_discontinued),
                },
            )

        with self._lock:
            self._items = restored
        logger.info("stock_ledger_loaded", items=len(restored))
        return len(restored)

    def snapshot(self) -> list[InventoryItem]:
        """Deep copies of all items, in registration order."""
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items.values()]

    # Commands

    def register_item(self, spec: ItemSpec, created_by: str | None = None) -> InventoryItem:
        """
        Register a new item with its opening stock.

        Raises:
            ValidationError: Naming every field that failed, nothing is created.
        """
        errors: dict[str, str] = {}
        for field in REQUIRED_TEXT_FIELDS:
            if _is_blank(getattr(spec, field)):
                errors[field] = "is required"
        _check_amount(errors, "initial_stock", spec.initial_stock)
        _check_thresholds(errors, spec.min_stock, spec.max_stock, spec.cost_per_unit)
        if errors:
            raise ValidationError.from_errors(errors)

        now = self._clock()
        with self._lock:
            item_id = self._unused_id()
            item = InventoryItem(
                id=item_id,
                name=spec.name.strip(),
                category=spec.category.strip(),
                unit=spec.unit.strip(),
                location=spec.location.strip(),
                supplier=spec.supplier,
                barcode=spec.barcode,
                description=spec.description,
                initial_stock=spec.initial_stock,
                current_stock=spec.initial_stock,
                min_stock=spec.min_stock,
                max_stock=spec.max_stock,
                cost_per_unit=spec.cost_per_unit,
                status=derive_status(spec.initial_stock, spec.min_stock),
                movements=[],
                last_restocked=now,
                updated_at=now,
                created_by=created_by or self.default_actor,
            )
            self._items[item_id] = item

        logger.info(
            "inventory_item_registered",
            item_id=item.id,
            name=item.name,
            current_stock=item.current_stock,
            status=item.status.value,
        )
        return item.model_copy(deep=True)

    def apply_movement(
        self,
        item_id: str,
        spec: MovementSpec,
        created_by: str | None = None,
    ) -> InventoryItem:
        """
        Apply a stock movement and append it to the item's ledger.

        `in` and `adjustment` add the quantity, `out` and `transfer`
        subtract it. When a subtraction would go below zero the ledger
        policy decides: "floor" records the full movement and stops stock
        at zero, "reject" raises and records nothing.

        Raises:
            ValidationError: Non-positive quantity or blank reason.
            ItemNotFoundError: Unknown item id.
            InsufficientStockError: Underflow under the "reject" policy.
        """
        errors: dict[str, str] = {}
        _check_amount(errors, "quantity", spec.quantity, positive=True)
        if _is_blank(spec.reason):
            errors["reason"] = "is required"
        if errors:
            raise ValidationError.from_errors(errors)

        with self._lock:
            item = self._require(item_id)
            delta = signed_delta(spec.type, spec.quantity)

            if item.current_stock + delta < 0:
                if self.underflow_policy == "reject":
                    raise InsufficientStockError(
                        item_id=item_id,
                        requested=spec.quantity,
                        available=item.current_stock,
                    )
                logger.warning(
                    "stock_underflow_floored",
                    item_id=item_id,
                    requested=spec.quantity,
                    available=item.current_stock,
                )

            now = self._clock()
            movement = StockMovement(
                id=self._id_factory(),
                type=spec.type,
                quantity=spec.quantity,
                reason=spec.reason.strip(),
                reference=spec.reference,
                date=spec.date or now,
                created_by=created_by or self.default_actor,
            )
            new_stock = floored(item.current_stock, delta)
            changes = {
                "current_stock": new_stock,
                "status": derive_status(new_stock, item.min_stock, item.is_discontinued),
                "movements": [*item.movements, movement],
                "updated_at": now,
            }
            if spec.type == MovementType.IN:
                changes["last_restocked"] = now
            updated = item.model_copy(update=changes)
            self._items[item_id] = updated

        logger.info(
            "stock_movement_applied",
            item_id=item_id,
            movement_id=movement.id,
            type=movement.type.value,
            quantity=movement.quantity,
            current_stock=updated.current_stock,
            status=updated.status.value,
        )
        return updated.model_copy(deep=True)

    def set_discontinued(self, item_id: str, discontinued: bool) -> InventoryItem:
        """
        Set or clear the sticky discontinued flag.

        Clearing it derives the status from current stock again.

        Raises:
            ItemNotFoundError: Unknown item id.
        """
        with self._lock:
            item = self._require(item_id)
            updated = item.model_copy(
                update={
                    "status": derive_status(item.current_stock, item.min_stock, discontinued),
                    "updated_at": self._clock(),
                }
            )
            self._items[item_id] = updated

        logger.info(
            "inventory_item_discontinued" if discontinued else "inventory_item_reinstated",
            item_id=item_id,
            status=updated.status.value,
        )
        return updated.model_copy(deep=True)

    def update_item_details(self, item_id: str, update: ItemDetailsUpdate) -> InventoryItem:
        """
        Edit descriptive metadata and thresholds of an item.

        Stock and movements are untouched. Status is derived again because
        a new min_stock can move the item between bands.

        Raises:
            ItemNotFoundError: Unknown item id.
            ValidationError: Blank required field or inconsistent thresholds.
        """
        changes = update.changes()

        with self._lock:
            item = self._require(item_id)
            merged = item.model_dump(include=set(ItemDetailsUpdate.model_fields))
            merged.update(changes)

            errors: dict[str, str] = {}
            for field in REQUIRED_TEXT_FIELDS:
                if _is_blank(merged[field]):
                    errors[field] = "is required"
            _check_thresholds(
                errors, merged["min_stock"], merged["max_stock"], merged["cost_per_unit"]
            )
            if errors:
                raise ValidationError.from_errors(errors)

            for field in REQUIRED_TEXT_FIELDS:
                merged[field] = merged[field].strip()
            merged["status"] = derive_status(
                item.current_stock, merged["min_stock"], item.is_discontinued
            )
            merged["updated_at"] = self._clock()
            updated = item.model_copy(update=merged)
            self._items[item_id] = updated

        logger.info(
            "inventory_item_updated",
            item_id=item_id,
            fields=sorted(changes),
            status=updated.status.value,
        )
        return updated.model_copy(deep=True)

    # Queries

    def get_item(self, item_id: str) -> InventoryItem:
        """
        Raises:
            ItemNotFoundError: Unknown item id.
        """
        with self._lock:
            return self._require(item_id).model_copy(deep=True)

    def list_items(self) -> list[InventoryItem]:
        return self.snapshot()

    def query_low_stock(self) -> list[InventoryItem]:
        """Items that are low or out of stock, emptiest first, ties by name."""
        with self._lock:
            flagged = [
                item.model_copy(deep=True)
                for item in self._items.values()
                if item.status in LOW_STOCK_STATUSES
            ]
        return sorted(flagged, key=lambda item: (item.current_stock, item.name))

    def movement_history(self, item_id: str) -> MovementHistory:
        """
        Movements of one item in the order they were applied.

        Raises:
            ItemNotFoundError: Unknown item id.
        """
        with self._lock:
            return MovementHistory(item_id, self._require(item_id).movements)

    def verify_item(self, item_id: str) -> bool:
        """Check that replaying the movement ledger reproduces current stock."""
        with self._lock:
            item = self._require(item_id)
            replayed = replay_stock(item.initial_stock, item.movements)

        consistent = math.isclose(replayed, item.current_stock, abs_tol=1e-9)
        if not consistent:
            logger.error(
                "stock_ledger_inconsistent",
                item_id=item_id,
                current_stock=item.current_stock,
                replayed_stock=replayed,
            )
        return consistent

    # Internals

    def _require(self, item_id: str) -> InventoryItem:
        item = self._items.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def _unused_id(self) -> str:
        item_id = self._id_factory()
        while item_id in self._items:
            item_id = self._id_factory()
        return item_id
