"""
Domain exceptions for the inventory ledger.

Every error is recoverable at the call site: callers surface the message
to the user and let them correct the input.
"""

from typing import Any


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(LedgerError):
    """Input validation failed for one or more fields."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "fields": [field],
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )

    @classmethod
    def from_errors(cls, errors: dict[str, str]) -> "ValidationError":
        """Build a single error naming every offending field.

        Args:
            errors: Mapping of field name to problem description,
                in the order the fields were checked.
        """
        fields = list(errors)
        summary = "; ".join(f"{name}: {problem}" for name, problem in errors.items())
        error = cls(field=", ".join(fields), message=summary)
        error.details["fields"] = fields
        error.details["errors"] = dict(errors)
        return error

    @property
    def fields(self) -> list[str]:
        return list(self.details.get("fields", []))


# Lookup Exceptions
class NotFoundError(LedgerError):
    """Referenced entity does not exist."""

    pass


class ItemNotFoundError(NotFoundError):
    """Inventory item not found in the ledger."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Inventory item not found: {item_id}",
            code="ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


# Stock Exceptions
class InsufficientStockError(LedgerError):
    """Outgoing movement exceeds the stock on hand."""

    def __init__(self, item_id: str, requested: float, available: float):
        super().__init__(
            f"Insufficient stock for item {item_id}: "
            f"requested {requested}, available {available}",
            code="INSUFFICIENT_STOCK",
            details={
                "item_id": item_id,
                "requested": requested,
                "available": available,
            },
        )


# Storage Exceptions
class StorageError(LedgerError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class ConfigurationError(LedgerError):
    """Configuration error."""

    pass
