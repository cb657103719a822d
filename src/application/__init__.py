"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that run a ledger command and persist the result
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers that mutate state.
"""

from src.application.services import (
    get_stock_ledger,
    reset_stock_ledger,
    restore_stock_ledger,
)
from src.application.use_cases import (
    ApplyMovementUseCase,
    RegisterItemUseCase,
    SetDiscontinuedUseCase,
    UpdateItemDetailsUseCase,
)

__all__ = [
    # Services
    "get_stock_ledger",
    "reset_stock_ledger",
    "restore_stock_ledger",
    # Use cases
    "RegisterItemUseCase",
    "ApplyMovementUseCase",
    "SetDiscontinuedUseCase",
    "UpdateItemDetailsUseCase",
]
