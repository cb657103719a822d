"""Application use cases."""

from src.application.use_cases.apply_movement import ApplyMovementUseCase
from src.application.use_cases.base import LedgerUseCase
from src.application.use_cases.register_item import RegisterItemUseCase
from src.application.use_cases.set_discontinued import SetDiscontinuedUseCase
from src.application.use_cases.update_item_details import UpdateItemDetailsUseCase

__all__ = [
    "LedgerUseCase",
    "RegisterItemUseCase",
    "ApplyMovementUseCase",
    "SetDiscontinuedUseCase",
    "UpdateItemDetailsUseCase",
]
