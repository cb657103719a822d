"""Core domain layer - entities, services, interfaces, and exceptions."""

from src.core import entities, exceptions, interfaces, services

__all__ = ["entities", "services", "interfaces", "exceptions"]
