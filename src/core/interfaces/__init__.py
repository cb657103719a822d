"""Core interfaces (ports) implemented by the infrastructure layer."""

from src.core.interfaces.snapshot_store import ISnapshotStore

__all__ = [
    "ISnapshotStore",
]
