"""
Exceptions raised by the persistence layer.
"""

from __future__ import annotations


class FleetStoreError(RuntimeError):
    """Base class for unrecoverable storage failures."""


class CorruptStoreError(FleetStoreError):
    def __init__(self, key: str, detail: str) -> None:
        super().__init__(f"Stored value for key '{key}' is corrupt: {detail}")
        self.key = key
        self.detail = detail


class StoreWriteError(FleetStoreError):
    def __init__(self, key: str, cause: Exception) -> None:
        super().__init__(f"Could not persist key '{key}': {cause}")
        self.key = key
        self.cause = cause
