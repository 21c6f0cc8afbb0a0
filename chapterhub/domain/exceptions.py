"""Errors raised by the domain and persistence layers."""

from __future__ import annotations


class StoreUnavailableError(RuntimeError):
    """Raised when a call to the record store fails or times out."""

    def __init__(self, operation: str, detail: str | None = None) -> None:
        self.operation = operation
        self.detail = detail
        message = f"Record store unavailable during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class RecordNotFoundError(LookupError):
    """Raised when an update or delete targets a record that does not exist."""

    def __init__(self, collection: str, record_id: str) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection} record '{record_id}' not found")


class RecordConflictError(ValueError):
    """Raised when a create collides with an existing record identifier."""


class PushDeliveryFailedError(RuntimeError):
    """Raised when a single push notification could not be delivered."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


__all__ = [
    "PushDeliveryFailedError",
    "RecordConflictError",
    "RecordNotFoundError",
    "StoreUnavailableError",
]
