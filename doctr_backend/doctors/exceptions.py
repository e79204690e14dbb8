"""
Doctor registry exceptions.

Raised by the store and the pagination layer and translated to DRF
responses in the views.
"""

from __future__ import annotations

from typing import Any


class DoctorError(Exception):
    """Base exception for all doctor registry errors."""

    def to_dict(self) -> dict[str, Any]:
        return {'detail': str(self)}


class DoctorNotFound(DoctorError):
    """Raised when no doctor exists for the requested id."""

    def __init__(self, doctor_id: int, message: str = "Doctor not found."):
        self.doctor_id = doctor_id
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            'detail': str(self),
            'id': self.doctor_id,
        }


class DoctorStorageError(DoctorError):
    """
    Raised when the database fails underneath a store operation.

    The original database error is chained as ``__cause__``; the
    client only ever sees a generic message.
    """

    def __init__(self, operation: str, message: str = "Internal server error."):
        self.operation = operation
        super().__init__(message)


class InvalidSortProperty(DoctorError):
    """Raised when a list request asks to sort by an unknown property."""

    def __init__(self, prop: str, allowed: list[str]):
        self.prop = prop
        self.allowed = allowed
        super().__init__(f"Unknown sort property '{prop}'.")

    def to_dict(self) -> dict[str, Any]:
        return {
            'detail': str(self),
            'sort': self.prop,
            'allowed': self.allowed,
        }
