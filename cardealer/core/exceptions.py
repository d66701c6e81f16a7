"""Errors raised by the vehicle service.

The HTTP layer renders each one with its ``status_code`` and ``detail``.
"""

from typing import Any


class ApiError(Exception):
    """Base class for errors that map onto a client-facing response."""

    status_code: int = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class VehicleNotFoundError(ApiError):
    """Raised when a lookup, update or delete targets an unknown id."""

    status_code = 404

    def __init__(self, id: Any):
        super().__init__(f"Vehicle with id {id} not found")
        self.id = id


class MissingIdentifierError(ApiError):
    """Raised when an update carries no usable (positive) id."""

    status_code = 400

    def __init__(self):
        super().__init__("Vehicle id must be a positive number")
