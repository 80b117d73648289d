"""
Error types raised by the service layer.

The HTTP layer maps each of them to a status code in ``main.py``;
services never raise ``HTTPException`` themselves.  Storage failures
are not wrapped: ``sqlite3.Error`` travels up unchanged and is turned
into a generic 500 response.
"""

from typing import Dict, List


class MotoDashError(Exception):
    """Base class for errors raised by MotoDash services."""


class RequestValidationFailed(MotoDashError, ValueError):
    """Input did not satisfy the resource schema.

    ``errors`` is a list of ``{"field": ..., "message": ...}`` items
    using the external (camelCase) field names.
    """

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        fields = ", ".join(e["field"] for e in errors) or "payload"
        super().__init__(f"Invalid value for {fields}")


class EmptyUpdateError(MotoDashError, ValueError):
    """An update request contained no recognised fields."""

    def __init__(self, message: str = "No changes supplied"):
        super().__init__(message)


class ResourceNotFound(MotoDashError, LookupError):
    """No record with the requested identifier exists."""

    def __init__(self, label: str, record_id: str):
        self.label = label
        self.record_id = record_id
        super().__init__(f"{label} not found")
