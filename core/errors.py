"""
Error taxonomy for resource operations.

Both errors are per-request and recoverable: the transport layer turns
them into responses, the process keeps running.
"""

from typing import Any, Optional


class ResourceError(Exception):
    """Base exception for resource operations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ResourceError):
    """No record matches the requested identifier."""

    def __init__(self, record_id: Any):
        super().__init__(f"Record {record_id} not found")
        self.record_id = record_id


class InvalidInputError(ResourceError):
    """A required field is missing or malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
