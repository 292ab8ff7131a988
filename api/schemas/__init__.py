"""
Pydantic schemas for API request/response validation.
"""

from api.schemas.record import (
    RecordWriteRequest,
    RecordResponse,
    RecordDeleteResponse,
)

__all__ = [
    "RecordWriteRequest",
    "RecordResponse",
    "RecordDeleteResponse",
]
