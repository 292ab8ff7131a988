"""
Record-related request and response schemas.

Request fields are deliberately loose: presence and type checks belong
to the resource service, which reports them as InvalidInputError.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from core.storage import Record


class RecordWriteRequest(BaseModel):
    """Request body for creating or replacing a record."""

    name: Optional[Any] = Field(
        default=None,
        description="Display name of the record",
        examples=["Green Tea"],
    )
    price: Optional[Any] = Field(
        default=None,
        description="Numeric price",
        examples=[5],
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Green Tea",
                    "price": 5,
                }
            ]
        }
    }


class RecordResponse(BaseModel):
    """A stored record."""

    id: int = Field(
        ...,
        description="Identifier assigned at creation, never reused",
    )
    name: str = Field(
        ...,
        description="Display name of the record",
    )
    price: Optional[Union[int, float]] = Field(
        default=None,
        description="Numeric price",
    )

    @classmethod
    def from_record(cls, record: Record) -> "RecordResponse":
        return cls(**record.to_dict())


class RecordDeleteResponse(BaseModel):
    """Confirmation of a deletion."""

    id: int
    message: str = "deleted"
