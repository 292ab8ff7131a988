"""
Abstract base class for record storage.

This module defines the record data model and the contract every store
implementation must follow. Stores never raise domain errors: a missing
identifier is an expected outcome and is reported as None / False.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Union


Price = Optional[Union[int, float]]


@dataclass(frozen=True)
class Record:
    """
    A single stored item.

    Records are immutable; an update swaps in a new Record with the
    same id, so callers never hold a reference into the store's state.
    """
    id: int
    name: str
    price: Price = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
        }


class BaseResourceStore(ABC):
    """
    Abstract base class for record stores.

    Iteration order is insertion order. Identifiers come from a
    monotonically increasing counter starting at 1 and are never reused,
    even after the record holding them is removed.
    """

    @abstractmethod
    def insert(self, name: str, price: Price) -> Record:
        """Assign the next id, append a new record and return it."""
        pass

    @abstractmethod
    def list(self) -> list[Record]:
        """Return all records in insertion order."""
        pass

    @abstractmethod
    def find_by_id(self, record_id: int) -> Optional[Record]:
        """Get a record by id, or None if absent."""
        pass

    @abstractmethod
    def replace(self, record_id: int, name: str, price: Price) -> Optional[Record]:
        """
        Overwrite name and price of an existing record in place.

        Returns the updated record, or None (with no change made)
        if no record has this id.
        """
        pass

    @abstractmethod
    def remove(self, record_id: int) -> bool:
        """
        Remove a record, keeping the relative order of the rest.

        Returns True if a record was found and removed.
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of records currently stored."""
        pass
