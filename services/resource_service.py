"""
Resource service - the operation layer over a record store.

Translates store results into caller-facing outcomes: absent records
become NotFoundError, malformed input becomes InvalidInputError. The
service keeps no state of its own; everything lives in the store it is
built with.
"""

import math
from typing import Any

from core.errors import InvalidInputError, NotFoundError
from core.logging import get_logger
from core.storage import BaseResourceStore, Price, Record


logger = get_logger(__name__)


class ResourceService:
    """
    Create/list/get/update/delete over a record store.

    Usage:
        service = ResourceService(InMemoryResourceStore())
        tea = service.create("Green Tea", 5)
        service.get(tea.id)
    """

    def __init__(
        self,
        store: BaseResourceStore,
        allow_missing_price: bool = False,
    ):
        """
        Args:
            store: Record store owning all records
            allow_missing_price: Accept a missing price and store None
                instead of rejecting the request
        """
        self.store = store
        self.allow_missing_price = allow_missing_price

    def create(self, name: Any, price: Any = None) -> Record:
        """Validate and store a new record, returning it with its new id."""
        name, price = self._validate(name, price)
        record = self.store.insert(name, price)

        logger.info("Record created", record_id=record.id, name=record.name)
        return record

    def list_all(self) -> list[Record]:
        return self.store.list()

    def get(self, record_id: int) -> Record:
        record = self.store.find_by_id(record_id)
        if record is None:
            logger.debug("Record not found", record_id=record_id)
            raise NotFoundError(record_id)
        return record

    def update(self, record_id: int, name: Any, price: Any = None) -> Record:
        """
        Replace name and price of an existing record.

        Input is validated before the lookup, so a malformed request is
        rejected even when the id does not exist.
        """
        name, price = self._validate(name, price)
        record = self.store.replace(record_id, name, price)
        if record is None:
            logger.debug("Record not found", record_id=record_id)
            raise NotFoundError(record_id)

        logger.info("Record updated", record_id=record_id)
        return record

    def delete(self, record_id: int) -> int:
        """Remove a record for good. Returns the deleted id."""
        logger.info("Deleting record", record_id=record_id)

        if not self.store.remove(record_id):
            raise NotFoundError(record_id)

        logger.info("Record deleted", record_id=record_id)
        return record_id

    @staticmethod
    def parse_record_id(raw: Any) -> int:
        """
        Parse an identifier received as text (e.g. a path segment).

        Only positive base-10 integers are accepted; anything else is
        InvalidInputError rather than a lookup miss.
        """
        if isinstance(raw, bool):
            raise InvalidInputError(f"Invalid record id: {raw!r}", field="id")
        if isinstance(raw, int):
            record_id = raw
        elif isinstance(raw, str) and raw.strip().isdigit() and raw.strip().isascii():
            try:
                record_id = int(raw.strip())
            except ValueError:
                # Past the interpreter's int string conversion limit
                raise InvalidInputError(f"Invalid record id: {raw!r}", field="id")
        else:
            raise InvalidInputError(f"Invalid record id: {raw!r}", field="id")

        if record_id < 1:
            raise InvalidInputError(f"Invalid record id: {raw!r}", field="id")
        return record_id

    def _validate(self, name: Any, price: Any) -> tuple[str, Price]:
        if name is None:
            raise InvalidInputError("Field 'name' is required", field="name")
        if not isinstance(name, str) or not name.strip():
            raise InvalidInputError("Field 'name' must be a non-empty string", field="name")

        if price is None:
            if self.allow_missing_price:
                return name, None
            raise InvalidInputError("Field 'price' is required", field="price")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise InvalidInputError("Field 'price' must be a number", field="price")
        if isinstance(price, float) and not math.isfinite(price):
            raise InvalidInputError("Field 'price' must be a finite number", field="price")

        return name, price
