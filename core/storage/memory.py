"""
In-memory storage backend implementation.

Records live in a process-local list; nothing survives a restart.
"""

import threading
from typing import Optional

from core.logging import get_logger
from core.storage.base import BaseResourceStore, Price, Record


logger = get_logger(__name__)


class InMemoryResourceStore(BaseResourceStore):
    """
    List-backed record store.

    A single lock guards every operation, so two concurrent inserts
    can never share an id and a replace racing a remove on the same id
    resolves in lock order.
    """

    def __init__(self) -> None:
        self._records: list[Record] = []
        self._next_id = 1
        self._lock = threading.Lock()

    @property
    def next_id(self) -> int:
        """The id the next insert will receive."""
        with self._lock:
            return self._next_id

    def insert(self, name: str, price: Price) -> Record:
        with self._lock:
            record = Record(id=self._next_id, name=name, price=price)
            self._next_id += 1
            self._records.append(record)

        logger.debug("Record inserted", record_id=record.id)
        return record

    def list(self) -> list[Record]:
        with self._lock:
            return list(self._records)

    def find_by_id(self, record_id: int) -> Optional[Record]:
        with self._lock:
            index = self._index_of(record_id)
            return None if index is None else self._records[index]

    def replace(self, record_id: int, name: str, price: Price) -> Optional[Record]:
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                return None
            record = Record(id=record_id, name=name, price=price)
            self._records[index] = record
            return record

    def remove(self, record_id: int) -> bool:
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                return False
            del self._records[index]
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def _index_of(self, record_id: int) -> Optional[int]:
        """Position of the first record with this id. Caller holds the lock."""
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None
