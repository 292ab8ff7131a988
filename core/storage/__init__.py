"""
Storage abstraction layer.

Provides the record store contract and its backends.

Supported backends:
- In-memory (process lifetime only)
"""

from core.storage.base import (
    BaseResourceStore,
    Price,
    Record,
)
from core.storage.factory import (
    create_resource_store,
    get_storage_backend,
    StorageBackend,
)
from core.storage.memory import InMemoryResourceStore

__all__ = [
    # Abstract interfaces
    "BaseResourceStore",
    "Price",
    "Record",
    # Implementations
    "InMemoryResourceStore",
    # Factory functions
    "create_resource_store",
    "get_storage_backend",
    "StorageBackend",
]
