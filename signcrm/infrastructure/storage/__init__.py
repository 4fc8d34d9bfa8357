"""Storage infrastructure implementations."""

from signcrm.infrastructure.storage.memory import (
    InMemoryCatalogStore,
    InMemoryFixedCostStore,
    InMemoryJobStore,
    InMemoryStores,
    InMemoryUserStore,
)

__all__ = [
    "InMemoryCatalogStore",
    "InMemoryFixedCostStore",
    "InMemoryJobStore",
    "InMemoryUserStore",
    "InMemoryStores",
]
