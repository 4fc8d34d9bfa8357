"""In-memory storage implementations."""

from dataclasses import dataclass, field

from signcrm.infrastructure.storage.memory.catalog_store import InMemoryCatalogStore
from signcrm.infrastructure.storage.memory.fixed_cost_store import InMemoryFixedCostStore
from signcrm.infrastructure.storage.memory.job_store import InMemoryJobStore
from signcrm.infrastructure.storage.memory.user_store import InMemoryUserStore


@dataclass
class InMemoryStores:
    """One set of stores; pass it around instead of using module globals."""

    catalog: InMemoryCatalogStore = field(default_factory=InMemoryCatalogStore)
    fixed_costs: InMemoryFixedCostStore = field(default_factory=InMemoryFixedCostStore)
    jobs: InMemoryJobStore = field(default_factory=InMemoryJobStore)
    users: InMemoryUserStore = field(default_factory=InMemoryUserStore)


__all__ = [
    "InMemoryCatalogStore",
    "InMemoryFixedCostStore",
    "InMemoryJobStore",
    "InMemoryUserStore",
    "InMemoryStores",
]
