"""Core interfaces (ports) for dependency injection."""

from signcrm.core.interfaces.catalog_store import ICatalogStore
from signcrm.core.interfaces.fixed_cost_store import IFixedCostStore
from signcrm.core.interfaces.job_store import IJobStore
from signcrm.core.interfaces.user_store import IUserStore

__all__ = [
    "ICatalogStore",
    "IFixedCostStore",
    "IJobStore",
    "IUserStore",
]
