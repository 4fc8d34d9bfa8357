"""
Workspace factory.

Wires in-memory stores to the use cases. Each call builds an
independent workspace; nothing here is a module-level singleton.
"""

from dataclasses import dataclass, field

from signcrm.application.use_cases import (
    CatalogUseCases,
    DeleteJobUseCase,
    FinancialDashboardUseCase,
    FixedCostUseCases,
    GenerateJobReportUseCase,
    ListJobsUseCase,
    SaveJobUseCase,
    UpdateProfileUseCase,
    UserUseCases,
)
from signcrm.config import get_logger, get_settings
from signcrm.core.services.job_report import IJobReportRenderer
from signcrm.infrastructure.seed import seed_stores
from signcrm.infrastructure.storage.memory import InMemoryStores

logger = get_logger(__name__)


@dataclass
class Workspace:
    """One set of stores with the use cases bound to them."""

    stores: InMemoryStores
    renderer: IJobReportRenderer | None = None
    save_job: SaveJobUseCase = field(init=False)
    delete_job: DeleteJobUseCase = field(init=False)
    list_jobs: ListJobsUseCase = field(init=False)
    catalog: CatalogUseCases = field(init=False)
    fixed_costs: FixedCostUseCases = field(init=False)
    users: UserUseCases = field(init=False)
    update_profile: UpdateProfileUseCase = field(init=False)
    financial_dashboard: FinancialDashboardUseCase = field(init=False)
    job_report: GenerateJobReportUseCase = field(init=False)

    def __post_init__(self) -> None:
        stores = self.stores
        self.save_job = SaveJobUseCase(
            stores.jobs, get_settings().pricing.max_payment_slots
        )
        self.delete_job = DeleteJobUseCase(stores.jobs)
        self.list_jobs = ListJobsUseCase(stores.jobs)
        self.catalog = CatalogUseCases(stores.catalog)
        self.fixed_costs = FixedCostUseCases(stores.fixed_costs)
        self.users = UserUseCases(stores.users)
        self.update_profile = UpdateProfileUseCase(stores.users)
        self.financial_dashboard = FinancialDashboardUseCase(
            stores.jobs, stores.fixed_costs
        )
        self.job_report = GenerateJobReportUseCase(
            stores.jobs, stores.catalog, stores.users, renderer=self.renderer
        )


def create_workspace(
    seed: bool = True,
    renderer: IJobReportRenderer | None = None,
) -> Workspace:
    """
    Build a workspace backed by fresh in-memory stores.

    Args:
        seed: Load the fixture catalog, fixed costs, users and jobs.
        renderer: Job report renderer override (fpdf2 by default).
    """
    stores = InMemoryStores()
    if seed:
        seed_stores(stores)
    logger.info("workspace_created", seeded=seed)
    return Workspace(stores=stores, renderer=renderer)
