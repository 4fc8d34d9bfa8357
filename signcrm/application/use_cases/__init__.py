"""Application use cases."""

from signcrm.application.use_cases.delete_job import DeleteJobUseCase
from signcrm.application.use_cases.financial_dashboard import FinancialDashboardUseCase
from signcrm.application.use_cases.generate_job_report import (
    GenerateJobReportUseCase,
    JobReportResult,
)
from signcrm.application.use_cases.list_jobs import ListJobsUseCase
from signcrm.application.use_cases.manage_catalog import CatalogUseCases, CategoryGroup
from signcrm.application.use_cases.manage_fixed_costs import FixedCostUseCases
from signcrm.application.use_cases.manage_users import UserUpdateResult, UserUseCases
from signcrm.application.use_cases.save_job import SaveJobResult, SaveJobUseCase
from signcrm.application.use_cases.update_profile import (
    ProfileUpdateResult,
    UpdateProfileUseCase,
)

__all__ = [
    "SaveJobUseCase",
    "SaveJobResult",
    "DeleteJobUseCase",
    "ListJobsUseCase",
    "CatalogUseCases",
    "CategoryGroup",
    "FixedCostUseCases",
    "UserUseCases",
    "UserUpdateResult",
    "UpdateProfileUseCase",
    "ProfileUpdateResult",
    "FinancialDashboardUseCase",
    "GenerateJobReportUseCase",
    "JobReportResult",
]
