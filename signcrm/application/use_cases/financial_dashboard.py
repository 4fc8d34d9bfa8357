"""
Financial Dashboard Use Case.

Aggregates the stored jobs and fixed costs into the figures shown on
the financials page.
"""

from datetime import date

from signcrm.application.dto.responses import (
    FinancialDashboardResponse,
    MonthSummaryResponse,
    TrendPointResponse,
)
from signcrm.application.use_cases.authorization import require_permission
from signcrm.config import get_logger
from signcrm.core.entities.financials import FinancialDashboard, MonthlyFinancials
from signcrm.core.entities.user import PermissionAction, PermissionModule, User
from signcrm.core.formatting import format_currency, format_percentage
from signcrm.core.interfaces.fixed_cost_store import IFixedCostStore
from signcrm.core.interfaces.job_store import IJobStore
from signcrm.core.services.financial_aggregation import (
    build_financial_dashboard,
    month_label,
)

logger = get_logger(__name__)


class FinancialDashboardUseCase:
    """Use case for the financials page."""

    def __init__(self, job_store: IJobStore, fixed_cost_store: IFixedCostStore):
        self._job_store = job_store
        self._fixed_cost_store = fixed_cost_store

    def execute(self, acting_user: User, as_of: date | None = None) -> FinancialDashboard:
        """
        Dashboard for the month containing ``as_of`` (today by default).

        Raises:
            PermissionDeniedError: The user lacks financials.view.
        """
        require_permission(acting_user, PermissionModule.FINANCIALS, PermissionAction.VIEW)
        as_of = as_of or date.today()

        dashboard = build_financial_dashboard(
            self._job_store.list_jobs(),
            self._fixed_cost_store.list_fixed_costs(),
            as_of,
        )
        logger.debug(
            "financial_dashboard_built",
            month=as_of.month,
            year=as_of.year,
            revenue=dashboard.current.revenue,
        )
        return dashboard

    def to_response(self, dashboard: FinancialDashboard) -> FinancialDashboardResponse:
        """Convert the dashboard to its formatted payload."""
        return FinancialDashboardResponse(
            current=_month_response(dashboard.current),
            previous=_month_response(dashboard.previous),
            percentage_change=format_percentage(dashboard.percentage_change, signed=True),
            is_positive_change=dashboard.is_positive_change,
            trend=[TrendPointResponse(label=p.label, value=p.value) for p in dashboard.trend],
            overhead_contribution_percentage=self._fixed_cost_store.get_contribution_percentage(),
        )


def _month_response(month: MonthlyFinancials) -> MonthSummaryResponse:
    return MonthSummaryResponse(
        label=month_label(month.month, month.year),
        revenue=format_currency(month.revenue),
        total_fixed_costs=format_currency(month.total_fixed_costs),
        profit=format_currency(month.profit),
        progress_percentage=month.progress_percentage,
        is_profitable=month.is_profitable,
    )
