"""
Monthly financial aggregation over the job collection.

Revenue for a month is the sum of payments on jobs that are Completed
and whose *installation date* falls in that month. The payment dates
themselves are ignored.

All functions are read-only over the snapshot they are given. Division
by zero is answered with fixed sentinels (0 or 100), never an error.
"""

from collections.abc import Iterable
from datetime import date

from signcrm.core.entities.financials import (
    ChartDataPoint,
    FinancialDashboard,
    FixedCostItem,
    MonthlyFinancials,
)
from signcrm.core.entities.job import Job, ProductionStage

TRAILING_MONTHS = 12


def shift_month(month: int, year: int, offset: int) -> tuple[int, int]:
    """Move ``offset`` calendar months from (month, year); months are 1-12."""
    index = year * 12 + (month - 1) + offset
    return index % 12 + 1, index // 12


def is_revenue_job(job: Job, month: int, year: int) -> bool:
    """Completed job installed in the given month."""
    installed = job.installation_date
    return (
        job.stage == ProductionStage.COMPLETED
        and installed is not None
        and installed.month == month
        and installed.year == year
    )


def monthly_revenue(jobs: Iterable[Job], month: int, year: int) -> float:
    total = 0.0
    for job in jobs:
        if is_revenue_job(job, month, year):
            total = total + job.total_paid
    return total


def total_monthly_fixed_costs(fixed_costs: Iterable[FixedCostItem]) -> float:
    total = 0.0
    for item in fixed_costs:
        total = total + item.monthly_amount
    return total


def progress_percentage(revenue: float, total_fixed_costs: float) -> float:
    """Breakeven progress: revenue as a share of fixed costs, capped at 100."""
    if total_fixed_costs > 0:
        return min((revenue / total_fixed_costs) * 100, 100.0)
    return 100.0 if revenue > 0 else 0.0


def percentage_change(current: float, previous: float) -> float:
    """
    Month-over-month revenue change.

    Growth from a zero month counts as +100; zero to zero is 0.
    """
    if previous > 0:
        return ((current - previous) / previous) * 100
    if current > 0:
        return 100.0
    return 0.0


def _summarize(
    jobs: list[Job], fixed_total: float, month: int, year: int
) -> MonthlyFinancials:
    revenue = monthly_revenue(jobs, month, year)
    return MonthlyFinancials(
        month=month,
        year=year,
        revenue=revenue,
        total_fixed_costs=fixed_total,
        profit=revenue - fixed_total,
        progress_percentage=progress_percentage(revenue, fixed_total),
    )


def aggregate_month(
    jobs: Iterable[Job],
    fixed_costs: Iterable[FixedCostItem],
    month: int,
    year: int,
) -> MonthlyFinancials:
    """Revenue, profit and breakeven progress for one calendar month."""
    return _summarize(list(jobs), total_monthly_fixed_costs(fixed_costs), month, year)


def month_label(month: int, year: int) -> str:
    """Short chart label such as 'Oct 23'."""
    return date(year, month, 1).strftime("%b %y")


def aggregate_trailing_year(
    jobs: Iterable[Job],
    fixed_costs: Iterable[FixedCostItem],
    as_of: date,
) -> list[ChartDataPoint]:
    """Profit/loss for the 12 months ending with ``as_of``'s month, oldest first."""
    job_list = list(jobs)
    fixed_total = total_monthly_fixed_costs(fixed_costs)

    points: list[ChartDataPoint] = []
    for i in range(TRAILING_MONTHS - 1, -1, -1):
        month, year = shift_month(as_of.month, as_of.year, -i)
        revenue = monthly_revenue(job_list, month, year)
        points.append(
            ChartDataPoint(
                label=month_label(month, year),
                value=revenue - fixed_total,
                month=month,
                year=year,
            )
        )
    return points


def build_financial_dashboard(
    jobs: Iterable[Job],
    fixed_costs: Iterable[FixedCostItem],
    as_of: date,
) -> FinancialDashboard:
    """Current month, previous month, change and trend in one pass."""
    job_list = list(jobs)
    cost_list = list(fixed_costs)
    fixed_total = total_monthly_fixed_costs(cost_list)

    current = _summarize(job_list, fixed_total, as_of.month, as_of.year)
    prev_month, prev_year = shift_month(as_of.month, as_of.year, -1)
    previous = _summarize(job_list, fixed_total, prev_month, prev_year)

    change = percentage_change(current.revenue, previous.revenue)

    return FinancialDashboard(
        current=current,
        previous=previous,
        percentage_change=change,
        is_positive_change=change >= 0,
        trend=aggregate_trailing_year(job_list, cost_list, as_of),
    )
