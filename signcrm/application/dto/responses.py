"""Response DTOs.

Display-ready payloads built from use case results. Money is formatted
here, never earlier.
"""

from pydantic import BaseModel, Field


class JobReportResponse(BaseModel):
    """Metadata for a rendered job report."""

    job_id: str | None
    file_name: str
    file_size: int
    quote_total: str


class MonthSummaryResponse(BaseModel):
    """One month's figures, formatted."""

    label: str
    revenue: str
    total_fixed_costs: str
    profit: str
    progress_percentage: float
    is_profitable: bool


class TrendPointResponse(BaseModel):
    label: str
    value: float


class FinancialDashboardResponse(BaseModel):
    """Financials page payload."""

    current: MonthSummaryResponse
    previous: MonthSummaryResponse
    percentage_change: str
    is_positive_change: bool
    trend: list[TrendPointResponse] = Field(default_factory=list)
    overhead_contribution_percentage: float


class ProfileUpdateResponse(BaseModel):
    success: bool
    error: str | None = None
