"""Company overhead and the monthly financial figures derived from jobs."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from signcrm.core.entities.numeric import coerce_amount


class FixedCostItem(BaseModel):
    """A recurring company-wide monthly cost, independent of any job."""

    id: str | None = None
    name: str
    monthly_amount: float = Field(default=0.0, ge=0)

    @field_validator("monthly_amount", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> float:
        """Convert None/empty/invalid to 0.0."""
        return coerce_amount(v)


class MonthlyFinancials(BaseModel):
    """Revenue and profit for one calendar month."""

    month: int = Field(ge=1, le=12)
    year: int
    revenue: float = 0.0
    total_fixed_costs: float = 0.0
    profit: float = 0.0
    progress_percentage: float = 0.0  # breakeven progress, capped at 100

    @property
    def is_profitable(self) -> bool:
        return self.profit > 0


class ChartDataPoint(BaseModel):
    """One point on the profit/loss trend chart."""

    label: str
    value: float
    month: int
    year: int


class FinancialDashboard(BaseModel):
    """Everything the financials view shows for one reference month."""

    current: MonthlyFinancials
    previous: MonthlyFinancials
    percentage_change: float = 0.0
    is_positive_change: bool = True
    trend: list[ChartDataPoint] = Field(default_factory=list)
