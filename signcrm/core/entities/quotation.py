"""
Quotation domain entities.

``QuotationDetails`` is owned by exactly one job. ``QuotationBreakdown``
is the priced result the pricing engine derives from it.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from signcrm.core.entities.catalog import CostUnit
from signcrm.core.entities.numeric import coerce_amount


class QuotationLineItem(BaseModel):
    """A catalog item reference plus quantity on a quotation."""

    item_id: str
    quantity: float = Field(default=1.0, ge=0)

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v: Any) -> float:
        return coerce_amount(v)


class QuotationDetails(BaseModel):
    """
    Inputs to the pricing engine for one job.

    Percentages are not bounded; a negative markup is a discount.
    """

    line_items: list[QuotationLineItem] = Field(default_factory=list)
    fixed_costs: float = Field(default=0.0, ge=0)  # job-specific, not company overhead
    profit_markup_percentage: float = 25.0
    fixed_cost_contribution_percentage: float = 15.0

    @field_validator(
        "fixed_costs",
        "profit_markup_percentage",
        "fixed_cost_contribution_percentage",
        mode="before",
    )
    @classmethod
    def coerce_numeric(cls, v: Any) -> float:
        return coerce_amount(v)


class PricedLineItem(BaseModel):
    """A line item resolved against the catalog."""

    position: int
    item_id: str
    name: str
    unit: CostUnit
    quantity: float
    cost_per_unit: float
    line_total: float


class QuotationBreakdown(BaseModel):
    """Every stage of the quotation formula, unrounded."""

    lines: list[PricedLineItem] = Field(default_factory=list)
    unresolved_item_ids: list[str] = Field(default_factory=list)
    line_items_total: float = 0.0
    fixed_costs: float = 0.0
    subtotal: float = 0.0
    profit_markup_percentage: float = 0.0
    profit_markup_amount: float = 0.0
    fixed_cost_contribution_percentage: float = 0.0
    fixed_cost_contribution_amount: float = 0.0
    final_total: float = 0.0
