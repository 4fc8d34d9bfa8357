"""Catalog domain entities: cost items and their grouping categories."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from signcrm.core.entities.numeric import coerce_amount


class CostUnit(str, Enum):
    """Unit a cost item is priced in."""

    ITEM = "item"
    SQM = "sqm"
    METER = "meter"
    HOUR = "hour"
    DAY = "day"


class CategoryColor(BaseModel):
    """Display palette for a category card."""

    bg: str = "bg-gray-50"
    text: str = "text-gray-700"
    border: str = "border-gray-200"


class ItemCategory(BaseModel):
    """Groups cost items for display. Has no computed state."""

    id: str | None = None
    name: str
    icon: str = "CubeIcon"
    color: CategoryColor = Field(default_factory=CategoryColor)


class CostItem(BaseModel):
    """
    Reusable priced item used to build quotations.

    Quotation line items refer to it by ``id``; the item never knows
    which jobs use it.
    """

    id: str | None = None
    name: str
    unit: CostUnit = CostUnit.ITEM
    cost_per_unit: float = Field(default=0.0, ge=0)
    category_id: str

    @field_validator("cost_per_unit", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> float:
        """Convert None/empty/invalid to 0.0."""
        return coerce_amount(v)


def palette_color(name: str) -> CategoryColor:
    """Tailwind classes for a named palette entry ('Blue' -> bg-blue-50 ...)."""
    shade = name.lower()
    return CategoryColor(
        bg=f"bg-{shade}-50",
        text=f"text-{shade}-700",
        border=f"border-{shade}-200",
    )


# Palette offered when creating a category
AVAILABLE_CATEGORY_COLORS: dict[str, CategoryColor] = {
    name: palette_color(name)
    for name in ("Blue", "Yellow", "Green", "Purple", "Pink", "Indigo", "Red", "Gray")
}

AVAILABLE_ICONS: tuple[str, ...] = (
    "CubeIcon",
    "WrenchScrewdriverIcon",
    "UsersIcon",
    "SparklesIcon",
    "BriefcaseIcon",
    "CalculatorIcon",
    "BuildingOfficeIcon",
    "KeyIcon",
    "HistoryIcon",
)
