"""Core domain entities."""

from signcrm.core.entities.catalog import (
    AVAILABLE_CATEGORY_COLORS,
    AVAILABLE_ICONS,
    CategoryColor,
    CostItem,
    CostUnit,
    ItemCategory,
)
from signcrm.core.entities.financials import (
    ChartDataPoint,
    FinancialDashboard,
    FixedCostItem,
    MonthlyFinancials,
)
from signcrm.core.entities.job import (
    ChangelogEntry,
    InvoiceDetails,
    Job,
    PaymentRecord,
    ProductionStage,
)
from signcrm.core.entities.quotation import (
    PricedLineItem,
    QuotationBreakdown,
    QuotationDetails,
    QuotationLineItem,
)
from signcrm.core.entities.user import (
    PermissionAction,
    PermissionModule,
    Permissions,
    PermissionSet,
    User,
    UserRole,
)

__all__ = [
    # Catalog entities
    "CostItem",
    "CostUnit",
    "ItemCategory",
    "CategoryColor",
    "AVAILABLE_CATEGORY_COLORS",
    "AVAILABLE_ICONS",
    # Quotation entities
    "QuotationLineItem",
    "QuotationDetails",
    "PricedLineItem",
    "QuotationBreakdown",
    # Job entities
    "Job",
    "ProductionStage",
    "InvoiceDetails",
    "PaymentRecord",
    "ChangelogEntry",
    # Financial entities
    "FixedCostItem",
    "MonthlyFinancials",
    "ChartDataPoint",
    "FinancialDashboard",
    # User entities
    "User",
    "UserRole",
    "Permissions",
    "PermissionSet",
    "PermissionModule",
    "PermissionAction",
]
