"""
Core business logic services.

Layer-pure services that depend only on:
- signcrm/core/entities/*
- signcrm/core/exceptions.py

Pure functions over the snapshots they are given; no store access.
"""

from signcrm.core.services.financial_aggregation import (
    aggregate_month,
    aggregate_trailing_year,
    build_financial_dashboard,
    monthly_revenue,
    percentage_change,
    progress_percentage,
    shift_month,
    total_monthly_fixed_costs,
)
from signcrm.core.services.job_financials import (
    BalanceStatus,
    JobFinancialSummary,
    summarize_job_financials,
)
from signcrm.core.services.job_report import (
    IJobReportRenderer,
    JobReport,
    ReportPaymentRow,
    build_job_report,
)
from signcrm.core.services.permissions import (
    ROLE_PERMISSIONS,
    authorize,
    can_delete_job,
    can_edit_job,
    change_role,
    default_permissions_for,
)
from signcrm.core.services.quotation_pricing import (
    compute_quotation_breakdown,
    compute_quotation_total,
    index_catalog,
)
from signcrm.core.services.stage_tracking import (
    PROGRESS_STAGES,
    STAGE_OPTIONS,
    StageProgress,
    record_stage_change,
    stage_progress,
)

__all__ = [
    # Pricing
    "compute_quotation_total",
    "compute_quotation_breakdown",
    "index_catalog",
    # Aggregation
    "aggregate_month",
    "aggregate_trailing_year",
    "build_financial_dashboard",
    "monthly_revenue",
    "percentage_change",
    "progress_percentage",
    "shift_month",
    "total_monthly_fixed_costs",
    # Stages
    "STAGE_OPTIONS",
    "PROGRESS_STAGES",
    "StageProgress",
    "record_stage_change",
    "stage_progress",
    # Permissions
    "ROLE_PERMISSIONS",
    "authorize",
    "can_edit_job",
    "can_delete_job",
    "change_role",
    "default_permissions_for",
    # Job money
    "BalanceStatus",
    "JobFinancialSummary",
    "summarize_job_financials",
    # Report
    "IJobReportRenderer",
    "JobReport",
    "ReportPaymentRow",
    "build_job_report",
]
