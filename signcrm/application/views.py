"""
View models for the places a job is shown.

The job list row, the compact job card, and the job form each get
their own model. All money comes from ``compute_quotation_breakdown`` or
``summarize_job_financials`` so every screen quotes the same price.
"""

from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel, Field

from signcrm.config import get_settings
from signcrm.core.entities.job import Job, PaymentRecord, ProductionStage
from signcrm.core.entities.quotation import QuotationBreakdown, QuotationDetails
from signcrm.core.entities.user import PermissionAction, PermissionModule, User
from signcrm.core.formatting import format_currency
from signcrm.core.services.job_financials import BalanceStatus, summarize_job_financials
from signcrm.core.services.job_report import resolve_user_name
from signcrm.core.services.permissions import authorize, can_delete_job, can_edit_job
from signcrm.core.services.quotation_pricing import (
    CatalogLike,
    compute_quotation_breakdown,
    index_catalog,
)
from signcrm.core.services.stage_tracking import StageProgress, stage_progress


class JobRowView(BaseModel):
    """One row of the jobs table."""

    job_id: str | None
    client_name: str
    job_description: str
    stage: ProductionStage
    quote_total: float
    invoice_amount: float
    total_paid: float
    balance: float
    balance_status: BalanceStatus
    can_edit: bool
    can_delete: bool

    @property
    def quote_display(self) -> str:
        return format_currency(self.quote_total)

    @property
    def balance_display(self) -> str:
        return format_currency(self.balance)


class JobCardView(BaseModel):
    """Compact job card used on narrow screens."""

    job_id: str | None
    client_name: str
    stage: ProductionStage
    quote_total: float
    total_paid: float
    balance: float
    can_edit: bool
    can_delete: bool

    @property
    def quote_display(self) -> str:
        return format_currency(self.quote_total)


class ChangelogRow(BaseModel):
    user_name: str
    timestamp: datetime
    from_stage: ProductionStage
    to_stage: ProductionStage


class JobFormView(BaseModel):
    """Everything the job form shows next to the editable fields."""

    job: Job
    is_new: bool
    is_read_only: bool
    quotation: QuotationBreakdown
    total_paid: float
    balance_due: float
    payment_slots: list[PaymentRecord]
    invoice_updated_by: str | None = None
    payment_updated_by: list[str | None] = Field(default_factory=list)
    progress: StageProgress | None = None
    changelog: list[ChangelogRow] = Field(default_factory=list)

    @property
    def quote_total(self) -> float:
        return self.quotation.final_total


def new_job_draft(contribution_percentage: float | None = None) -> Job:
    """
    Blank job for the "new job" form.

    Markup comes from settings; the overhead contribution is the
    company default at the moment the form opens.
    """
    pricing = get_settings().pricing
    if contribution_percentage is None:
        contribution_percentage = pricing.default_fixed_cost_contribution_percentage
    return Job(
        quotation_details=QuotationDetails(
            profit_markup_percentage=pricing.default_profit_markup_percentage,
            fixed_cost_contribution_percentage=contribution_percentage,
        ),
        stage=ProductionStage.QUOTATION_SENT,
    )


def build_job_row(job: Job, catalog: CatalogLike, acting_user: User) -> JobRowView:
    summary = summarize_job_financials(job, catalog)
    return JobRowView(
        job_id=job.id,
        client_name=job.client_name,
        job_description=job.job_description,
        stage=job.stage,
        quote_total=summary.quote_total,
        invoice_amount=summary.invoice_amount,
        total_paid=summary.total_paid,
        balance=summary.balance,
        balance_status=summary.balance_status,
        can_edit=can_edit_job(acting_user, job),
        can_delete=can_delete_job(acting_user, job),
    )


def build_job_rows(
    jobs: Iterable[Job], catalog: CatalogLike, acting_user: User
) -> list[JobRowView]:
    index = index_catalog(catalog)
    return [build_job_row(job, index, acting_user) for job in jobs]


def build_job_card(job: Job, catalog: CatalogLike, acting_user: User) -> JobCardView:
    summary = summarize_job_financials(job, catalog)
    return JobCardView(
        job_id=job.id,
        client_name=job.client_name,
        stage=job.stage,
        quote_total=summary.quote_total,
        total_paid=summary.total_paid,
        balance=summary.balance,
        can_edit=can_edit_job(acting_user, job),
        can_delete=can_delete_job(acting_user, job),
    )


def build_job_form(
    job: Job | None,
    catalog: CatalogLike,
    users: Iterable[User],
    acting_user: User,
    contribution_percentage: float | None = None,
) -> JobFormView:
    """
    Form model for editing ``job``, or for a new job when it is None.

    Payment slots are padded with blanks up to the configured maximum.
    """
    is_new = job is None
    if job is None:
        job = new_job_draft(contribution_percentage)
        read_only = not authorize(acting_user, PermissionModule.JOBS, PermissionAction.CREATE)
    else:
        read_only = not can_edit_job(acting_user, job)

    user_list = list(users)
    max_slots = get_settings().pricing.max_payment_slots
    slots = list(job.payments[:max_slots])
    slots += [PaymentRecord() for _ in range(max_slots - len(slots))]

    def updated_by(user_id: str | None) -> str | None:
        return resolve_user_name(user_list, user_id) if user_id else None

    return JobFormView(
        job=job,
        is_new=is_new,
        is_read_only=read_only,
        quotation=compute_quotation_breakdown(job.quotation_details, catalog),
        total_paid=job.total_paid,
        balance_due=job.balance,
        payment_slots=slots,
        invoice_updated_by=updated_by(job.invoice_details.user_id),
        payment_updated_by=[updated_by(p.user_id) for p in slots],
        progress=stage_progress(job.stage),
        changelog=[
            ChangelogRow(
                user_name=resolve_user_name(user_list, entry.user_id),
                timestamp=entry.timestamp,
                from_stage=entry.from_stage,
                to_stage=entry.to_stage,
            )
            for entry in job.changelog
        ],
    )
