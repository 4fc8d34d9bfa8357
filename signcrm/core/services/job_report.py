"""
Printable job report.

Assembles everything the report shows into one model so renderers only
lay it out. User references are resolved by id; a missing user shows as
"N/A" instead of failing.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from pydantic import BaseModel, Field

from signcrm.core.entities.job import Job, OptionalDate, ProductionStage
from signcrm.core.entities.quotation import QuotationBreakdown
from signcrm.core.entities.user import User
from signcrm.core.services.job_financials import (
    JobFinancialSummary,
    summarize_job_financials,
)
from signcrm.core.services.quotation_pricing import (
    CatalogLike,
    compute_quotation_breakdown,
    index_catalog,
)

UNKNOWN_USER = "N/A"


class ReportPaymentRow(BaseModel):
    """One payment with the name of whoever recorded it."""

    amount: float
    date: OptionalDate = None
    recorded_by: str = UNKNOWN_USER


class JobReport(BaseModel):
    """Content of the printable job report."""

    job_id: str | None = None
    client_name: str
    client_email: str
    client_phone: str
    installation_address: str
    job_description: str
    salesperson_name: str = UNKNOWN_USER
    stage: ProductionStage
    installation_date: date | None = None

    quotation: QuotationBreakdown
    financials: JobFinancialSummary
    invoice_date: date | None = None
    payments: list[ReportPaymentRow] = Field(default_factory=list)

    notes: str | None = None
    has_mockup: bool = False
    mockup_image: str | None = None


class IJobReportRenderer(ABC):
    """Interface for job report rendering implementations."""

    @abstractmethod
    def render(self, report: JobReport) -> bytes:
        """Render a job report into document bytes."""
        pass


def resolve_user_name(users: Iterable[User], user_id: str | None) -> str:
    """Display name for a user reference."""
    if user_id is None:
        return UNKNOWN_USER
    for user in users:
        if user.id == user_id:
            return user.name
    return UNKNOWN_USER


def build_job_report(
    job: Job, catalog: CatalogLike, users: Iterable[User]
) -> JobReport:
    """Build the report for one job."""
    index = index_catalog(catalog)
    user_list = list(users)

    payments = [
        ReportPaymentRow(
            amount=p.amount,
            date=p.date,
            recorded_by=resolve_user_name(user_list, p.user_id),
        )
        for p in job.payments
    ]

    return JobReport(
        job_id=job.id,
        client_name=job.client_name,
        client_email=job.client_email,
        client_phone=job.client_phone,
        installation_address=job.installation_address,
        job_description=job.job_description,
        salesperson_name=resolve_user_name(user_list, job.salesperson_id),
        stage=job.stage,
        installation_date=job.installation_date,
        quotation=compute_quotation_breakdown(job.quotation_details, index),
        financials=summarize_job_financials(job, index),
        invoice_date=job.invoice_details.date,
        payments=payments,
        notes=job.notes or None,
        has_mockup=bool(job.mockup_image),
        mockup_image=job.mockup_image,
    )
