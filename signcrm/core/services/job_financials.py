"""Per-job money summary: quote, invoice, payments and balance."""

from enum import Enum

from pydantic import BaseModel

from signcrm.core.entities.job import Job
from signcrm.core.services.quotation_pricing import CatalogLike, compute_quotation_total


class BalanceStatus(str, Enum):
    """How payments compare with the invoice."""

    DUE = "due"
    SETTLED = "settled"
    OVERPAID = "overpaid"


class JobFinancialSummary(BaseModel):
    """Money figures shown alongside a job."""

    quote_total: float
    invoice_amount: float
    total_paid: float
    balance: float
    balance_status: BalanceStatus


def balance_status(balance: float) -> BalanceStatus:
    if balance > 0:
        return BalanceStatus.DUE
    if balance < 0:
        return BalanceStatus.OVERPAID
    return BalanceStatus.SETTLED


def summarize_job_financials(job: Job, catalog: CatalogLike) -> JobFinancialSummary:
    balance = job.balance
    return JobFinancialSummary(
        quote_total=compute_quotation_total(job.quotation_details, catalog),
        invoice_amount=job.invoice_details.amount,
        total_paid=job.total_paid,
        balance=balance,
        balance_status=balance_status(balance),
    )
