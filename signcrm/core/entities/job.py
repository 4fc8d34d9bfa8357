"""
Job aggregate and its owned sub-records.

A job is saved whole: the shell builds a complete ``Job`` and hands it
to the save use case, which replaces the stored aggregate.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from signcrm.core.entities.numeric import coerce_amount
from signcrm.core.entities.quotation import QuotationDetails


OptionalDate = date | None


class ProductionStage(str, Enum):
    """Position of a job in the sales/production/installation lifecycle."""

    DESIGN = "Design"
    QUOTATION_SENT = "Quotation Sent"
    FABRICATION = "Fabrication"
    PRINTING = "Printing"
    INSTALLATION_SCHEDULED = "Installation Scheduled"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"
    QUOTATION_APPROVED = "Quotation Approved"
    INVOICE_SENT = "Invoice Sent"
    CLIENT_PAID_DEPOSIT = "Client Paid Deposit"
    CLIENT_PAID_FULL = "Client Paid Full"


def coerce_optional_date(v: Any) -> date | None:
    """Convert '' and ISO strings from the form into a date or None."""
    if v is None:
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str):
        v = v.strip()
        if not v or v.lower() in {"none", "null"}:
            return None
        for fmt in ("%Y-%m-%d", "%d/%m/%Y"):
            try:
                return datetime.strptime(v, fmt).date()
            except ValueError:
                continue
        # fall through so pydantic reports the bad value
    return v


class InvoiceDetails(BaseModel):
    """Invoice issued for a job; ``user_id`` is who last changed it."""

    amount: float = Field(default=0.0, ge=0)
    date: OptionalDate = None
    user_id: str | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> float:
        return coerce_amount(v)

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> OptionalDate:
        return coerce_optional_date(v)


class PaymentRecord(BaseModel):
    """A single payment slot on a job."""

    amount: float = Field(default=0.0, ge=0)
    date: OptionalDate = None
    user_id: str | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> float:
        return coerce_amount(v)

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> OptionalDate:
        return coerce_optional_date(v)

    @property
    def is_unset(self) -> bool:
        """Empty form slot: no amount and no date."""
        return self.amount == 0 and self.date is None


class ChangelogEntry(BaseModel):
    """Audit record of one stage transition. Never mutated."""

    model_config = {"frozen": True}

    user_id: str
    timestamp: datetime
    from_stage: ProductionStage
    to_stage: ProductionStage


class Job(BaseModel):
    """A single client engagement, from quotation through installation."""

    id: str | None = None

    # Client
    client_name: str = ""
    client_email: str = ""
    client_phone: str = ""
    installation_address: str = ""
    job_description: str = ""
    notes: str | None = None

    # Owned sub-records
    quotation_details: QuotationDetails = Field(default_factory=QuotationDetails)
    invoice_details: InvoiceDetails = Field(default_factory=InvoiceDetails)
    payments: list[PaymentRecord] = Field(default_factory=list)

    stage: ProductionStage = ProductionStage.QUOTATION_SENT
    installation_date: date | None = None
    mockup_image: str | None = None  # data URI or URL

    salesperson_id: str | None = None  # set once at creation
    changelog: list[ChangelogEntry] = Field(default_factory=list)

    @field_validator(
        "client_name",
        "client_email",
        "client_phone",
        "installation_address",
        "job_description",
        mode="before",
    )
    @classmethod
    def coerce_string(cls, v: Any) -> str:
        """Ensure string fields are never None."""
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("installation_date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> OptionalDate:
        return coerce_optional_date(v)

    @field_validator("changelog", mode="before")
    @classmethod
    def coerce_changelog(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def total_paid(self) -> float:
        """Sum of all recorded payments."""
        return sum(p.amount for p in self.payments)

    @property
    def balance(self) -> float:
        """Invoice amount minus payments; negative when overpaid."""
        return self.invoice_details.amount - self.total_paid

    def matches_search(self, term: str) -> bool:
        """Case-insensitive match on client name or job description."""
        needle = term.lower()
        return (
            needle in self.client_name.lower()
            or needle in self.job_description.lower()
        )
