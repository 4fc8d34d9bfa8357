"""Pytest configuration and fixtures."""

import zlib
from collections.abc import Callable, Generator
from datetime import date

import pytest

from signcrm.config import reset_settings
from signcrm.core.entities import (
    CostItem,
    CostUnit,
    FixedCostItem,
    Job,
    ProductionStage,
    QuotationDetails,
    QuotationLineItem,
    User,
    UserRole,
)
from signcrm.core.services.permissions import default_permissions_for
from signcrm.infrastructure.seed import seed_stores
from signcrm.infrastructure.storage.memory import InMemoryStores


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch) -> Generator[None, None, None]:
    """Drop cached settings so env overrides in one test don't leak.

    Seeded jobs point at remote mock-up images; tests stay offline.
    """
    monkeypatch.setenv("PDF_INCLUDE_REMOTE_IMAGES", "false")
    reset_settings()
    yield
    reset_settings()


def make_user(user_id: str, role: UserRole, name: str | None = None) -> User:
    return User(
        id=user_id,
        name=name or f"{role.value} {user_id}",
        email=f"{user_id}@signgroup.com",
        password="password123",
        role=role,
        permissions=default_permissions_for(role),
    )


@pytest.fixture
def admin() -> User:
    return make_user("user-1", UserRole.ADMIN, "Admin User")


@pytest.fixture
def sales_user() -> User:
    return make_user("user-2", UserRole.SALES, "Sales Person")


@pytest.fixture
def other_sales() -> User:
    return make_user("user-9", UserRole.SALES, "Other Seller")


@pytest.fixture
def designer() -> User:
    return make_user("user-3", UserRole.DESIGNER, "Designer Person")


@pytest.fixture
def catalog() -> list[CostItem]:
    """Small catalog used by the pricing examples."""
    return [
        CostItem(id="A", name="Channel Letters", unit=CostUnit.ITEM,
                 cost_per_unit=350, category_id="cat-2"),
        CostItem(id="B", name="Labor", unit=CostUnit.HOUR,
                 cost_per_unit=75, category_id="cat-3"),
        CostItem(id="C", name="Vinyl", unit=CostUnit.SQM,
                 cost_per_unit=45, category_id="cat-1"),
    ]


@pytest.fixture
def example_quote() -> QuotationDetails:
    """12 x 350 + 150 fixed, 20% markup, 15% overhead = 5872.5."""
    return QuotationDetails(
        line_items=[QuotationLineItem(item_id="A", quantity=12)],
        fixed_costs=150,
        profit_markup_percentage=20,
        fixed_cost_contribution_percentage=15,
    )


@pytest.fixture
def completed_job() -> Job:
    return Job(
        id="job-100",
        client_name="Coffee Corner",
        job_description="Channel letters",
        stage=ProductionStage.COMPLETED,
        installation_date=date(2023, 10, 15),
        payments=[{"amount": 4500, "date": "2023-10-12", "user_id": "user-1"}],
        invoice_details={"amount": 4500, "date": "2023-10-10", "user_id": "user-2"},
        salesperson_id="user-2",
    )


@pytest.fixture
def fixed_costs() -> list[FixedCostItem]:
    return [
        FixedCostItem(id="fc-1", name="Rent", monthly_amount=3500),
        FixedCostItem(id="fc-2", name="Utilities", monthly_amount=800),
    ]


@pytest.fixture
def stores() -> InMemoryStores:
    """Fresh stores loaded with the fixture data."""
    return seed_stores(InMemoryStores())


@pytest.fixture
def empty_stores() -> InMemoryStores:
    return InMemoryStores()


def extract_pdf_text(pdf_bytes: bytes) -> str:
    """Decompress FlateDecode streams in *pdf_bytes* and return all text.

    fpdf2 compresses page content with zlib. Each ``stream ... endstream``
    block is decompressed where possible and concatenated with the raw
    document, which is enough for substring assertions.
    """
    texts = [pdf_bytes.decode("latin-1")]
    start_marker = b"stream\n"
    end_marker = b"\nendstream"
    idx = 0
    while True:
        s = pdf_bytes.find(start_marker, idx)
        if s == -1:
            break
        s += len(start_marker)
        e = pdf_bytes.find(end_marker, s)
        if e == -1:
            break
        try:
            texts.append(zlib.decompress(pdf_bytes[s:e]).decode("latin-1", errors="replace"))
        except zlib.error:
            pass
        idx = e + len(end_marker)
    return "\n".join(texts)


@pytest.fixture
def pdf_text() -> Callable[[bytes], str]:
    return extract_pdf_text
