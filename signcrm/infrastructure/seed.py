"""
Fixture data loaded into fresh stores at process start.

Mirrors the shop's starting catalog, overheads, staff and a handful of
sample jobs.
"""

from signcrm.config import get_logger
from signcrm.core.entities.catalog import (
    AVAILABLE_CATEGORY_COLORS,
    CostItem,
    CostUnit,
    ItemCategory,
)
from signcrm.core.entities.financials import FixedCostItem
from signcrm.core.entities.job import InvoiceDetails, Job, PaymentRecord, ProductionStage
from signcrm.core.entities.quotation import QuotationDetails, QuotationLineItem
from signcrm.core.entities.user import DEFAULT_PASSWORD, User, UserRole
from signcrm.core.services.permissions import default_permissions_for
from signcrm.infrastructure.storage.memory import InMemoryStores

logger = get_logger(__name__)


def initial_categories() -> list[ItemCategory]:
    return [
        ItemCategory(id="cat-1", name="Materials", icon="CubeIcon",
                     color=AVAILABLE_CATEGORY_COLORS["Blue"]),
        ItemCategory(id="cat-2", name="Hardware & Electronics", icon="WrenchScrewdriverIcon",
                     color=AVAILABLE_CATEGORY_COLORS["Yellow"]),
        ItemCategory(id="cat-3", name="Labor & Services", icon="UsersIcon",
                     color=AVAILABLE_CATEGORY_COLORS["Green"]),
        ItemCategory(id="cat-4", name="Consumables", icon="SparklesIcon",
                     color=AVAILABLE_CATEGORY_COLORS["Purple"]),
    ]


def initial_cost_items() -> list[CostItem]:
    return [
        CostItem(id="ci-1", name="Channel Letters (LED)", unit=CostUnit.ITEM,
                 cost_per_unit=350, category_id="cat-2"),
        CostItem(id="ci-2", name="Aluminum Composite Panel", unit=CostUnit.SQM,
                 cost_per_unit=80, category_id="cat-1"),
        CostItem(id="ci-3", name="Vinyl Printing (Full Color)", unit=CostUnit.SQM,
                 cost_per_unit=45, category_id="cat-1"),
        CostItem(id="ci-4", name="Acrylic Sheet (3mm)", unit=CostUnit.SQM,
                 cost_per_unit=60, category_id="cat-1"),
        CostItem(id="ci-5", name="LED Modules", unit=CostUnit.ITEM,
                 cost_per_unit=5, category_id="cat-2"),
        CostItem(id="ci-6", name="Labor / Installation", unit=CostUnit.HOUR,
                 cost_per_unit=75, category_id="cat-3"),
        CostItem(id="ci-7", name="Vehicle Wrap Vinyl", unit=CostUnit.SQM,
                 cost_per_unit=55, category_id="cat-1"),
    ]


def initial_fixed_costs() -> list[FixedCostItem]:
    return [
        FixedCostItem(id="fc-1", name="Workshop Rent", monthly_amount=3500),
        FixedCostItem(id="fc-2", name="Utilities (Elec, Water, Web)", monthly_amount=800),
        FixedCostItem(id="fc-3", name="Software Subscriptions", monthly_amount=250),
        FixedCostItem(id="fc-4", name="Insurance", monthly_amount=300),
        FixedCostItem(id="fc-5", name="Admin Salaries", monthly_amount=4000),
    ]


def initial_users() -> list[User]:
    staff = [
        ("user-1", "Admin User", "admin@signgroup.com", UserRole.ADMIN),
        ("user-2", "Sales Person", "sales@signgroup.com", UserRole.SALES),
        ("user-3", "Designer Person", "designer@signgroup.com", UserRole.DESIGNER),
        ("user-4", "Production Person", "production@signgroup.com", UserRole.PRODUCTION),
        ("user-5", "Installer Person", "installer@signgroup.com", UserRole.INSTALLATION),
    ]
    return [
        User(
            id=user_id,
            name=name,
            email=email,
            password=DEFAULT_PASSWORD,
            role=role,
            permissions=default_permissions_for(role),
        )
        for user_id, name, email, role in staff
    ]


def _quote(lines: list[tuple[str, float]], fixed_costs: float, markup: float) -> QuotationDetails:
    return QuotationDetails(
        line_items=[QuotationLineItem(item_id=i, quantity=q) for i, q in lines],
        fixed_costs=fixed_costs,
        profit_markup_percentage=markup,
        fixed_cost_contribution_percentage=15,
    )


def initial_jobs() -> list[Job]:
    return [
        Job(
            id="job-1",
            client_name="Coffee Corner",
            client_email="info@coffeecorner.com",
            client_phone="020 7946 0958",
            installation_address="123 High Street, London, E1 7AD",
            job_description="Main storefront channel letter sign with LED lighting.",
            notes=(
                "Client wants the sign to be extra bright. Check power supply "
                "requirements and use premium LEDs."
            ),
            quotation_details=_quote([("ci-1", 12), ("ci-5", 50), ("ci-6", 8)], 150, 20),
            invoice_details=InvoiceDetails(amount=4500, date="2023-10-10", user_id="user-2"),
            payments=[PaymentRecord(amount=4500, date="2023-10-12", user_id="user-1")],
            stage=ProductionStage.COMPLETED,
            installation_date="2023-10-15",
            mockup_image="https://picsum.photos/seed/job1/400/300",
            salesperson_id="user-2",
        ),
        Job(
            id="job-2",
            client_name="Urban Boutique",
            client_email="sarah@urbanboutique.com",
            client_phone="0161 496 0123",
            installation_address="24 Market Street, Manchester, M1 1FN",
            job_description="Window vinyl graphics and an A-frame sidewalk sign.",
            notes=(
                "Client is providing their own artwork. Ensure files are "
                "print-ready (CMYK, 300dpi)."
            ),
            quotation_details=_quote([("ci-3", 8), ("ci-6", 4)], 100, 25),
            invoice_details=InvoiceDetails(amount=1200, date="2023-11-20", user_id="user-2"),
            payments=[PaymentRecord(amount=600, date="2023-11-21", user_id="user-2")],
            stage=ProductionStage.FABRICATION,
            installation_date="2023-11-28",
            mockup_image="https://picsum.photos/seed/job2/400/300",
            salesperson_id="user-2",
        ),
        Job(
            id="job-3",
            client_name="Tech Solutions Inc.",
            client_email="contact@techsolutions.io",
            client_phone="0121 496 0654",
            installation_address="55 Corporation Street, Birmingham, B2 4LS",
            job_description="Lobby logo sign - brushed aluminum finish.",
            notes="",
            quotation_details=_quote([("ci-2", 3), ("ci-4", 2), ("ci-6", 6)], 250, 20),
            invoice_details=InvoiceDetails(),
            payments=[PaymentRecord(amount=1400, date="2023-11-01", user_id="user-1")],
            stage=ProductionStage.QUOTATION_SENT,
            installation_date="2023-12-10",
            mockup_image="https://picsum.photos/seed/job3/400/300",
            salesperson_id="user-1",
        ),
        Job(
            id="job-4",
            client_name="Green Grocers",
            client_email="manager@greengrocers.com",
            client_phone="0113 496 0789",
            installation_address="The Delivery Van",
            job_description="Full vehicle wrap for delivery van.",
            notes="Van needs to be dropped off clean and free of wax. Schedule for a full day.",
            quotation_details=_quote([("ci-7", 25), ("ci-6", 16)], 200, 30),
            invoice_details=InvoiceDetails(amount=3500, date="2023-11-15", user_id="user-2"),
            payments=[
                PaymentRecord(amount=1750, date="2023-11-16", user_id="user-2"),
                PaymentRecord(amount=1750, date="2023-11-22", user_id="user-1"),
            ],
            stage=ProductionStage.INSTALLATION_SCHEDULED,
            installation_date="2023-11-22",
            mockup_image="https://picsum.photos/seed/job4/400/300",
            salesperson_id="user-2",
        ),
        Job(
            id="job-5",
            client_name="The Book Nook",
            client_email="owner@thebooknook.com",
            client_phone="0141 496 0321",
            installation_address="88 Buchanan Street, Glasgow, G1 3HA",
            job_description="New hanging blade sign for storefront.",
            notes="Design phase. Awaiting client concept approval.",
            quotation_details=_quote([], 0, 25),
            invoice_details=InvoiceDetails(),
            payments=[],
            stage=ProductionStage.DESIGN,
            installation_date="2024-01-05",
            mockup_image=None,
            salesperson_id="user-1",
        ),
    ]


def seed_stores(stores: InMemoryStores) -> InMemoryStores:
    """Load the fixture data into ``stores`` and return them."""
    for category in initial_categories():
        stores.catalog.create_category(category)
    for item in initial_cost_items():
        stores.catalog.create_item(item)
    for cost in initial_fixed_costs():
        stores.fixed_costs.create_fixed_cost(cost)
    for user in initial_users():
        stores.users.create_user(user)
    stores.jobs.load(initial_jobs())

    logger.info(
        "stores_seeded",
        categories=len(stores.catalog.list_categories()),
        items=len(stores.catalog.list_items()),
        fixed_costs=len(stores.fixed_costs.list_fixed_costs()),
        users=len(stores.users.list_users()),
        jobs=len(stores.jobs.list_jobs()),
    )
    return stores
