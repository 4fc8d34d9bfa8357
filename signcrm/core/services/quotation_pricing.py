"""
Quotation pricing engine.

Turns a job's quotation details into a price:

    line_items_total = sum(cost_per_unit * quantity)
    subtotal         = line_items_total + fixed_costs
    markup           = subtotal * profit_markup_percentage / 100
    contribution     = subtotal * fixed_cost_contribution_percentage / 100
    final_total      = subtotal + markup + contribution

Every price shown anywhere (job rows, cards, the job form, reports) must
come from ``compute_quotation_total`` or ``compute_quotation_breakdown``.
Nothing is rounded here; rounding happens when a value is formatted.
"""

from collections.abc import Iterable, Mapping

from signcrm.core.entities.catalog import CostItem
from signcrm.core.entities.quotation import (
    PricedLineItem,
    QuotationBreakdown,
    QuotationDetails,
    QuotationLineItem,
)

CatalogLike = Iterable[CostItem] | Mapping[str, CostItem]


def index_catalog(catalog: CatalogLike) -> dict[str, CostItem]:
    """
    Build an id -> item lookup.

    When an id appears twice the first occurrence wins, matching a
    linear search over the catalog.
    """
    if isinstance(catalog, Mapping):
        return dict(catalog)
    index: dict[str, CostItem] = {}
    for item in catalog:
        if item.id is not None:
            index.setdefault(item.id, item)
    return index


def resolve_line_item(
    line: QuotationLineItem, index: Mapping[str, CostItem]
) -> CostItem | None:
    """Look up the catalog item a line refers to, or None if deleted."""
    return index.get(line.item_id)


def line_item_total(line: QuotationLineItem, index: Mapping[str, CostItem]) -> float:
    """Cost of one line; unresolvable items cost nothing."""
    item = resolve_line_item(line, index)
    if item is None:
        return 0.0
    return item.cost_per_unit * line.quantity


def compute_quotation_breakdown(
    details: QuotationDetails, catalog: CatalogLike
) -> QuotationBreakdown:
    """Price a quotation and keep every intermediate figure."""
    index = index_catalog(catalog)

    lines: list[PricedLineItem] = []
    unresolved: list[str] = []
    line_items_total = 0.0

    for position, line in enumerate(details.line_items, start=1):
        item = resolve_line_item(line, index)
        if item is None:
            unresolved.append(line.item_id)
            continue
        total = item.cost_per_unit * line.quantity
        line_items_total = line_items_total + total
        lines.append(
            PricedLineItem(
                position=position,
                item_id=line.item_id,
                name=item.name,
                unit=item.unit,
                quantity=line.quantity,
                cost_per_unit=item.cost_per_unit,
                line_total=total,
            )
        )

    subtotal = line_items_total + details.fixed_costs
    profit_markup_amount = subtotal * (details.profit_markup_percentage / 100)
    contribution_amount = subtotal * (details.fixed_cost_contribution_percentage / 100)
    final_total = subtotal + profit_markup_amount + contribution_amount

    return QuotationBreakdown(
        lines=lines,
        unresolved_item_ids=unresolved,
        line_items_total=line_items_total,
        fixed_costs=details.fixed_costs,
        subtotal=subtotal,
        profit_markup_percentage=details.profit_markup_percentage,
        profit_markup_amount=profit_markup_amount,
        fixed_cost_contribution_percentage=details.fixed_cost_contribution_percentage,
        fixed_cost_contribution_amount=contribution_amount,
        final_total=final_total,
    )


def compute_quotation_total(details: QuotationDetails, catalog: CatalogLike) -> float:
    """Final quoted price for a job. Never raises on bad references."""
    return compute_quotation_breakdown(details, catalog).final_total
