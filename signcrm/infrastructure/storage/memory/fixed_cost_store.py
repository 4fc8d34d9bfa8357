"""In-memory implementation of company fixed-cost storage."""

from signcrm.config import get_logger, get_settings
from signcrm.core.entities.financials import FixedCostItem
from signcrm.core.exceptions import FixedCostNotFoundError
from signcrm.core.interfaces.fixed_cost_store import IFixedCostStore
from signcrm.infrastructure.storage.memory.base import InMemoryCollection

logger = get_logger(__name__)


class InMemoryFixedCostStore(IFixedCostStore):
    """Monthly overheads and the contribution default for new quotations."""

    def __init__(self, contribution_percentage: float | None = None) -> None:
        self._costs: InMemoryCollection[FixedCostItem] = InMemoryCollection("fc")
        if contribution_percentage is None:
            contribution_percentage = (
                get_settings().pricing.default_fixed_cost_contribution_percentage
            )
        self._contribution_percentage = float(contribution_percentage)

    def create_fixed_cost(self, item: FixedCostItem) -> FixedCostItem:
        created = self._costs.add(item)
        logger.debug("fixed_cost_created", fixed_cost_id=created.id)
        return created

    def get_fixed_cost(self, fixed_cost_id: str) -> FixedCostItem | None:
        return self._costs.get(fixed_cost_id)

    def update_fixed_cost(self, item: FixedCostItem) -> FixedCostItem:
        if not self._costs.contains(item.id):
            raise FixedCostNotFoundError(item.id or "")
        return self._costs.replace(item.id, item)  # type: ignore[arg-type]

    def delete_fixed_cost(self, fixed_cost_id: str) -> bool:
        return self._costs.remove(fixed_cost_id)

    def list_fixed_costs(self) -> list[FixedCostItem]:
        return self._costs.values()

    def get_contribution_percentage(self) -> float:
        return self._contribution_percentage

    def set_contribution_percentage(self, percentage: float) -> float:
        self._contribution_percentage = float(percentage)
        return self._contribution_percentage
