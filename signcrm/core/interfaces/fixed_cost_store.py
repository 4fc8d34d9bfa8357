"""Abstract interface for company fixed-cost storage."""

from abc import ABC, abstractmethod

from signcrm.core.entities.financials import FixedCostItem


class IFixedCostStore(ABC):
    """Interface for monthly fixed costs and the overhead contribution default."""

    @abstractmethod
    def create_fixed_cost(self, item: FixedCostItem) -> FixedCostItem:
        """Assign an id and append a new fixed cost.

        An explicit id that is already stored raises DuplicateRecordError.
        """
        pass

    @abstractmethod
    def get_fixed_cost(self, fixed_cost_id: str) -> FixedCostItem | None:
        """Get fixed cost by ID."""
        pass

    @abstractmethod
    def update_fixed_cost(self, item: FixedCostItem) -> FixedCostItem:
        """Replace a stored fixed cost."""
        pass

    @abstractmethod
    def delete_fixed_cost(self, fixed_cost_id: str) -> bool:
        """Remove a fixed cost. Returns False if it did not exist."""
        pass

    @abstractmethod
    def list_fixed_costs(self) -> list[FixedCostItem]:
        """List fixed costs in insertion order."""
        pass

    @abstractmethod
    def get_contribution_percentage(self) -> float:
        """Overhead contribution percentage copied into new quotations."""
        pass

    @abstractmethod
    def set_contribution_percentage(self, percentage: float) -> float:
        """Set the overhead contribution default."""
        pass
