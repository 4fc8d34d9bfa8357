"""Abstract interface for catalog storage (cost items and categories)."""

from abc import ABC, abstractmethod

from signcrm.core.entities.catalog import CostItem, ItemCategory


class ICatalogStore(ABC):
    """Interface for cost item and category persistence."""

    # Cost items

    @abstractmethod
    def create_item(self, item: CostItem) -> CostItem:
        """Assign an id and append a new cost item.

        An explicit id that is already stored raises DuplicateRecordError.
        """
        pass

    @abstractmethod
    def get_item(self, item_id: str) -> CostItem | None:
        """Get cost item by ID."""
        pass

    @abstractmethod
    def update_item(self, item: CostItem) -> CostItem:
        """Replace a stored cost item."""
        pass

    @abstractmethod
    def delete_item(self, item_id: str) -> bool:
        """Remove a cost item. Returns False if it did not exist."""
        pass

    @abstractmethod
    def list_items(self) -> list[CostItem]:
        """List cost items in insertion order."""
        pass

    # Categories

    @abstractmethod
    def create_category(self, category: ItemCategory) -> ItemCategory:
        """Assign an id and append a new category.

        An explicit id that is already stored raises DuplicateRecordError.
        """
        pass

    @abstractmethod
    def get_category(self, category_id: str) -> ItemCategory | None:
        """Get category by ID."""
        pass

    @abstractmethod
    def update_category(self, category: ItemCategory) -> ItemCategory:
        """Replace a stored category."""
        pass

    @abstractmethod
    def delete_category(self, category_id: str) -> bool:
        """Remove a category. Returns False if it did not exist."""
        pass

    @abstractmethod
    def list_categories(self) -> list[ItemCategory]:
        """List categories in insertion order."""
        pass

    @abstractmethod
    def count_items_in_category(self, category_id: str) -> int:
        """Number of cost items referencing a category."""
        pass
