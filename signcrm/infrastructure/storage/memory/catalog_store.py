"""In-memory implementation of catalog storage."""

from signcrm.config import get_logger
from signcrm.core.entities.catalog import CostItem, ItemCategory
from signcrm.core.exceptions import CategoryNotFoundError, CostItemNotFoundError
from signcrm.core.interfaces.catalog_store import ICatalogStore
from signcrm.infrastructure.storage.memory.base import InMemoryCollection

logger = get_logger(__name__)


class InMemoryCatalogStore(ICatalogStore):
    """Cost items and categories kept for the lifetime of the process."""

    def __init__(self) -> None:
        self._items: InMemoryCollection[CostItem] = InMemoryCollection("ci")
        self._categories: InMemoryCollection[ItemCategory] = InMemoryCollection("cat")

    # Cost items

    def create_item(self, item: CostItem) -> CostItem:
        created = self._items.add(item)
        logger.debug("cost_item_created", item_id=created.id)
        return created

    def get_item(self, item_id: str) -> CostItem | None:
        return self._items.get(item_id)

    def update_item(self, item: CostItem) -> CostItem:
        if not self._items.contains(item.id):
            raise CostItemNotFoundError(item.id or "")
        return self._items.replace(item.id, item)  # type: ignore[arg-type]

    def delete_item(self, item_id: str) -> bool:
        return self._items.remove(item_id)

    def list_items(self) -> list[CostItem]:
        return self._items.values()

    # Categories

    def create_category(self, category: ItemCategory) -> ItemCategory:
        created = self._categories.add(category)
        logger.debug("category_created", category_id=created.id)
        return created

    def get_category(self, category_id: str) -> ItemCategory | None:
        return self._categories.get(category_id)

    def update_category(self, category: ItemCategory) -> ItemCategory:
        if not self._categories.contains(category.id):
            raise CategoryNotFoundError(category.id or "")
        return self._categories.replace(category.id, category)  # type: ignore[arg-type]

    def delete_category(self, category_id: str) -> bool:
        return self._categories.remove(category_id)

    def list_categories(self) -> list[ItemCategory]:
        return self._categories.values()

    def count_items_in_category(self, category_id: str) -> int:
        return sum(1 for item in self._items.values() if item.category_id == category_id)
