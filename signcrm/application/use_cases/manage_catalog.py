"""
Catalog Management Use Cases.

Create, update and delete cost items and their categories. A category
can only be deleted once no cost item refers to it.
"""

from dataclasses import dataclass, field

from signcrm.application.dto.requests import SaveCategoryRequest
from signcrm.application.use_cases.authorization import require_permission
from signcrm.config import get_logger
from signcrm.core.entities.catalog import (
    AVAILABLE_CATEGORY_COLORS,
    CategoryColor,
    CostItem,
    ItemCategory,
    palette_color,
)
from signcrm.core.entities.user import PermissionAction, PermissionModule, User
from signcrm.core.exceptions import (
    CategoryInUseError,
    CategoryNotFoundError,
    CostItemNotFoundError,
)
from signcrm.core.interfaces.catalog_store import ICatalogStore

logger = get_logger(__name__)

_ITEMS = PermissionModule.ITEMS


@dataclass
class CategoryGroup:
    """A category with the cost items filed under it."""

    category: ItemCategory
    items: list[CostItem] = field(default_factory=list)

    @property
    def is_deletable(self) -> bool:
        return not self.items


class CatalogUseCases:
    """Use cases for the items page."""

    def __init__(self, catalog_store: ICatalogStore):
        self._catalog_store = catalog_store

    # ------------------------------------------------------------------
    # Cost items
    # ------------------------------------------------------------------

    def create_item(self, item: CostItem, acting_user: User) -> CostItem:
        """Add a cost item. Any id on ``item`` is replaced."""
        require_permission(acting_user, _ITEMS, PermissionAction.CREATE)
        self._require_category(item.category_id)

        created = self._catalog_store.create_item(item.model_copy(update={"id": None}))
        logger.info("cost_item_created", item_id=created.id, user_id=acting_user.id)
        return created

    def update_item(self, item: CostItem, acting_user: User) -> CostItem:
        require_permission(acting_user, _ITEMS, PermissionAction.EDIT, resource_id=item.id)
        self._require_category(item.category_id)

        updated = self._catalog_store.update_item(item)
        logger.info("cost_item_updated", item_id=updated.id, user_id=acting_user.id)
        return updated

    def delete_item(self, item_id: str, acting_user: User) -> None:
        """
        Remove a cost item.

        Quotation lines still referencing it simply stop contributing
        to their job's total.
        """
        require_permission(acting_user, _ITEMS, PermissionAction.DELETE, resource_id=item_id)
        if not self._catalog_store.delete_item(item_id):
            raise CostItemNotFoundError(item_id)
        logger.info("cost_item_deleted", item_id=item_id, user_id=acting_user.id)

    def list_items(self, acting_user: User) -> list[CostItem]:
        require_permission(acting_user, _ITEMS, PermissionAction.VIEW)
        return self._catalog_store.list_items()

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def create_category(
        self, request: SaveCategoryRequest, acting_user: User
    ) -> ItemCategory:
        require_permission(acting_user, _ITEMS, PermissionAction.CREATE)
        created = self._catalog_store.create_category(
            ItemCategory(
                name=request.name,
                icon=request.icon,
                color=self._color(request.color_name),
            )
        )
        logger.info("category_created", category_id=created.id, user_id=acting_user.id)
        return created

    def update_category(
        self, category_id: str, request: SaveCategoryRequest, acting_user: User
    ) -> ItemCategory:
        require_permission(
            acting_user, _ITEMS, PermissionAction.EDIT, resource_id=category_id
        )
        updated = self._catalog_store.update_category(
            ItemCategory(
                id=category_id,
                name=request.name,
                icon=request.icon,
                color=self._color(request.color_name),
            )
        )
        logger.info("category_updated", category_id=category_id, user_id=acting_user.id)
        return updated

    def delete_category(self, category_id: str, acting_user: User) -> None:
        """
        Remove a category.

        Raises:
            CategoryNotFoundError: Unknown category.
            CategoryInUseError: Cost items are still filed under it.
        """
        require_permission(
            acting_user, _ITEMS, PermissionAction.DELETE, resource_id=category_id
        )
        self._require_category(category_id)

        item_count = self._catalog_store.count_items_in_category(category_id)
        if item_count:
            logger.warning(
                "category_delete_rejected",
                category_id=category_id,
                item_count=item_count,
            )
            raise CategoryInUseError(category_id, item_count)

        self._catalog_store.delete_category(category_id)
        logger.info("category_deleted", category_id=category_id, user_id=acting_user.id)

    def is_category_deletable(self, category_id: str) -> bool:
        return self._catalog_store.count_items_in_category(category_id) == 0

    def items_by_category(self, acting_user: User) -> list[CategoryGroup]:
        """Categories in store order, each with its items."""
        require_permission(acting_user, _ITEMS, PermissionAction.VIEW)
        items = self._catalog_store.list_items()
        return [
            CategoryGroup(
                category=category,
                items=[i for i in items if i.category_id == category.id],
            )
            for category in self._catalog_store.list_categories()
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_category(self, category_id: str) -> None:
        if self._catalog_store.get_category(category_id) is None:
            raise CategoryNotFoundError(category_id)

    @staticmethod
    def _color(name: str) -> CategoryColor:
        return AVAILABLE_CATEGORY_COLORS.get(name.capitalize()) or palette_color(name)
