"""
Fixed Cost Management Use Cases.

Company-wide monthly overheads and the overhead contribution default
copied into new quotations. All operations sit under the financials
permission module.
"""

from signcrm.application.use_cases.authorization import require_permission
from signcrm.config import get_logger
from signcrm.core.entities.financials import FixedCostItem
from signcrm.core.entities.user import PermissionAction, PermissionModule, User
from signcrm.core.exceptions import FixedCostNotFoundError
from signcrm.core.interfaces.fixed_cost_store import IFixedCostStore
from signcrm.core.services.financial_aggregation import total_monthly_fixed_costs

logger = get_logger(__name__)

_FINANCIALS = PermissionModule.FINANCIALS


class FixedCostUseCases:
    """Use cases for the fixed-cost panel of the financials page."""

    def __init__(self, fixed_cost_store: IFixedCostStore):
        self._store = fixed_cost_store

    def create_fixed_cost(self, item: FixedCostItem, acting_user: User) -> FixedCostItem:
        require_permission(acting_user, _FINANCIALS, PermissionAction.CREATE)
        created = self._store.create_fixed_cost(item.model_copy(update={"id": None}))
        logger.info(
            "fixed_cost_created",
            fixed_cost_id=created.id,
            monthly_amount=created.monthly_amount,
            user_id=acting_user.id,
        )
        return created

    def update_fixed_cost(self, item: FixedCostItem, acting_user: User) -> FixedCostItem:
        require_permission(
            acting_user, _FINANCIALS, PermissionAction.EDIT, resource_id=item.id
        )
        updated = self._store.update_fixed_cost(item)
        logger.info("fixed_cost_updated", fixed_cost_id=updated.id, user_id=acting_user.id)
        return updated

    def delete_fixed_cost(self, fixed_cost_id: str, acting_user: User) -> None:
        require_permission(
            acting_user, _FINANCIALS, PermissionAction.DELETE, resource_id=fixed_cost_id
        )
        if not self._store.delete_fixed_cost(fixed_cost_id):
            raise FixedCostNotFoundError(fixed_cost_id)
        logger.info("fixed_cost_deleted", fixed_cost_id=fixed_cost_id, user_id=acting_user.id)

    def list_fixed_costs(self, acting_user: User) -> list[FixedCostItem]:
        require_permission(acting_user, _FINANCIALS, PermissionAction.VIEW)
        return self._store.list_fixed_costs()

    def total_monthly(self, acting_user: User) -> float:
        return total_monthly_fixed_costs(self.list_fixed_costs(acting_user))

    def get_overhead_default(self) -> float:
        """Contribution percentage pre-filled on new quotations."""
        return self._store.get_contribution_percentage()

    def set_overhead_default(self, percentage: float, acting_user: User) -> float:
        """
        Change the contribution default.

        Existing jobs keep the percentage they were quoted with.
        """
        require_permission(acting_user, _FINANCIALS, PermissionAction.EDIT)
        previous = self._store.get_contribution_percentage()
        value = self._store.set_contribution_percentage(percentage)
        logger.info(
            "overhead_default_changed",
            previous=previous,
            current=value,
            user_id=acting_user.id,
        )
        return value
