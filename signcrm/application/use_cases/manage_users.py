"""
User Management Use Cases.

Admin-facing account management. Stored permission flags are
authoritative; a role only seeds them on creation or role change.
"""

from dataclasses import dataclass

from signcrm.application.dto.requests import CreateUserRequest
from signcrm.application.use_cases.authorization import require_permission
from signcrm.config import get_logger
from signcrm.core.entities.user import (
    DEFAULT_PASSWORD,
    PermissionAction,
    PermissionModule,
    User,
    UserRole,
)
from signcrm.core.exceptions import SelfDeletionError, UserNotFoundError
from signcrm.core.interfaces.user_store import IUserStore
from signcrm.core.services.permissions import change_role, default_permissions_for

logger = get_logger(__name__)

_USERS = PermissionModule.USERS


@dataclass
class UserUpdateResult:
    """
    Result of editing a user.

    ``acting_user`` is the refreshed session user: the updated record
    when users edit themselves, otherwise unchanged.
    """

    user: User
    acting_user: User


class UserUseCases:
    """Use cases for the user management page."""

    def __init__(self, user_store: IUserStore):
        self._user_store = user_store

    def list_users(self, acting_user: User) -> list[User]:
        require_permission(acting_user, _USERS, PermissionAction.VIEW)
        return self._user_store.list_users()

    def create_user(self, request: CreateUserRequest, acting_user: User) -> User:
        """Create an account with the default password."""
        require_permission(acting_user, _USERS, PermissionAction.CREATE)

        permissions = request.permissions or default_permissions_for(request.role)
        created = self._user_store.create_user(
            User(
                name=request.name,
                email=request.email,
                password=DEFAULT_PASSWORD,
                role=request.role,
                permissions=permissions,
            )
        )
        logger.info(
            "user_created",
            user_id=created.id,
            role=created.role.value,
            created_by=acting_user.id,
        )
        return created

    def update_user(self, user: User, acting_user: User) -> UserUpdateResult:
        """
        Replace a user's name, email, role and permissions.

        The password is not editable here and is kept as stored.
        """
        require_permission(acting_user, _USERS, PermissionAction.EDIT, resource_id=user.id)
        stored = self._get(user.id or "")

        updated = self._user_store.update_user(
            user.model_copy(update={"password": stored.password})
        )
        logger.info("user_updated", user_id=updated.id, updated_by=acting_user.id)
        return UserUpdateResult(user=updated, acting_user=self._refresh(acting_user, updated))

    def change_user_role(
        self, user_id: str, role: UserRole, acting_user: User
    ) -> UserUpdateResult:
        """Switch role and reset permissions to that role's defaults."""
        require_permission(acting_user, _USERS, PermissionAction.EDIT, resource_id=user_id)
        stored = self._get(user_id)

        updated = self._user_store.update_user(change_role(stored, role))
        logger.info(
            "user_role_changed",
            user_id=user_id,
            from_role=stored.role.value,
            to_role=updated.role.value,
            updated_by=acting_user.id,
        )
        return UserUpdateResult(user=updated, acting_user=self._refresh(acting_user, updated))

    def delete_user(self, user_id: str, acting_user: User) -> None:
        """
        Delete an account.

        Raises:
            SelfDeletionError: ``user_id`` is the acting user.
            UserNotFoundError: No such user.
        """
        if user_id == acting_user.id:
            logger.warning("user_self_deletion_rejected", user_id=user_id)
            raise SelfDeletionError(user_id)

        require_permission(acting_user, _USERS, PermissionAction.DELETE, resource_id=user_id)
        if not self._user_store.delete_user(user_id):
            raise UserNotFoundError(user_id)
        logger.info("user_deleted", user_id=user_id, deleted_by=acting_user.id)

    def _get(self, user_id: str) -> User:
        user = self._user_store.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    @staticmethod
    def _refresh(acting_user: User, updated: User) -> User:
        return updated if updated.id == acting_user.id else acting_user
