"""Tests for UserUseCases."""

import pytest

from signcrm.application.dto.requests import CreateUserRequest
from signcrm.application.use_cases.manage_users import UserUseCases
from signcrm.core.entities.user import DEFAULT_PASSWORD, Permissions, PermissionSet, UserRole
from signcrm.core.exceptions import (
    PermissionDeniedError,
    SelfDeletionError,
    UserNotFoundError,
)
from signcrm.core.services.permissions import ROLE_PERMISSIONS


@pytest.fixture
def use_cases(stores):
    return UserUseCases(stores.users)


class TestCreateUser:
    def test_defaults(self, use_cases, admin):
        created = use_cases.create_user(
            CreateUserRequest(name="New Fitter", email="fitter@signgroup.com",
                              role=UserRole.INSTALLATION),
            admin,
        )
        assert created.id == "user-6"
        assert created.password == DEFAULT_PASSWORD
        assert created.permissions == ROLE_PERMISSIONS[UserRole.INSTALLATION]

    def test_explicit_permissions_kept(self, use_cases, admin):
        custom = Permissions(financials=PermissionSet(view=True))
        created = use_cases.create_user(
            CreateUserRequest(name="Bookkeeper", email="books@signgroup.com",
                              role=UserRole.DESIGNER, permissions=custom),
            admin,
        )
        assert created.permissions.financials.view
        assert not created.permissions.jobs.view

    def test_sales_cannot_create(self, use_cases, sales_user):
        with pytest.raises(PermissionDeniedError):
            use_cases.create_user(CreateUserRequest(name="X", email="x@y"), sales_user)


class TestUpdateUser:
    def test_password_preserved(self, use_cases, stores, admin):
        user = stores.users.get_user("user-3").model_copy(
            update={"name": "Lead Designer", "password": "hijack"}
        )
        result = use_cases.update_user(user, admin)
        assert result.user.name == "Lead Designer"
        assert stores.users.get_user("user-3").password == DEFAULT_PASSWORD
        assert result.acting_user == admin

    def test_self_edit_refreshes_acting_user(self, use_cases, stores):
        me = stores.users.get_user("user-1")
        result = use_cases.update_user(me.model_copy(update={"name": "Boss"}), me)
        assert result.acting_user.name == "Boss"

    def test_unknown_user(self, use_cases, admin):
        ghost = admin.model_copy(update={"id": "user-404"})
        with pytest.raises(UserNotFoundError):
            use_cases.update_user(ghost, admin)

    def test_change_role_resets_permissions(self, use_cases, stores, admin):
        result = use_cases.change_user_role("user-3", UserRole.SALES, admin)
        assert result.user.role == UserRole.SALES
        assert stores.users.get_user("user-3").permissions == ROLE_PERMISSIONS[UserRole.SALES]


class TestDeleteUser:
    def test_delete(self, use_cases, stores, admin):
        use_cases.delete_user("user-5", admin)
        assert stores.users.get_user("user-5") is None

    def test_self_deletion_rejected(self, use_cases, stores, admin):
        with pytest.raises(SelfDeletionError):
            use_cases.delete_user(admin.id, admin)
        assert stores.users.get_user(admin.id) is not None

    def test_unknown(self, use_cases, admin):
        with pytest.raises(UserNotFoundError):
            use_cases.delete_user("user-404", admin)

    def test_requires_permission(self, use_cases, sales_user):
        with pytest.raises(PermissionDeniedError):
            use_cases.delete_user("user-5", sales_user)
