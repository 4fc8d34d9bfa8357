"""Unit tests for user and permission entities."""

import pytest

from signcrm.core.entities.user import (
    PermissionAction,
    PermissionModule,
    Permissions,
    PermissionSet,
    User,
    UserRole,
)


class TestPermissionSet:
    def test_all_false_by_default(self):
        perms = PermissionSet()
        assert not any(perms.allows(a) for a in PermissionAction)

    def test_allows_accepts_string(self):
        assert PermissionSet(edit=True).allows("edit")

    def test_unknown_action_rejected(self):
        with pytest.raises(ValueError):
            PermissionSet().allows("approve")


class TestPermissions:
    def test_for_module(self):
        perms = Permissions(items=PermissionSet(view=True))
        assert perms.for_module(PermissionModule.ITEMS).view
        assert not perms.for_module("users").view


class TestUser:
    def test_is_admin(self):
        assert User(name="A", email="a@x", role=UserRole.ADMIN).is_admin
        assert not User(name="S", email="s@x", role=UserRole.SALES).is_admin

    def test_roles(self):
        assert {r.value for r in UserRole} == {
            "Admin",
            "Sales",
            "Designer",
            "Production",
            "Installation",
        }
