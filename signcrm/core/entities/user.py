"""User accounts and their per-module permission flags."""

from enum import Enum

from pydantic import BaseModel, Field

# Assigned to every new account; users change it from their profile
DEFAULT_PASSWORD = "password123"


class UserRole(str, Enum):
    """Job function of a user. Implies a default permission set only."""

    ADMIN = "Admin"
    SALES = "Sales"
    DESIGNER = "Designer"
    PRODUCTION = "Production"
    INSTALLATION = "Installation"


class PermissionModule(str, Enum):
    """Areas of the application gated by permissions."""

    JOBS = "jobs"
    FINANCIALS = "financials"
    ITEMS = "items"
    USERS = "users"


class PermissionAction(str, Enum):
    """CRUD action within a module."""

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"


class PermissionSet(BaseModel):
    """CRUD flags for one module."""

    view: bool = False
    create: bool = False
    edit: bool = False
    delete: bool = False

    def allows(self, action: PermissionAction | str) -> bool:
        return bool(getattr(self, PermissionAction(action).value))


class Permissions(BaseModel):
    """Stored, authoritative permission flags for a user."""

    jobs: PermissionSet = Field(default_factory=PermissionSet)
    financials: PermissionSet = Field(default_factory=PermissionSet)
    items: PermissionSet = Field(default_factory=PermissionSet)
    users: PermissionSet = Field(default_factory=PermissionSet)

    def for_module(self, module: PermissionModule | str) -> PermissionSet:
        return getattr(self, PermissionModule(module).value)


class User(BaseModel):
    """
    Application user.

    ``password`` is stored in plain text; login is stubbed so nothing
    stronger protects it.
    """

    id: str | None = None
    name: str
    email: str
    password: str | None = None
    role: UserRole = UserRole.SALES
    permissions: Permissions = Field(default_factory=Permissions)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
