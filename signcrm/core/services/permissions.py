"""
Role defaults and authorization checks.

Checks always read the permissions stored on the user. A role only
supplies the starting point when a user is created or their role is
changed; afterwards the stored flags may differ from the role freely.

Jobs carry an ownership rule on top of the flags:
- edit: Admins may edit any job, others only jobs they sold.
- delete: Admins only, whatever a non-Admin's delete flag says.
"""

from signcrm.core.entities.job import Job
from signcrm.core.entities.user import (
    PermissionAction,
    PermissionModule,
    Permissions,
    PermissionSet,
    User,
    UserRole,
)

_ALL = PermissionSet(view=True, create=True, edit=True, delete=True)
_NONE = PermissionSet()
_VIEW_ONLY = PermissionSet(view=True)

_READ_ONLY_PERMISSIONS = Permissions(
    jobs=_VIEW_ONLY,
    financials=_NONE,
    items=_VIEW_ONLY,
    users=_NONE,
)

ROLE_PERMISSIONS: dict[UserRole, Permissions] = {
    UserRole.ADMIN: Permissions(jobs=_ALL, financials=_ALL, items=_ALL, users=_ALL),
    UserRole.SALES: Permissions(
        jobs=PermissionSet(view=True, create=True, edit=True, delete=False),
        financials=_NONE,
        items=_VIEW_ONLY,
        users=_NONE,
    ),
    UserRole.DESIGNER: _READ_ONLY_PERMISSIONS,
    UserRole.PRODUCTION: _READ_ONLY_PERMISSIONS,
    UserRole.INSTALLATION: _READ_ONLY_PERMISSIONS,
}


def default_permissions_for(role: UserRole) -> Permissions:
    """Independent copy of a role's default permissions."""
    return ROLE_PERMISSIONS[UserRole(role)].model_copy(deep=True)


def change_role(user: User, role: UserRole) -> User:
    """Copy of ``user`` with the new role and that role's default permissions."""
    return user.model_copy(
        update={"role": UserRole(role), "permissions": default_permissions_for(role)}
    )


def is_job_owner(user: User, job: Job) -> bool:
    return job.salesperson_id is not None and job.salesperson_id == user.id


def can_edit_job(user: User, job: Job) -> bool:
    return user.permissions.jobs.edit and (user.is_admin or is_job_owner(user, job))


def can_delete_job(user: User, job: Job) -> bool:
    return user.permissions.jobs.delete and user.is_admin


def authorize(
    user: User,
    module: PermissionModule | str,
    action: PermissionAction | str,
    job: Job | None = None,
) -> bool:
    """
    Whether ``user`` may perform ``action`` in ``module``.

    Passing ``job`` applies the job ownership rule to edit and delete.
    """
    module = PermissionModule(module)
    action = PermissionAction(action)

    if module == PermissionModule.JOBS and job is not None:
        if action == PermissionAction.EDIT:
            return can_edit_job(user, job)
        if action == PermissionAction.DELETE:
            return can_delete_job(user, job)

    return user.permissions.for_module(module).allows(action)
