"""Permission guard shared by use cases."""

from signcrm.config import get_logger
from signcrm.core.entities.job import Job
from signcrm.core.entities.user import PermissionAction, PermissionModule, User
from signcrm.core.exceptions import PermissionDeniedError
from signcrm.core.services.permissions import authorize

logger = get_logger(__name__)


def require_permission(
    user: User,
    module: PermissionModule | str,
    action: PermissionAction | str,
    job: Job | None = None,
    resource_id: str | None = None,
) -> None:
    """Raise PermissionDeniedError unless ``authorize`` allows the action."""
    module = PermissionModule(module)
    action = PermissionAction(action)
    if authorize(user, module, action, job=job):
        return

    if resource_id is None and job is not None:
        resource_id = job.id
    logger.warning(
        "permission_denied",
        user_id=user.id,
        module=module.value,
        action=action.value,
        resource_id=resource_id,
    )
    raise PermissionDeniedError(
        user_id=user.id or "",
        module=module.value,
        action=action.value,
        resource_id=resource_id,
    )
