"""
Delete Job Use Case.

Only Admins holding the jobs.delete flag may remove a job.
"""

from signcrm.application.use_cases.authorization import require_permission
from signcrm.config import get_logger
from signcrm.core.entities.job import Job
from signcrm.core.entities.user import PermissionAction, PermissionModule, User
from signcrm.core.exceptions import JobNotFoundError
from signcrm.core.interfaces.job_store import IJobStore

logger = get_logger(__name__)


class DeleteJobUseCase:
    """Use case for deleting a job."""

    def __init__(self, job_store: IJobStore):
        self._job_store = job_store

    def execute(self, job_id: str, acting_user: User) -> Job:
        """
        Delete a job and return what was removed.

        Raises:
            JobNotFoundError: No job with ``job_id``.
            PermissionDeniedError: The user may not delete it.
        """
        job = self._job_store.get_job(job_id)
        if job is None:
            raise JobNotFoundError(job_id)

        require_permission(
            acting_user, PermissionModule.JOBS, PermissionAction.DELETE, job=job
        )
        self._job_store.delete_job(job_id)

        logger.info("job_deleted", job_id=job_id, user_id=acting_user.id)
        return job
