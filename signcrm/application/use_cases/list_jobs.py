"""List Jobs Use Case."""

from signcrm.application.use_cases.authorization import require_permission
from signcrm.core.entities.job import Job
from signcrm.core.entities.user import PermissionAction, PermissionModule, User
from signcrm.core.interfaces.job_store import IJobStore


class ListJobsUseCase:
    """Jobs in display order, optionally filtered by a search term."""

    def __init__(self, job_store: IJobStore):
        self._job_store = job_store

    def execute(self, acting_user: User, search: str = "") -> list[Job]:
        """
        Jobs visible to ``acting_user``.

        ``search`` matches case-insensitively against client name or
        job description; blank returns everything.
        """
        require_permission(acting_user, PermissionModule.JOBS, PermissionAction.VIEW)
        jobs = self._job_store.list_jobs()
        term = search.strip()
        if not term:
            return jobs
        return [job for job in jobs if job.matches_search(term)]
