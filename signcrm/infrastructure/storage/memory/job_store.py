"""In-memory implementation of job storage."""

from signcrm.config import get_logger
from signcrm.core.entities.job import Job
from signcrm.core.exceptions import JobNotFoundError
from signcrm.core.interfaces.job_store import IJobStore
from signcrm.infrastructure.storage.memory.base import InMemoryCollection

logger = get_logger(__name__)


class InMemoryJobStore(IJobStore):
    """Job collection kept for the lifetime of the process."""

    def __init__(self) -> None:
        self._jobs: InMemoryCollection[Job] = InMemoryCollection("job")

    def create_job(self, job: Job) -> Job:
        """Store a new job ahead of existing ones."""
        created = self._jobs.add(job, first=True)
        logger.debug("job_created", job_id=created.id)
        return created

    def get_job(self, job_id: str) -> Job | None:
        return self._jobs.get(job_id)

    def update_job(self, job: Job) -> Job:
        if not self._jobs.contains(job.id):
            raise JobNotFoundError(job.id or "")
        return self._jobs.replace(job.id, job)  # type: ignore[arg-type]

    def delete_job(self, job_id: str) -> bool:
        return self._jobs.remove(job_id)

    def list_jobs(self) -> list[Job]:
        return self._jobs.values()

    def load(self, jobs: list[Job]) -> None:
        """Bulk load in display order (used for seeding)."""
        for job in jobs:
            self._jobs.add(job)
