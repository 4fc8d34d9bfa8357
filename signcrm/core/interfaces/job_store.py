"""Abstract interface for job storage."""

from abc import ABC, abstractmethod

from signcrm.core.entities.job import Job


class IJobStore(ABC):
    """Interface for the in-process job collection."""

    @abstractmethod
    def create_job(self, job: Job) -> Job:
        """Assign an id and store a new job ahead of existing ones.

        An explicit id that is already stored raises DuplicateRecordError.
        """
        pass

    @abstractmethod
    def get_job(self, job_id: str) -> Job | None:
        """Get job by ID."""
        pass

    @abstractmethod
    def update_job(self, job: Job) -> Job:
        """Replace the stored aggregate with the same id."""
        pass

    @abstractmethod
    def delete_job(self, job_id: str) -> bool:
        """Remove a job. Returns False if it did not exist."""
        pass

    @abstractmethod
    def list_jobs(self) -> list[Job]:
        """List jobs in display order (newest first)."""
        pass
