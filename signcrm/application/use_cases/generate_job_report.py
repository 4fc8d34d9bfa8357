"""
Generate Job Report Use Case.

Builds the printable report for a job and renders it to PDF.
"""

from dataclasses import dataclass

from signcrm.application.dto.responses import JobReportResponse
from signcrm.config import get_logger
from signcrm.core.exceptions import JobNotFoundError
from signcrm.core.formatting import format_currency
from signcrm.core.interfaces.catalog_store import ICatalogStore
from signcrm.core.interfaces.job_store import IJobStore
from signcrm.core.interfaces.user_store import IUserStore
from signcrm.core.services.job_report import IJobReportRenderer, JobReport, build_job_report
from signcrm.infrastructure.pdf import Fpdf2JobReportRenderer

logger = get_logger(__name__)


@dataclass
class JobReportResult:
    """Result of job report generation."""

    report: JobReport
    pdf_bytes: bytes
    file_name: str

    @property
    def file_size(self) -> int:
        return len(self.pdf_bytes)


class GenerateJobReportUseCase:
    """
    Use case for printing a job.

    Flow:
    1. Load the job
    2. Build the report from the current catalog and users
    3. Render PDF via the job report renderer
    """

    def __init__(
        self,
        job_store: IJobStore,
        catalog_store: ICatalogStore,
        user_store: IUserStore,
        renderer: IJobReportRenderer | None = None,
    ):
        self._job_store = job_store
        self._catalog_store = catalog_store
        self._user_store = user_store
        self._renderer = renderer or Fpdf2JobReportRenderer()

    def execute(self, job_id: str) -> JobReportResult:
        """
        Generate the report for ``job_id``.

        Raises:
            JobNotFoundError: No such job.
        """
        logger.info("job_report_started", job_id=job_id)

        job = self._job_store.get_job(job_id)
        if job is None:
            raise JobNotFoundError(job_id)

        report = build_job_report(
            job,
            self._catalog_store.list_items(),
            self._user_store.list_users(),
        )
        pdf_bytes = self._renderer.render(report)

        logger.info(
            "job_report_complete",
            job_id=job_id,
            file_size=len(pdf_bytes),
            unresolved_items=len(report.quotation.unresolved_item_ids),
        )
        return JobReportResult(
            report=report,
            pdf_bytes=pdf_bytes,
            file_name=f"job_report_{job_id}.pdf",
        )

    @staticmethod
    def to_response(result: JobReportResult) -> JobReportResponse:
        """Convert result to a response payload."""
        return JobReportResponse(
            job_id=result.report.job_id,
            file_name=result.file_name,
            file_size=result.file_size,
            quote_total=format_currency(result.report.quotation.final_total),
        )
