"""PDF generation infrastructure."""

from signcrm.infrastructure.pdf.job_report_renderer import Fpdf2JobReportRenderer

__all__ = [
    "Fpdf2JobReportRenderer",
]
