"""
Job report PDF renderer using fpdf2.

Lays out a ``JobReport``: client overview, quotation breakdown,
financial summary with payment history, internal notes and the mock-up
image.
"""

from datetime import datetime, timezone

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from signcrm.config import get_logger
from signcrm.config.settings import CurrencySettings, PdfSettings, get_settings
from signcrm.core.formatting import format_currency, format_date
from signcrm.core.services.job_report import IJobReportRenderer, JobReport

logger = get_logger(__name__)

_REMOTE_PREFIXES = ("http://", "https://")


def _latin1(text: str) -> str:
    """Replace characters the core Helvetica font cannot encode."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


class _JobReportPdf(FPDF):
    """FPDF subclass that renders a footer on every page."""

    def __init__(self, pdf_settings: PdfSettings) -> None:
        super().__init__()
        self._pdf_settings = pdf_settings
        self._generation_date = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 5, _latin1(self._pdf_settings.footer_text), align="L")
        self.set_x(-60)
        self.cell(
            0,
            5,
            f"Page {self.page_no()} of {{nb}} | {self._generation_date}",
            align="R",
        )


class Fpdf2JobReportRenderer(IJobReportRenderer):
    """Renders job reports to PDF bytes."""

    def __init__(
        self,
        pdf_settings: PdfSettings | None = None,
        currency: CurrencySettings | None = None,
    ) -> None:
        settings = get_settings()
        self._settings = pdf_settings or settings.pdf
        self._currency = currency or settings.currency

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, report: JobReport) -> bytes:
        pdf = _JobReportPdf(self._settings)
        pdf.alias_nb_pages()
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.add_page()

        self._render_header(pdf, report)
        self._render_overview(pdf, report)
        self._render_quotation(pdf, report)
        self._render_financials(pdf, report)
        if report.notes:
            self._render_notes(pdf, report.notes)
        if report.has_mockup and report.mockup_image:
            self._render_mockup(pdf, report)

        return bytes(pdf.output())

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _money(self, amount: float) -> str:
        return format_currency(amount, self._currency)

    def _render_header(self, pdf: FPDF, report: JobReport) -> None:
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(
            0, 5, _latin1(self._settings.company_name),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.ln(2)
        pdf.set_font("Helvetica", "B", 18)
        pdf.cell(
            0, 12, _latin1(self._settings.header_text.upper()), align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.set_font("Helvetica", "", 10)
        pdf.cell(
            0, 6, f"Job: {report.job_id or 'New job'}", align="C",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        y = pdf.get_y() + 2
        pdf.set_draw_color(100, 100, 100)
        pdf.line(10, y, 200, y)
        pdf.set_draw_color(0, 0, 0)
        pdf.ln(6)

    @staticmethod
    def _section_title(pdf: FPDF, title: str) -> None:
        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(0, 8, title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    @staticmethod
    def _pair(pdf: FPDF, label: str, value: str) -> None:
        pdf.set_font("Helvetica", "B", 9)
        pdf.cell(45, 6, f"{label}:")
        pdf.set_font("Helvetica", "", 9)
        pdf.multi_cell(0, 6, _latin1(value), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def _render_overview(self, pdf: FPDF, report: JobReport) -> None:
        self._section_title(pdf, "Client & Job Overview")
        self._pair(pdf, "Client Name", report.client_name)
        self._pair(pdf, "Email", report.client_email)
        self._pair(pdf, "Phone", report.client_phone)
        self._pair(pdf, "Installation Address", report.installation_address)
        self._pair(pdf, "Job Description", report.job_description)
        self._pair(pdf, "Salesperson", report.salesperson_name)
        self._pair(pdf, "Current Stage", report.stage.value)
        self._pair(pdf, "Installation Date", format_date(report.installation_date, long=True))
        pdf.ln(3)

    def _render_quotation(self, pdf: FPDF, report: JobReport) -> None:
        self._section_title(pdf, "Quotation Details")

        col_widths = [80, 25, 20, 30, 35]
        headers = ["Item", "Quantity", "Unit", "Cost/Unit", "Total"]

        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(70, 70, 70)
        pdf.set_text_color(255, 255, 255)
        for i, header in enumerate(headers):
            pdf.cell(col_widths[i], 7, header, border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)

        quote = report.quotation
        pdf.set_font("Helvetica", "", 8)
        for idx, line in enumerate(quote.lines, 1):
            fill = idx % 2 == 0
            if fill:
                pdf.set_fill_color(240, 240, 240)
            pdf.cell(col_widths[0], 6, _latin1(line.name[:45]), border=1, fill=fill)
            pdf.cell(col_widths[1], 6, f"{line.quantity:g}", border=1, align="R", fill=fill)
            pdf.cell(col_widths[2], 6, line.unit.value, border=1, align="C", fill=fill)
            pdf.cell(
                col_widths[3], 6, _latin1(self._money(line.cost_per_unit)),
                border=1, align="R", fill=fill,
            )
            pdf.cell(
                col_widths[4], 6, _latin1(self._money(line.line_total)),
                border=1, align="R", fill=fill,
            )
            pdf.ln()
        pdf.ln(2)

        rows = [
            ("Line Items Total", quote.line_items_total),
            ("Job Fixed Costs", quote.fixed_costs),
            ("Subtotal", quote.subtotal),
            (f"Profit Markup ({quote.profit_markup_percentage:g}%)", quote.profit_markup_amount),
            (
                f"Overhead Contribution ({quote.fixed_cost_contribution_percentage:g}%)",
                quote.fixed_cost_contribution_amount,
            ),
        ]
        pdf.set_font("Helvetica", "", 10)
        for label, amount in rows:
            pdf.cell(150, 6, f"{label}:", align="R")
            pdf.cell(0, 6, _latin1(self._money(amount)), align="R",
                     new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(150, 8, "Quotation Total:", align="R")
        pdf.cell(0, 8, _latin1(self._money(quote.final_total)), align="R",
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(3)

    def _render_financials(self, pdf: FPDF, report: JobReport) -> None:
        self._section_title(pdf, "Financial Summary")
        money = report.financials
        self._pair(pdf, "Invoice Amount", self._money(money.invoice_amount))
        self._pair(pdf, "Invoice Date", format_date(report.invoice_date, long=True))
        self._pair(pdf, "Total Paid", self._money(money.total_paid))
        self._pair(pdf, "Balance", f"{self._money(money.balance)} ({money.balance_status.value})")
        pdf.ln(2)

        col_widths = [60, 60, 70]
        pdf.set_font("Helvetica", "B", 9)
        pdf.set_fill_color(70, 70, 70)
        pdf.set_text_color(255, 255, 255)
        for width, header in zip(col_widths, ["Date", "Amount", "Recorded By"]):
            pdf.cell(width, 7, header, border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)

        pdf.set_font("Helvetica", "", 8)
        if not report.payments:
            pdf.cell(sum(col_widths), 6, "No payments recorded.", border=1, align="C")
            pdf.ln()
        for payment in report.payments:
            pdf.cell(col_widths[0], 6, format_date(payment.date), border=1)
            pdf.cell(col_widths[1], 6, _latin1(self._money(payment.amount)), border=1, align="R")
            pdf.cell(col_widths[2], 6, _latin1(payment.recorded_by), border=1)
            pdf.ln()
        pdf.ln(3)

    def _render_notes(self, pdf: FPDF, notes: str) -> None:
        self._section_title(pdf, "Internal Notes")
        pdf.set_font("Helvetica", "", 9)
        pdf.multi_cell(0, 5, _latin1(notes), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def _render_mockup(self, pdf: FPDF, report: JobReport) -> None:
        """Embed the mock-up image; a source that cannot be loaded is noted instead."""
        source = report.mockup_image or ""
        self._section_title(pdf, "Mock-up")

        if source.startswith(_REMOTE_PREFIXES) and not self._settings.include_remote_images:
            self._mockup_unavailable(pdf)
            return

        width = self._settings.mockup_width_mm
        try:
            pdf.image(source, x=(pdf.w - width) / 2, w=width)
        except Exception as e:
            logger.warning("mockup_image_skipped", job_id=report.job_id, error=str(e))
            self._mockup_unavailable(pdf)

    @staticmethod
    def _mockup_unavailable(pdf: FPDF) -> None:
        pdf.set_font("Helvetica", "I", 9)
        pdf.cell(0, 6, "Mock-up image unavailable.", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
