"""PDF export of a calculated plan.

The layout engine flows content onto further A4 pages when it runs past
one page.
"""

from __future__ import annotations

from datetime import datetime
from io import BytesIO
from typing import List, Optional, Sequence, Tuple
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from savings_gap.config import DEFAULT_REPORT_TITLE
from savings_gap.core.plan import PlanResult
from savings_gap.report.formatting import format_eur, format_percent
from savings_gap.schemas.plan import PlanRequest
from savings_gap.utils.logging import get_logger

logger = get_logger(__name__)

PAGE_MARGIN = 20  # points, every side
LABEL_WIDTH = 330
VALUE_WIDTH = 170

NOTES = (
    "Alle Beträge in <b>heutigen Preisen</b> (real). Renditen sind reale Renditen: Nominal minus Inflation.",
    "<b>Entnahme-Wachstum</b> steuert, ob die monatliche Entnahme im Alter real steigt (0 % = Konstanz).",
    "<b>Sparraten-Wachstum</b> erhöht die monatliche Einzahlung jährlich real.",
)
DISCLAIMER = "Keine Finanz-/Steuerberatung. Modellrechnungen, ohne Garantie."

Row = Tuple[str, str]


def _years(value: float) -> str:
    unit = "Jahr" if value == 1 else "Jahre"
    return f"{value:g}".replace(".", ",") + f" {unit}"


def withdrawal_rows(request: PlanRequest, result: PlanResult) -> List[Row]:
    return [
        ("Monatliche Rentenlücke (heute)", format_eur(request.gapMonthly)),
        ("Rentenphase", _years(request.yearsInRetirement)),
        ("Reale Rendite Rentenphase (p.a.)", format_percent(request.retireAnnualRealReturn)),
        ("Wachstum der monatlichen Entnahme (real, p.a.)", format_percent(request.withdrawalGrowthAnnual)),
        ("Benötigtes Kapital zu Rentenbeginn", format_eur(result.required_capital)),
    ]


def accumulation_rows(request: PlanRequest, result: PlanResult) -> List[Row]:
    return [
        ("Jahre bis zur Rente", _years(request.yearsToRetirement)),
        ("Reale Rendite Ansparphase (p.a.)", format_percent(request.accumAnnualRealReturn)),
        ("Startkapital (heute)", format_eur(request.initialCapital)),
        ("Einmalige Zuzahlung heute", format_eur(request.oneOffToday)),
        ("Jährliche Erhöhung der Sparrate (real, p.a.)", format_percent(request.contribAnnualIncrease)),
        ("Wert des vorhandenen Kapitals zu Rentenbeginn", format_eur(result.future_from_existing_capital)),
        ("Benötigte Sparrate im ersten Monat", format_eur(result.first_month_contribution)),
        ("Sparrate in 5 Jahren", format_eur(result.contribution_in_five_years)),
    ]


def _table(rows: Sequence[Row], highlight_last: int) -> Table:
    table = Table([list(row) for row in rows], colWidths=[LABEL_WIDTH, VALUE_WIDTH])
    style = [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("ALIGN", (0, 0), (0, -1), "LEFT"),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("LINEBELOW", (0, 0), (-1, -1), 0.25, colors.lightgrey),
    ]
    if highlight_last:
        first = len(rows) - highlight_last
        style.extend(
            [
                ("FONTNAME", (0, first), (-1, -1), "Helvetica-Bold"),
                ("BACKGROUND", (0, first), (-1, -1), colors.whitesmoke),
            ]
        )
    table.setStyle(TableStyle(style))
    return table


def render_plan_pdf(
    request: PlanRequest,
    result: PlanResult,
    title: str = DEFAULT_REPORT_TITLE,
    generated_at: Optional[datetime] = None,
) -> bytes:
    """Render both calculator stages as an A4 PDF and return its bytes."""
    generated_at = generated_at or datetime.now()

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=PAGE_MARGIN,
        bottomMargin=PAGE_MARGIN,
        title=title,
    )

    styles = getSampleStyleSheet()
    heading_style = ParagraphStyle("PlanHeading", parent=styles["Heading2"], textColor=colors.darkblue)
    small_style = ParagraphStyle("PlanSmall", parent=styles["Normal"], fontSize=8, textColor=colors.grey)

    story = [
        Paragraph(escape(title), styles["Title"]),
        Paragraph(f"Erstellt am {generated_at:%d.%m.%Y %H:%M}", small_style),
        Spacer(1, 12),
        Paragraph("1) Rentenlücke: Kapitalbedarf (Entnahmeplan)", heading_style),
        _table(withdrawal_rows(request, result), highlight_last=1),
        Spacer(1, 12),
        Paragraph("2) Kapitalziel: Sparplan", heading_style),
        _table(accumulation_rows(request, result), highlight_last=2),
        Spacer(1, 12),
        Paragraph("Annahmen", heading_style),
    ]
    story.extend(Paragraph(f"• {note}", styles["Normal"]) for note in NOTES)
    story.extend([Spacer(1, 18), Paragraph(DISCLAIMER, small_style)])

    doc.build(story)
    pdf = buffer.getvalue()
    logger.info("rendered plan report pages=%s bytes=%s", doc.page, len(pdf))
    return pdf
