"""
Wash-list reports and invoices.

Given a company and an inclusive date range (start clamped to 00:00:00, end
to 23:59:59.999999) the matching washes are joined to their wash types,
rendered to a PDF with reportlab and stored once as an immutable row.
Month mode derives the range from (year, month).
"""

import calendar
import io
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from sqlalchemy.orm import Session
from truckwash.config import settings
from truckwash.exceptions import NoDataError, NotFoundError, ValidationError
from truckwash.models.company import Company
from truckwash.models.report import Invoice, WashList
from truckwash.models.wash import Wash
from truckwash.models.wash_type import WashType
from truckwash.schemas.report import ReportRequest
from truckwash.services.company_service import company_name, get_company
from truckwash.utils.clock import utcnow
from truckwash.utils.logger import get_logger

logger = get_logger(__name__)

WASH_LIST_TITLE = "WASH LIST REPORT"
INVOICE_TITLE = "INVOICE"

# Date | Vehicle | Location | Wash Type | Price
COLUMN_WIDTHS_MM = (35, 30, 40, 60, 25)
LEFT_MM = 20
TOP_MM = 20
BOTTOM_MM = 25
ROW_MM = 7


@dataclass
class ReportLine:
    washed_at: datetime
    registration: str
    location: str
    wash_type: str
    price: Decimal


# ── Periods ──────────────────────────────────────────────────────────────────
def month_period(year: int, month: int) -> tuple[date, date]:
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12", details={"field": "month"})
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def resolve_period(start_date: date, end_date: date) -> tuple[datetime, datetime]:
    """Inclusive datetime bounds covering both calendar days completely."""
    if start_date > end_date:
        raise ValidationError(
            "Start date must be before or equal to end date.",
            details={"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
        )
    return datetime.combine(start_date, time.min), datetime.combine(end_date, time.max)


def request_period(req: ReportRequest) -> tuple[date, date]:
    if req.year is not None:
        return month_period(req.year, req.month)
    return req.start_date, req.end_date


# ── Data ─────────────────────────────────────────────────────────────────────
def collect_lines(db: Session, company_id: int, start: datetime, end: datetime) -> list[ReportLine]:
    rows = (
        db.query(Wash, WashType)
        .outerjoin(WashType, WashType.id == Wash.wash_type_id)
        .filter(
            Wash.company_id == company_id,
            Wash.washed_at >= start,
            Wash.washed_at <= end,
        )
        .order_by(Wash.washed_at, Wash.id)
        .all()
    )
    if not rows:
        raise NoDataError()

    return [
        ReportLine(
            washed_at=wash.washed_at,
            registration=wash.registration,
            location=wash.location,
            wash_type=wash_type.description if wash_type else "Unknown",
            price=Decimal(wash_type.price) if wash_type else Decimal("0.00"),
        )
        for wash, wash_type in rows
    ]


def report_total(lines: list[ReportLine]) -> Decimal:
    return sum((line.price for line in lines), Decimal("0.00"))


# ── Rendering ────────────────────────────────────────────────────────────────
def _money(value: Decimal) -> str:
    return f"{value.quantize(Decimal('0.01')):.2f}"


def render_report_pdf(title: str, company: Company, lines: list[ReportLine],
                      period_start: date, period_end: date, generated_at: datetime,
                      po_number: Optional[str] = None) -> bytes:
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    pdf.setTitle(f"{title.title()} - {company.name}")
    width, height = A4
    left = LEFT_MM * mm
    right = width - LEFT_MM * mm

    pdf.setFont("Helvetica-Bold", 20)
    pdf.drawCentredString(width / 2, height - 20 * mm, settings.BUSINESS_NAME)
    pdf.setFont("Helvetica-Bold", 16)
    pdf.drawCentredString(width / 2, height - 30 * mm, title)

    pdf.setFont("Helvetica", 10)
    date_label = "Invoice Date" if title == INVOICE_TITLE else "Report Date"
    pdf.drawString(left, height - 45 * mm, f"{date_label}: {generated_at:%d/%m/%Y}")
    if po_number:
        pdf.drawRightString(right, height - 45 * mm, f"PO Number: {po_number}")

    pdf.setFont("Helvetica-Bold", 12)
    pdf.drawString(left, height - 55 * mm, "Bill To:")
    pdf.setFont("Helvetica", 10)
    y = height - 62 * mm
    bill_to = [company.name]
    if company.transport_manager:
        bill_to.append(f"Attn: {company.transport_manager}")
    if company.transport_manager_email:
        bill_to.append(company.transport_manager_email)
    if company.transport_manager_phone:
        bill_to.append(company.transport_manager_phone)
    for text in bill_to:
        pdf.drawString(left, y, text)
        y -= 6 * mm

    pdf.drawString(left, height - 90 * mm, f"Period: {period_start:%d/%m/%Y} - {period_end:%d/%m/%Y}")

    def header(y_pos: float) -> float:
        pdf.setFont("Helvetica-Bold", 9)
        x = left
        for label, col in zip(("Date", "Vehicle", "Location", "Wash Type",
                               f"Price ({settings.CURRENCY_SYMBOL})"), COLUMN_WIDTHS_MM):
            pdf.drawString(x, y_pos, label)
            x += col * mm
        pdf.line(left, y_pos - 2 * mm, right, y_pos - 2 * mm)
        pdf.setFont("Helvetica", 9)
        return y_pos - 8 * mm

    y = header(height - 100 * mm)
    for line in lines:
        if y < BOTTOM_MM * mm:
            pdf.showPage()
            y = header(height - TOP_MM * mm)
        cells = (
            f"{line.washed_at:%d/%m/%Y}",
            line.registration,
            line.location[:18],
            line.wash_type[:28],
            _money(line.price),
        )
        x = left
        for text, col in zip(cells, COLUMN_WIDTHS_MM):
            pdf.drawString(x, y, text)
            x += col * mm
        y -= ROW_MM * mm

    if y < (BOTTOM_MM + 25) * mm:
        pdf.showPage()
        y = height - TOP_MM * mm

    y -= 5 * mm
    pdf.line(left, y, right, y)
    y -= 8 * mm
    pdf.setFont("Helvetica-Bold", 12)
    pdf.drawRightString(right, y, f"Total: {settings.CURRENCY_SYMBOL}{_money(report_total(lines))}")
    y -= 15 * mm
    pdf.setFont("Helvetica", 9)
    pdf.drawString(left, y, f"Total Washes: {len(lines)}")

    pdf.showPage()
    pdf.save()
    return buffer.getvalue()


# ── Generation ───────────────────────────────────────────────────────────────
def _build(db: Session, title: str, company_id: int, start_date: date, end_date: date,
           generated_at: datetime, po_number: Optional[str] = None) -> tuple[bytes, int]:
    start, end = resolve_period(start_date, end_date)
    company = get_company(db, company_id)
    lines = collect_lines(db, company_id, start, end)
    pdf_bytes = render_report_pdf(title, company, lines, start_date, end_date, generated_at, po_number)
    return pdf_bytes, len(lines)


def generate_wash_list(db: Session, company_id: int, start_date: date, end_date: date,
                       now: Optional[datetime] = None) -> WashList:
    generated_at = now or utcnow()
    pdf_bytes, count = _build(db, WASH_LIST_TITLE, company_id, start_date, end_date, generated_at)
    wash_list = WashList(
        company_id=company_id,
        start_date=start_date,
        end_date=end_date,
        generated_at=generated_at,
        pdf_content=pdf_bytes,
    )
    db.add(wash_list)
    db.commit()
    db.refresh(wash_list)
    logger.info(f"Wash list #{wash_list.id} for company {company_id}: {count} washes, {len(pdf_bytes)} bytes")
    return wash_list


def generate_invoice(db: Session, company_id: int, start_date: date, end_date: date,
                     po_number: Optional[str] = None, now: Optional[datetime] = None) -> Invoice:
    generated_at = now or utcnow()
    pdf_bytes, count = _build(db, INVOICE_TITLE, company_id, start_date, end_date, generated_at, po_number)
    invoice = Invoice(
        company_id=company_id,
        start_date=start_date,
        end_date=end_date,
        po_number=po_number,
        generated_at=generated_at,
        pdf_content=pdf_bytes,
    )
    db.add(invoice)
    db.commit()
    db.refresh(invoice)
    logger.info(f"Invoice #{invoice.id} for company {company_id} (PO {po_number or '-'}): {count} washes")
    return invoice


# ── Listing / download ───────────────────────────────────────────────────────
def describe(db: Session, artifact) -> dict:
    """Metadata for listings: everything except the PDF bytes, plus company name."""
    info = {
        "id": artifact.id,
        "company_id": artifact.company_id,
        "company_name": company_name(db, artifact.company_id),
        "start_date": artifact.start_date,
        "end_date": artifact.end_date,
        "generated_at": artifact.generated_at,
    }
    if isinstance(artifact, Invoice):
        info["po_number"] = artifact.po_number
    return info


def list_wash_lists(db: Session) -> list[dict]:
    return [describe(db, w) for w in db.query(WashList).order_by(WashList.id.desc()).all()]


def list_invoices(db: Session) -> list[dict]:
    return [describe(db, i) for i in db.query(Invoice).order_by(Invoice.id.desc()).all()]


def get_wash_list(db: Session, wash_list_id: int) -> WashList:
    wash_list = db.get(WashList, wash_list_id)
    if wash_list is None:
        raise NotFoundError("Wash list not found")
    return wash_list


def get_invoice(db: Session, invoice_id: int) -> Invoice:
    invoice = db.get(Invoice, invoice_id)
    if invoice is None:
        raise NotFoundError("Invoice not found")
    return invoice


def download_filename(prefix: str, name: str, generated_at: Optional[datetime]) -> str:
    """e.g. wash_list_Fleet_Transport_Ltd_2026-10-18.pdf"""
    safe_name = re.sub(r"[^a-zA-Z0-9]", "_", name or "Unknown")
    date_part = generated_at.date().isoformat() if generated_at else "date"
    return f"{prefix}_{safe_name}_{date_part}.pdf"
