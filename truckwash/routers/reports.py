"""Wash-list reports and invoices: generate, list, download."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlalchemy.orm import Session
from truckwash.database import get_db
from truckwash.dependencies import require_page
from truckwash.schemas.report import InvoiceOut, InvoiceRequest, ReportRequest, WashListOut
from truckwash.services import report_service
from truckwash.services.company_service import company_name

router = APIRouter(dependencies=[Depends(require_page("/manage-wash"))])


def _pdf_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/wash-lists", response_model=WashListOut, status_code=status.HTTP_201_CREATED,
             summary="Generate and store a wash list PDF")
def create_wash_list(body: ReportRequest, db: Session = Depends(get_db)):
    start_date, end_date = report_service.request_period(body)
    wash_list = report_service.generate_wash_list(db, body.company_id, start_date, end_date)
    return report_service.describe(db, wash_list)


@router.get("/wash-lists", response_model=list[WashListOut])
def list_wash_lists(db: Session = Depends(get_db)):
    return report_service.list_wash_lists(db)


@router.get("/wash-lists/{wash_list_id}/download")
def download_wash_list(wash_list_id: int, db: Session = Depends(get_db)):
    wash_list = report_service.get_wash_list(db, wash_list_id)
    filename = report_service.download_filename(
        "wash_list", company_name(db, wash_list.company_id), wash_list.generated_at
    )
    return _pdf_response(wash_list.pdf_content, filename)


@router.post("/invoices", response_model=InvoiceOut, status_code=status.HTTP_201_CREATED,
             summary="Generate and store an invoice PDF")
def create_invoice(body: InvoiceRequest, db: Session = Depends(get_db)):
    start_date, end_date = report_service.request_period(body)
    invoice = report_service.generate_invoice(db, body.company_id, start_date, end_date, body.po_number)
    return report_service.describe(db, invoice)


@router.get("/invoices", response_model=list[InvoiceOut])
def list_invoices(db: Session = Depends(get_db)):
    return report_service.list_invoices(db)


@router.get("/invoices/{invoice_id}/download")
def download_invoice(invoice_id: int, db: Session = Depends(get_db)):
    invoice = report_service.get_invoice(db, invoice_id)
    filename = report_service.download_filename(
        "invoice", company_name(db, invoice.company_id), invoice.generated_at
    )
    return _pdf_response(invoice.pdf_content, filename)
