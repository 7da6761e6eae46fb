# tests/test_report_service.py
"""Tests for wash-list / invoice generation and period handling."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date, datetime
from decimal import Decimal
from truckwash.exceptions import NoDataError, NotFoundError, ValidationError
from truckwash.models.report import Invoice, WashList
from truckwash.models.wash import Wash
from truckwash.services import report_service

GENERATED = datetime(2026, 10, 18, 12, 0)


def add_wash(db, company_id, washed_at, wash_type_id, registration="FT19ABC"):
    db.add(Wash(registration=registration, company_id=company_id, location="Hilton Park",
                wash_type_id=wash_type_id, washed_at=washed_at))
    db.commit()


class TestPeriods:
    def test_month_period_leap_february(self):
        assert report_service.month_period(2028, 2) == (date(2028, 2, 1), date(2028, 2, 29))

    def test_month_period_regular_february(self):
        assert report_service.month_period(2027, 2) == (date(2027, 2, 1), date(2027, 2, 28))

    def test_resolve_period_covers_whole_end_day(self):
        start, end = report_service.resolve_period(date(2026, 10, 1), date(2026, 10, 31))
        assert start == datetime(2026, 10, 1, 0, 0)
        assert end.date() == date(2026, 10, 31)
        assert (end.hour, end.minute, end.second) == (23, 59, 59)

    def test_start_after_end(self):
        with pytest.raises(ValidationError):
            report_service.resolve_period(date(2026, 10, 2), date(2026, 10, 1))


class TestGeneration:
    def test_no_data(self, db, company):
        with pytest.raises(NoDataError):
            report_service.generate_wash_list(db, company.id, date(2026, 10, 1), date(2026, 10, 31))
        assert db.query(WashList).count() == 0

    def test_start_after_end_stores_nothing(self, db, company, wash_type):
        add_wash(db, company.id, datetime(2026, 10, 5, 9), wash_type.id)
        with pytest.raises(ValidationError):
            report_service.generate_invoice(db, company.id, date(2026, 10, 31), date(2026, 10, 1))
        assert db.query(Invoice).count() == 0

    def test_unknown_company(self, db):
        with pytest.raises(NotFoundError):
            report_service.generate_wash_list(db, 4040, date(2026, 10, 1), date(2026, 10, 31))

    def test_wash_list_pdf_stored(self, db, company, wash_type):
        add_wash(db, company.id, datetime(2026, 10, 31, 23, 30), wash_type.id)
        wash_list = report_service.generate_wash_list(
            db, company.id, date(2026, 10, 1), date(2026, 10, 31), now=GENERATED
        )
        assert wash_list.pdf_content.startswith(b"%PDF")
        assert wash_list.generated_at == GENERATED

    def test_invoice_lines_and_total(self, db, company, other_company, wash_type):
        add_wash(db, company.id, datetime(2026, 10, 3, 8), wash_type.id)
        add_wash(db, company.id, datetime(2026, 10, 4, 8), 777)     # wash type since deleted
        add_wash(db, other_company.id, datetime(2026, 10, 4, 8), wash_type.id)
        add_wash(db, company.id, datetime(2026, 11, 1, 0, 0), wash_type.id)

        start, end = report_service.resolve_period(date(2026, 10, 1), date(2026, 10, 31))
        lines = report_service.collect_lines(db, company.id, start, end)
        assert [l.wash_type for l in lines] == ["Tractor Unit Wash", "Unknown"]
        assert report_service.report_total(lines) == Decimal("25.00")

        invoice = report_service.generate_invoice(
            db, company.id, date(2026, 10, 1), date(2026, 10, 31), po_number="PO-881", now=GENERATED
        )
        assert invoice.po_number == "PO-881"
        assert invoice.pdf_content.startswith(b"%PDF")

    def test_listings_newest_first_without_bytes(self, db, company, wash_type):
        add_wash(db, company.id, datetime(2026, 10, 3, 8), wash_type.id)
        first = report_service.generate_wash_list(db, company.id, date(2026, 10, 1), date(2026, 10, 31))
        second = report_service.generate_wash_list(db, company.id, date(2026, 10, 1), date(2026, 10, 31))
        listed = report_service.list_wash_lists(db)
        assert [w["id"] for w in listed] == [second.id, first.id]
        assert listed[0]["company_name"] == "Fleet Transport Ltd"
        assert "pdf_content" not in listed[0]


class TestDownloadFilename:
    def test_sanitised_name(self):
        name = report_service.download_filename("wash_list", "Fleet Transport Ltd.", GENERATED)
        assert name == "wash_list_Fleet_Transport_Ltd__2026-10-18.pdf"

    def test_invoice_prefix(self):
        assert report_service.download_filename("invoice", "Acme", GENERATED) == "invoice_Acme_2026-10-18.pdf"
