# tests/test_company_service.py
"""Tests for the company registry and its delete guards."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from truckwash.exceptions import ConflictError, NotFoundError
from truckwash.models.company import Company
from truckwash.models.vehicle import Vehicle
from truckwash.schemas.company import CompanyCreate
from truckwash.services import company_service


class TestCompanyService:
    def test_create_and_list_by_name(self, db):
        company_service.create_company(db, CompanyCreate(name="Zeta Freight"))
        company_service.create_company(db, CompanyCreate(name="Alpha Haulage", po_contact="Jo"))
        names = [c.name for c in company_service.list_companies(db, include_unconfirmed=False)]
        assert names == ["Alpha Haulage", "Zeta Freight"]

    def test_placeholder_listed_by_default(self, db):
        ids = [c.id for c in company_service.list_companies(db)]
        assert 999999 in ids

    def test_delete_with_vehicles_conflicts(self, db, company):
        db.add(Vehicle(registration="FT19ABC", company_id=company.id, wash_frequency_days=7))
        db.commit()
        with pytest.raises(ConflictError) as exc_info:
            company_service.delete_company(db, company.id)
        assert exc_info.value.details == {"vehicle_count": 1}
        assert db.get(Company, company.id) is not None

    def test_delete_without_vehicles(self, db, company):
        company_id = company.id
        company_service.delete_company(db, company_id)
        assert db.get(Company, company_id) is None

    def test_placeholder_cannot_be_deleted(self, db):
        with pytest.raises(ConflictError):
            company_service.delete_company(db, 999999)

    def test_delete_missing(self, db):
        with pytest.raises(NotFoundError):
            company_service.delete_company(db, 31337)

    def test_company_name_fallback(self, db):
        assert company_service.company_name(db, 31337) == "Unknown"

    def test_ensure_placeholder_is_idempotent(self, db):
        company_service.ensure_unconfirmed_company(db)
        company_service.ensure_unconfirmed_company(db)
        assert db.query(Company).filter(Company.id == 999999).count() == 1
