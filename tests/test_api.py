# tests/test_api.py
"""HTTP-level tests through FastAPI's TestClient."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import timedelta
from truckwash.models.vehicle import Vehicle
from truckwash.models.wash import Wash
from truckwash.utils.clock import utc_today, utcnow


class TestAuth:
    def test_unauthenticated_gets_401(self, client):
        resp = client.get("/api/vehicles")
        assert resp.status_code == 401
        assert resp.json()["kind"] == "unauthorized"

    def test_bad_credentials(self, client, db):
        resp = client.post("/api/login", json={"email": "x@example.com", "password": "nope"})
        assert resp.status_code == 401

    def test_login_and_logout(self, login):
        client = login("washOperative")
        assert client.get("/api/user").json()["role"] == "washOperative"
        client.post("/api/logout")
        assert client.get("/api/user").status_code == 401

    def test_admin_only_endpoints_forbidden(self, login):
        client = login("washOperative")
        assert client.get("/api/admin/users").status_code == 403
        resp = client.post("/api/permissions", json={"role": "washOperative", "page_route": "/companies",
                                                     "is_allowed": True})
        assert resp.status_code == 403
        assert resp.json()["kind"] == "forbidden"

    def test_navigation_for_wash_operative(self, login):
        client = login("washOperative")
        assert [p["route"] for p in client.get("/api/navigation").json()] == ["/"]

    def test_page_guard_follows_override(self, login, db):
        client = login("washOperative")
        body = {"name": "Acme Haulage"}
        assert client.post("/api/companies", json=body).status_code == 403

        from truckwash.services.permission_service import set_permission
        set_permission(db, "washOperative", "/companies", True)
        assert client.post("/api/companies", json=body).status_code == 201


class TestWashes:
    def test_record_wash_for_new_plate(self, login, db, company, wash_type):
        client = login("washOperative")
        assert client.get("/api/vehicles/ab12cde").status_code == 404

        resp = client.post("/api/washes", json={
            "registration": "ab12cde",
            "wash_type_id": wash_type.id,
            "location": "Hilton Park",
            "company_id": company.id,
        })
        assert resp.status_code == 201
        assert resp.json()["company_id"] == 999999

        lookup = client.get("/api/vehicles/AB12CDE").json()
        assert lookup["company_name"] == "To be confirmed"

    def test_not_due_is_400_and_no_row(self, login, db, wash_type):
        due = utc_today() + timedelta(days=2)
        db.add(Vehicle(registration="AB12CDE", company_id=999999, wash_frequency_days=7, next_wash_due_date=due))
        db.commit()
        client = login("washOperative")

        resp = client.post("/api/washes", json={
            "registration": "AB12CDE", "wash_type_id": wash_type.id, "location": "Hilton Park",
        })
        assert resp.status_code == 400
        body = resp.json()
        assert body["kind"] == "wash_not_due"
        assert body["details"]["due_date"] == due.isoformat()
        assert due.strftime("%d/%m/%Y") in body["detail"]
        assert db.query(Wash).count() == 0

    def test_request_validation_is_400(self, login):
        client = login("washOperative")
        resp = client.post("/api/washes", json={"registration": "AB12CDE"})
        assert resp.status_code == 400
        assert resp.json()["kind"] == "validation_error"

    def test_transport_admin_sees_own_company(self, login, db, company, other_company):
        db.add(Wash(registration="FT19ABC", company_id=company.id, location="Hilton Park", wash_type_id=1,
                    washed_at=utcnow()))
        db.add(Wash(registration="NH68HGV", company_id=other_company.id, location="Birch", wash_type_id=1,
                    washed_at=utcnow()))
        db.commit()
        from truckwash.services.permission_service import set_permission
        set_permission(db, "transportAdmin", "/records", True)
        client = login("transportAdmin", company_id=company.id)

        washes = client.get("/api/washes").json()
        assert [w["registration"] for w in washes] == ["FT19ABC"]


class TestFleet:
    def test_reassign_reconciles(self, login, db, company):
        db.add(Vehicle(registration="AB12CDE", company_id=999999, wash_frequency_days=0))
        db.add(Wash(registration="AB12CDE", company_id=999999, location="Hilton Park", wash_type_id=1,
                    washed_at=utcnow()))
        db.commit()
        client = login("admin")

        resp = client.patch("/api/vehicles/ab12cde", json={"company_id": company.id})
        assert resp.status_code == 200
        db.expire_all()
        assert db.query(Wash).one().company_id == company.id

    def test_delete_company_with_vehicles_409(self, login, db, company):
        db.add(Vehicle(registration="FT19ABC", company_id=company.id, wash_frequency_days=7))
        db.commit()
        client = login("admin")
        resp = client.delete(f"/api/companies/{company.id}")
        assert resp.status_code == 409
        assert resp.json()["details"]["vehicle_count"] == 1


class TestReports:
    def test_wash_list_generate_and_download(self, login, db, company, wash_type):
        db.add(Wash(registration="FT19ABC", company_id=company.id, location="Hilton Park",
                    wash_type_id=wash_type.id, washed_at=utcnow()))
        db.commit()
        client = login("admin")
        today = utc_today()

        resp = client.post("/api/wash-lists", json={
            "company_id": company.id, "year": today.year, "month": today.month,
        })
        assert resp.status_code == 201
        wash_list = resp.json()
        assert wash_list["company_name"] == "Fleet Transport Ltd"

        download = client.get(f"/api/wash-lists/{wash_list['id']}/download")
        assert download.status_code == 200
        assert download.headers["content-type"] == "application/pdf"
        assert download.headers["content-disposition"] == (
            f'attachment; filename="wash_list_Fleet_Transport_Ltd_{today.isoformat()}.pdf"'
        )
        assert download.content.startswith(b"%PDF")

    def test_invoice_no_data(self, login, company):
        client = login("admin")
        resp = client.post("/api/invoices", json={
            "company_id": company.id, "start_date": "2020-01-01", "end_date": "2020-01-31", "po_number": "PO-1",
        })
        assert resp.status_code == 400
        assert resp.json()["kind"] == "no_data"

    def test_invoice_start_after_end(self, login, company):
        client = login("admin")
        resp = client.post("/api/invoices", json={
            "company_id": company.id, "start_date": "2026-02-01", "end_date": "2026-01-01",
        })
        assert resp.status_code == 400
        assert resp.json()["kind"] == "validation_error"


class TestHealth:
    def test_health(self, client):
        body = client.get("/api/health").json()
        assert body["database"] == "ok"
        assert body["unconfirmed_company"] == "ok"


class TestPartialUpdates:
    def test_null_company_name_is_400(self, login, db, company):
        client = login("admin")
        resp = client.patch(f"/api/companies/{company.id}", json={"name": None})
        assert resp.status_code == 400
        assert resp.json()["kind"] == "validation_error"
        db.expire_all()
        assert company.name == "Fleet Transport Ltd"

    def test_null_wash_type_price_is_400(self, login, wash_type):
        client = login("admin")
        resp = client.patch(f"/api/washtypes/{wash_type.id}", json={"price": None})
        assert resp.status_code == 400
        assert resp.json()["kind"] == "validation_error"

    def test_null_location_field_is_400(self, login):
        client = login("admin")
        created = client.post("/api/locations", json={
            "name": "Hilton Park", "motorway": "M6", "area": "West Midlands", "postcode": "WV11 2DR",
        }).json()
        resp = client.patch(f"/api/locations/{created['id']}", json={"postcode": None})
        assert resp.status_code == 400

    def test_omitted_fields_unchanged(self, login, company):
        client = login("admin")
        resp = client.patch(f"/api/companies/{company.id}", json={"po_contact": "Jo Bloggs"})
        assert resp.status_code == 200
        assert resp.json()["name"] == "Fleet Transport Ltd"
        assert resp.json()["po_contact"] == "Jo Bloggs"


class TestVehicleLookup:
    def test_overlong_plate_is_404(self, login):
        client = login("washOperative")
        resp = client.get("/api/vehicles/ABCDEFGHIJK")
        assert resp.status_code == 404
        assert resp.json()["kind"] == "not_found"

    def test_delete_vehicle(self, login, db):
        db.add(Vehicle(registration="AB12CDE", company_id=999999, wash_frequency_days=0))
        db.commit()
        client = login("admin")
        assert client.delete("/api/vehicles/ab12cde").status_code == 204
        assert client.get("/api/vehicles/AB12CDE").status_code == 404
