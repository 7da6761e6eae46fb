# scripts/setup/seed_reference_data.py
"""
Load the standard price list, service areas, a demo customer fleet and two
logins into an empty database. Rows that already exist are left alone.
Usage: python scripts/setup/seed_reference_data.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from decimal import Decimal

from truckwash.database import SessionLocal, create_tables, ensure_reference_rows
from truckwash.models.company import Company
from truckwash.models.location import Location
from truckwash.models.vehicle import Vehicle
from truckwash.models.wash_type import WashType
from truckwash.schemas.user import UserCreate
from truckwash.services.auth_service import create_user, find_user_by_email
from truckwash.utils.clock import utcnow

WASH_TYPES = [
    ("Tractor Unit Wash", "25.00"),
    ("Tractor Unit Wash & Degrease", "35.00"),
    ("Rigid Wash (up to 7.5t)", "30.00"),
    ("Rigid Wash (over 7.5t)", "40.00"),
    ("Trailer Wash - Curtainsider", "35.00"),
    ("Trailer Wash - Box", "35.00"),
    ("Trailer Wash - Fridge", "40.00"),
    ("Trailer Wash - Flatbed", "25.00"),
    ("Tanker Wash - Exterior", "45.00"),
    ("Tractor & Trailer Wash", "55.00"),
    ("Tractor & Trailer Wash & Degrease", "70.00"),
    ("Van Wash", "15.00"),
    ("Chassis Wash", "30.00"),
    ("Interior Cab Valet", "20.00"),
    ("Fridge Trailer Interior Wash", "50.00"),
    ("Tipper Wash", "45.00"),
]


# name, motorway, area, postcode
LOCATIONS = [
    ("Hilton Park", "M6", "West Midlands", "WV11 2DR"),
    ("Birch", "M62", "Greater Manchester", "OL10 2HQ"),
    ("Wetherby", "A1(M)", "West Yorkshire", "LS22 5GT"),
    ("Gordano", "M5", "Somerset", "BS20 7XG"),
    ("Doncaster North", "M18", "South Yorkshire", "DN8 5GS"),
    ("Northampton", "M1", "Northamptonshire", "NN4 9QY"),
    ("Southwaite", "M6", "Cumbria", "CA4 0NT"),
]

COMPANIES = [
    {"name": "Fleet Transport Ltd", "transport_manager": "Sarah Hughes",
     "transport_manager_email": "sarah.hughes@fleettransport.example", "transport_manager_phone": "01213 555 010"},
    {"name": "Northern Haulage", "transport_manager": "Dev Patel",
     "transport_manager_email": "dev.patel@northernhaulage.example", "transport_manager_phone": "01612 555 020"},
    {"name": "Coastal Logistics", "transport_manager": "Megan Price",
     "transport_manager_email": "megan.price@coastal.example"},
]

# registration, company index, wash frequency (days)
VEHICLES = [
    ("FT19ABC", 0, 7),
    ("FT20XYZ", 0, 7),
    ("NH68HGV", 1, 14),
    ("NH70TRK", 1, 14),
    ("CL21VAN", 2, 3),
]


def main():
    print("🌱 Truck Wash reference data")
    print("=" * 40)
    create_tables()
    ensure_reference_rows()

    db = SessionLocal()
    try:
        if db.query(WashType).count() == 0:
            db.add_all([WashType(description=d, price=Decimal(p)) for d, p in WASH_TYPES])
            print(f"✅ {len(WASH_TYPES)} wash types")
        if db.query(Location).count() == 0:
            db.add_all([Location(name=n, motorway=m, area=a, postcode=p) for n, m, a, p in LOCATIONS])
            print(f"✅ {len(LOCATIONS)} locations")

        companies = []
        for data in COMPANIES:
            company = db.query(Company).filter(Company.name == data["name"]).first()
            if company is None:
                company = Company(**data, created_at=utcnow())
                db.add(company)
                db.flush()
                print(f"✅ Company #{company.id} {company.name}")
            companies.append(company)

        for registration, idx, freq in VEHICLES:
            if db.get(Vehicle, registration) is None:
                db.add(Vehicle(registration=registration, company_id=companies[idx].id, wash_frequency_days=freq))
                print(f"✅ Vehicle {registration} → {companies[idx].name}")
        db.commit()

        for email, password, role in (
            ("test@example.com", "truckwash123", "washOperative"),
            ("admin@example.com", "truckwash-admin", "superAdmin"),
        ):
            if find_user_by_email(db, email) is None:
                create_user(db, UserCreate(email=email, password=password, role=role))
                print(f"✅ User {email} ({role})")
    finally:
        db.close()

    print("\n🎉 Seed complete")


if __name__ == "__main__":
    main()
