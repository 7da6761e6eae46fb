"""
Vehicle / fleet registry and the unconfirmed-company reconciliation cascade.

Vehicles are keyed by uppercase registration. Whenever a vehicle ends up
assigned to a known company, every wash for that registration still tagged
with the unconfirmed placeholder is re-pointed to that company in the same
transaction as the vehicle write. Washes already tagged with a real company
are never touched.

register_vehicle, require_company and reconcile_unconfirmed_washes only
flush; the public operations own the commit/rollback.
"""

from datetime import date
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from truckwash.exceptions import ConflictError, NotFoundError, ValidationError
from truckwash.models.vehicle import Vehicle
from truckwash.models.wash import Wash
from truckwash.services.company_ref import CompanyRef
from truckwash.services.company_service import company_name, get_company
from truckwash.utils.logger import get_logger

logger = get_logger(__name__)

MAX_REGISTRATION_LENGTH = 10


def normalize_registration(raw: Optional[str]) -> str:
    registration = (raw or "").strip().upper()
    if not registration:
        raise ValidationError("Vehicle registration is required", details={"field": "registration"})
    if len(registration) > MAX_REGISTRATION_LENGTH:
        raise ValidationError(
            f"Vehicle registration must be at most {MAX_REGISTRATION_LENGTH} characters",
            details={"field": "registration"},
        )
    return registration


def find_vehicle(db: Session, registration: str, for_update: bool = False):
    """Find a vehicle by registration (any case). Returns None if not found."""
    q = db.query(Vehicle).filter(Vehicle.registration == normalize_registration(registration))
    if for_update:
        # Row lock held until commit/rollback; serialises concurrent writers for one plate
        q = q.with_for_update()
    return q.first()


def get_vehicle(db: Session, registration: str, for_update: bool = False) -> Vehicle:
    vehicle = find_vehicle(db, registration, for_update=for_update)
    if vehicle is None:
        raise NotFoundError("Vehicle not found")
    return vehicle


def lookup(db: Session, registration: str):
    """
    Returns (vehicle, company_name) or None when the plate has never been seen
    (including plates too long to have ever been stored).
    The wash-entry screen uses the None case to branch into the new-vehicle flow.
    """
    candidate = (registration or "").strip().upper()
    if not candidate or len(candidate) > MAX_REGISTRATION_LENGTH:
        return None
    vehicle = find_vehicle(db, candidate)
    if vehicle is None:
        return None
    return vehicle, company_name(db, vehicle.company_id)


def list_vehicles(db: Session, company_id: Optional[int] = None) -> list[Vehicle]:
    q = db.query(Vehicle)
    if company_id is not None:
        q = q.filter(Vehicle.company_id == company_id)
    return q.order_by(Vehicle.registration).all()


def reconcile_unconfirmed_washes(db: Session, registration: str, company: CompanyRef) -> int:
    """
    Re-point this vehicle's placeholder-tagged washes to ``company``.
    No-op when ``company`` is itself the placeholder. Returns rows updated.
    """
    if company.is_unconfirmed:
        return 0
    updated = (
        db.query(Wash)
        .filter(
            Wash.registration == registration,
            Wash.company_id == CompanyRef.UNCONFIRMED.company_id,
        )
        .update({Wash.company_id: company.company_id}, synchronize_session="fetch")
    )
    if updated:
        logger.info(f"[RECONCILE] {registration}: {updated} unconfirmed wash(es) → company {company.company_id}")
    return updated


def require_company(db: Session, company: CompanyRef) -> None:
    if not company.is_unconfirmed:
        get_company(db, company.company_id)


def register_vehicle(db: Session, registration: str, company: CompanyRef,
                    wash_frequency_days: int = 0,
                    next_wash_due_date: Optional[date] = None,
                    last_wash_type_id: Optional[int] = None) -> Vehicle:
    vehicle = Vehicle(
        registration=registration,
        company_id=company.company_id,
        wash_frequency_days=wash_frequency_days,
        next_wash_due_date=next_wash_due_date,
        last_wash_type_id=last_wash_type_id,
    )
    db.add(vehicle)
    db.flush()
    logger.info(f"Vehicle {registration} registered under company {company}")
    return vehicle


def _rollback(db: Session, registration: str, exc: Exception) -> None:
    """Roll back the vehicle transaction and translate store conflicts."""
    db.rollback()
    if isinstance(exc, IntegrityError):
        logger.warning(f"Concurrent write for vehicle {registration} rejected", exc_info=True)
        raise ConflictError("This vehicle was just updated by another submission. Please resubmit.") from exc
    if isinstance(exc, SQLAlchemyError):
        logger.error(f"Transaction failed for vehicle {registration}", exc_info=True)


def upsert_on_wash(db: Session, registration: str,
                   company_id: Optional[int] = None,
                   wash_frequency_days: Optional[int] = None,
                   next_wash_due_date: Optional[date] = None,
                   last_wash_type_id: Optional[int] = None) -> Vehicle:
    """
    Create the vehicle, or update an existing one's company and frequency.

    A new vehicle without a company goes under the unconfirmed placeholder
    with no due date. An existing vehicle keeps its company when none is
    given, and keeps its due-date fields unless they are passed explicitly.
    """
    registration = normalize_registration(registration)
    try:
        vehicle = find_vehicle(db, registration, for_update=True)

        if vehicle is None:
            company = CompanyRef.from_id(company_id)
            require_company(db, company)
            vehicle = register_vehicle(
                db, registration, company,
                wash_frequency_days=wash_frequency_days or 0,
                next_wash_due_date=next_wash_due_date,
                last_wash_type_id=last_wash_type_id,
            )
        else:
            company = CompanyRef.from_id(vehicle.company_id if company_id is None else company_id)
            require_company(db, company)
            vehicle.company_id = company.company_id
            if wash_frequency_days is not None:
                vehicle.wash_frequency_days = wash_frequency_days
            if next_wash_due_date is not None:
                vehicle.next_wash_due_date = next_wash_due_date
            if last_wash_type_id is not None:
                vehicle.last_wash_type_id = last_wash_type_id

        reconcile_unconfirmed_washes(db, registration, company)
        db.commit()
    except Exception as exc:
        _rollback(db, registration, exc)
        raise

    db.refresh(vehicle)
    return vehicle


def assign_company(db: Session, registration: str, company_id: int) -> Vehicle:
    """Fleet-management reassignment. Both the vehicle and the company must exist."""
    return update_vehicle(db, registration, {"company_id": company_id})


def update_vehicle(db: Session, registration: str, changes: dict) -> Vehicle:
    """
    Partial update (company, wash frequency, due date, last wash type).
    A company change is validated and cascades to unconfirmed washes atomically.
    """
    registration = normalize_registration(registration)
    try:
        vehicle = get_vehicle(db, registration, for_update=True)

        if changes.get("company_id") is not None:
            company = CompanyRef.from_id(changes["company_id"])
            require_company(db, company)
            previous = CompanyRef.from_id(vehicle.company_id)
            vehicle.company_id = company.company_id
            reconcile_unconfirmed_washes(db, registration, company)
            if previous != company:
                logger.info(f"Vehicle {registration} reassigned {previous} → {company}")

        if changes.get("wash_frequency_days") is not None:
            vehicle.wash_frequency_days = changes["wash_frequency_days"]
        # Due date and last wash type may be cleared explicitly with null
        for field in ("next_wash_due_date", "last_wash_type_id"):
            if field in changes:
                setattr(vehicle, field, changes[field])

        db.commit()
    except Exception as exc:
        _rollback(db, registration, exc)
        raise

    db.refresh(vehicle)
    return vehicle


def delete_vehicle(db: Session, registration: str) -> None:
    """Removes the fleet record only; the vehicle's washes stay in the ledger."""
    registration = normalize_registration(registration)
    try:
        vehicle = get_vehicle(db, registration, for_update=True)
        db.delete(vehicle)
        db.commit()
    except Exception as exc:
        _rollback(db, registration, exc)
        raise
    logger.info(f"Vehicle {registration} deleted")
