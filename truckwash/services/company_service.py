"""
Company registry.

Includes the unconfirmed-company placeholder row, which is created on
startup and protected from deletion. Any other company can only be deleted
once no vehicle references it.
"""

from sqlalchemy.orm import Session
from truckwash.config import settings
from truckwash.exceptions import ConflictError, NotFoundError
from truckwash.models.company import Company
from truckwash.models.vehicle import Vehicle
from truckwash.schemas.company import CompanyCreate
from truckwash.services.company_ref import CompanyRef
from truckwash.utils.clock import utcnow
from truckwash.utils.logger import get_logger

logger = get_logger(__name__)


def list_companies(db: Session, include_unconfirmed: bool = True) -> list[Company]:
    q = db.query(Company)
    if not include_unconfirmed:
        q = q.filter(Company.id != CompanyRef.UNCONFIRMED.company_id)
    return q.order_by(Company.name).all()


def find_company(db: Session, company_id: int):
    """Return the company or None."""
    return db.get(Company, company_id)


def get_company(db: Session, company_id: int) -> Company:
    company = find_company(db, company_id)
    if company is None:
        raise NotFoundError("Company not found")
    return company


def company_name(db: Session, company_id: int) -> str:
    company = find_company(db, company_id)
    return company.name if company else "Unknown"


def create_company(db: Session, data: CompanyCreate) -> Company:
    company = Company(**data.model_dump(), created_at=utcnow())
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info(f"Company {company.id} created: {company.name}")
    return company


def update_company(db: Session, company_id: int, changes: dict) -> Company:
    company = get_company(db, company_id)
    for field, value in changes.items():
        setattr(company, field, value)
    db.commit()
    db.refresh(company)
    logger.info(f"Company {company_id} updated: {sorted(changes)}")
    return company


def delete_company(db: Session, company_id: int) -> None:
    company = get_company(db, company_id)

    if CompanyRef.from_id(company_id).is_unconfirmed:
        raise ConflictError("The 'To be confirmed' company is reserved and cannot be deleted.")

    vehicle_count = db.query(Vehicle).filter(Vehicle.company_id == company_id).count()
    if vehicle_count > 0:
        logger.warning(f"Refused to delete company {company_id}: {vehicle_count} vehicle(s) assigned")
        raise ConflictError(
            "Cannot delete company with associated vehicles. "
            "Please delete or reassign all vehicles first.",
            details={"vehicle_count": vehicle_count},
        )

    db.delete(company)
    db.commit()
    logger.info(f"Company {company_id} deleted: {company.name}")


def ensure_unconfirmed_company(db: Session) -> Company:
    """Create the placeholder company row if it is missing. Safe to call repeatedly."""
    company_id = CompanyRef.UNCONFIRMED.company_id
    company = find_company(db, company_id)
    if company is None:
        company = Company(id=company_id, name=settings.UNCONFIRMED_COMPANY_NAME, created_at=utcnow())
        db.add(company)
        db.commit()
        logger.info(f"Seeded placeholder company {company_id} ({settings.UNCONFIRMED_COMPANY_NAME})")
    return company
