"""
Wash recording and the reconciliation engine.

record_wash() runs the whole sequence in one transaction, holding the
vehicle row lock from lookup to due-date update:

  1. normalise the registration
  2. look up the vehicle; an unseen plate is registered under the
     unconfirmed placeholder (whatever company the caller sent), frequency 0
  3. for a known vehicle, refuse the wash while today (UTC date) is on or
     before its due date; default the company to the vehicle's own
  4. append the wash
  5. set the vehicle's due date to wash date + wash frequency
"""

from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from truckwash.exceptions import ConflictError, NotFoundError, WashNotDueError
from truckwash.models.wash import Wash
from truckwash.schemas.wash import WashCreate
from truckwash.services.company_ref import CompanyRef
from truckwash.services.reference_service import get_wash_type
from truckwash.services.vehicle_service import (
    register_vehicle,
    require_company,
    find_vehicle,
    normalize_registration,
)
from truckwash.utils.clock import utcnow
from truckwash.utils.logger import get_logger

logger = get_logger(__name__)

ORDER_DESC = "desc"
ORDER_ASC = "asc"


def record_wash(db: Session, data: WashCreate, now: Optional[datetime] = None) -> Wash:
    now = now or utcnow()
    registration = normalize_registration(data.registration)

    try:
        get_wash_type(db, data.wash_type_id)

        vehicle = find_vehicle(db, registration, for_update=True)
        if vehicle is None:
            company = CompanyRef.UNCONFIRMED
            if data.company_id is not None and not CompanyRef.from_id(data.company_id).is_unconfirmed:
                logger.info(f"[WASH] New plate {registration}: ignoring company {data.company_id} until confirmed")
            vehicle = register_vehicle(db, registration, company)
        else:
            due = vehicle.next_wash_due_date
            if due is not None and now.date() <= due:
                logger.info(f"[WASH] {registration} refused, not due until after {due.isoformat()}")
                raise WashNotDueError(due)
            if data.company_id is None:
                company = CompanyRef.from_id(vehicle.company_id)
            else:
                company = CompanyRef.from_id(data.company_id)
                require_company(db, company)

        wash = Wash(
            registration=registration,
            company_id=company.company_id,
            location=data.location,
            driver_name=data.driver_name,
            wash_type_id=data.wash_type_id,
            washed_at=now,
        )
        db.add(wash)
        db.flush()

        vehicle.next_wash_due_date = (wash.washed_at + timedelta(days=vehicle.wash_frequency_days)).date()
        vehicle.last_wash_type_id = data.wash_type_id

        db.commit()
    except IntegrityError:
        # Another request registered the same new plate first
        db.rollback()
        logger.warning(f"[WASH] Concurrent submission for {registration} rejected", exc_info=True)
        raise ConflictError("This vehicle was just updated by another submission. Please resubmit.")
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"[WASH] Failed to record wash for {registration}", exc_info=True)
        raise
    except Exception:
        db.rollback()
        raise

    db.refresh(wash)
    logger.info(
        f"[WASH] #{wash.id} {registration} company={company} type={data.wash_type_id} "
        f"at {wash.location!r}; next due after {vehicle.next_wash_due_date.isoformat()}"
    )
    return wash


def list_washes(db: Session, company_id: Optional[int] = None,
                order: str = ORDER_DESC, limit: Optional[int] = None) -> list[Wash]:
    """Ledger listing by id, newest first unless order='asc'."""
    q = db.query(Wash)
    if company_id is not None:
        q = q.filter(Wash.company_id == company_id)
    q = q.order_by(Wash.id.asc() if order == ORDER_ASC else Wash.id.desc())
    if limit:
        q = q.limit(limit)
    return q.all()


def get_wash(db: Session, wash_id: int) -> Wash:
    wash = db.get(Wash, wash_id)
    if wash is None:
        raise NotFoundError("Wash not found")
    return wash
