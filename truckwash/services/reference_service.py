"""
Reference data: the wash-type price list and the service-area catalogue.
Plain keyed collections, edited by admins through the /washtypes and
/locations endpoints.
"""

from sqlalchemy.orm import Session
from truckwash.exceptions import NotFoundError
from truckwash.models.location import Location
from truckwash.models.wash_type import WashType
from truckwash.schemas.location import LocationCreate
from truckwash.schemas.wash_type import WashTypeCreate
from truckwash.utils.logger import get_logger

logger = get_logger(__name__)


# ── Wash types ───────────────────────────────────────────────────────────────
def list_wash_types(db: Session) -> list[WashType]:
    return db.query(WashType).order_by(WashType.id).all()


def get_wash_type(db: Session, wash_type_id: int) -> WashType:
    wash_type = db.get(WashType, wash_type_id)
    if wash_type is None:
        raise NotFoundError("Wash type not found")
    return wash_type


def create_wash_type(db: Session, data: WashTypeCreate) -> WashType:
    wash_type = WashType(description=data.description, price=data.price)
    db.add(wash_type)
    db.commit()
    db.refresh(wash_type)
    logger.info(f"Wash type {wash_type.id} created: {wash_type.description} @ {wash_type.price}")
    return wash_type


def update_wash_type(db: Session, wash_type_id: int, changes: dict) -> WashType:
    wash_type = get_wash_type(db, wash_type_id)
    for field, value in changes.items():
        setattr(wash_type, field, value)
    db.commit()
    db.refresh(wash_type)
    logger.info(f"Wash type {wash_type_id} updated: {sorted(changes)}")
    return wash_type


def delete_wash_type(db: Session, wash_type_id: int) -> None:
    """Historical washes keep the deleted id; reports print them as 'Unknown'."""
    wash_type = get_wash_type(db, wash_type_id)
    db.delete(wash_type)
    db.commit()
    logger.info(f"Wash type {wash_type_id} deleted")


# ── Locations ────────────────────────────────────────────────────────────────
def list_locations(db: Session) -> list[Location]:
    return db.query(Location).order_by(Location.id).all()


def get_location(db: Session, location_id: int) -> Location:
    location = db.get(Location, location_id)
    if location is None:
        raise NotFoundError("Location not found")
    return location


def create_location(db: Session, data: LocationCreate) -> Location:
    location = Location(**data.model_dump())
    db.add(location)
    db.commit()
    db.refresh(location)
    logger.info(f"Location {location.id} created: {location.name} ({location.motorway})")
    return location


def update_location(db: Session, location_id: int, changes: dict) -> Location:
    location = get_location(db, location_id)
    for field, value in changes.items():
        setattr(location, field, value)
    db.commit()
    db.refresh(location)
    return location


def delete_location(db: Session, location_id: int) -> None:
    location = get_location(db, location_id)
    db.delete(location)
    db.commit()
    logger.info(f"Location {location_id} deleted")
