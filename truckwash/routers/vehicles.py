"""Fleet management: vehicles keyed by registration plate."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from truckwash.database import get_db
from truckwash.dependencies import company_scope, current_user, require_page
from truckwash.exceptions import NotFoundError
from truckwash.models.user import User
from truckwash.schemas.vehicle import VehicleCreate, VehicleLookupOut, VehicleOut, VehicleUpdate
from truckwash.services import vehicle_service

router = APIRouter()


@router.get("/vehicles", response_model=list[VehicleOut], summary="List vehicles, by registration")
def list_vehicles(user: User = Depends(current_user), db: Session = Depends(get_db)):
    scoped, company_id = company_scope(user)
    if scoped and company_id is None:
        return []
    return vehicle_service.list_vehicles(db, company_id=company_id)


@router.post("/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_page("/manage"))],
             summary="Create or update a vehicle")
def upsert_vehicle(body: VehicleCreate, db: Session = Depends(get_db)):
    return vehicle_service.upsert_on_wash(
        db, body.registration,
        company_id=body.company_id,
        wash_frequency_days=body.wash_frequency_days,
    )


@router.get("/vehicles/{registration}", response_model=VehicleLookupOut,
            dependencies=[Depends(current_user)],
            summary="Look up a plate (404 when never seen)")
def lookup_vehicle(registration: str, db: Session = Depends(get_db)):
    found = vehicle_service.lookup(db, registration)
    if found is None:
        raise NotFoundError("Vehicle not found")
    vehicle, company_name = found
    return VehicleLookupOut(**VehicleOut.model_validate(vehicle).model_dump(), company_name=company_name)


@router.patch("/vehicles/{registration}", response_model=VehicleOut,
              dependencies=[Depends(require_page("/manage"))])
def update_vehicle(registration: str, body: VehicleUpdate, db: Session = Depends(get_db)):
    return vehicle_service.update_vehicle(db, registration, body.model_dump(exclude_unset=True))


@router.delete("/vehicles/{registration}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_page("/manage"))])
def delete_vehicle(registration: str, db: Session = Depends(get_db)):
    vehicle_service.delete_vehicle(db, registration)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
