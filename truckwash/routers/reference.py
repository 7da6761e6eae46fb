"""Wash-type price list and service-area locations. Reads are public."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from truckwash.database import get_db
from truckwash.dependencies import require_page
from truckwash.schemas.location import LocationCreate, LocationOut, LocationUpdate
from truckwash.schemas.wash_type import WashTypeCreate, WashTypeOut, WashTypeUpdate
from truckwash.services import reference_service

router = APIRouter()


@router.get("/washtypes", response_model=list[WashTypeOut], summary="Wash type price list")
def list_wash_types(db: Session = Depends(get_db)):
    return reference_service.list_wash_types(db)


@router.post("/washtypes", response_model=WashTypeOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_page("/manage"))])
def create_wash_type(body: WashTypeCreate, db: Session = Depends(get_db)):
    return reference_service.create_wash_type(db, body)


@router.patch("/washtypes/{wash_type_id}", response_model=WashTypeOut,
              dependencies=[Depends(require_page("/manage"))])
def update_wash_type(wash_type_id: int, body: WashTypeUpdate, db: Session = Depends(get_db)):
    return reference_service.update_wash_type(db, wash_type_id, body.model_dump(exclude_unset=True))


@router.delete("/washtypes/{wash_type_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_page("/manage"))])
def delete_wash_type(wash_type_id: int, db: Session = Depends(get_db)):
    reference_service.delete_wash_type(db, wash_type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/locations", response_model=list[LocationOut], summary="Service-area catalogue")
def list_locations(db: Session = Depends(get_db)):
    return reference_service.list_locations(db)


@router.post("/locations", response_model=LocationOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_page("/locations"))])
def create_location(body: LocationCreate, db: Session = Depends(get_db)):
    return reference_service.create_location(db, body)


@router.patch("/locations/{location_id}", response_model=LocationOut,
              dependencies=[Depends(require_page("/locations"))])
def update_location(location_id: int, body: LocationUpdate, db: Session = Depends(get_db)):
    return reference_service.update_location(db, location_id, body.model_dump(exclude_unset=True))


@router.delete("/locations/{location_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_page("/locations"))])
def delete_location(location_id: int, db: Session = Depends(get_db)):
    reference_service.delete_location(db, location_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
