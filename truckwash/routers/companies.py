"""Customer company CRUD."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from truckwash.database import get_db
from truckwash.dependencies import current_user, require_page
from truckwash.schemas.company import CompanyCreate, CompanyOut, CompanyUpdate
from truckwash.services import company_service

router = APIRouter()


@router.get("/companies", response_model=list[CompanyOut], dependencies=[Depends(current_user)],
            summary="List companies, by name")
def list_companies(include_unconfirmed: bool = True, db: Session = Depends(get_db)):
    return company_service.list_companies(db, include_unconfirmed=include_unconfirmed)


@router.get("/companies/{company_id}", response_model=CompanyOut, dependencies=[Depends(current_user)])
def get_company(company_id: int, db: Session = Depends(get_db)):
    return company_service.get_company(db, company_id)


@router.post("/companies", response_model=CompanyOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_page("/companies"))])
def create_company(body: CompanyCreate, db: Session = Depends(get_db)):
    return company_service.create_company(db, body)


@router.patch("/companies/{company_id}", response_model=CompanyOut,
              dependencies=[Depends(require_page("/companies"))])
def update_company(company_id: int, body: CompanyUpdate, db: Session = Depends(get_db)):
    return company_service.update_company(db, company_id, body.model_dump(exclude_unset=True))


@router.delete("/companies/{company_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(require_page("/companies"))],
               summary="Delete a company (409 while vehicles are assigned)")
def delete_company(company_id: int, db: Session = Depends(get_db)):
    company_service.delete_company(db, company_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
