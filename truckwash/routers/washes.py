"""Wash recording and the wash ledger."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from truckwash.database import get_db
from truckwash.dependencies import company_scope, require_page
from truckwash.models.user import User
from truckwash.schemas.wash import WashCreate, WashOut
from truckwash.services import wash_service

router = APIRouter()


@router.get("/washes", response_model=list[WashOut], summary="Wash ledger, newest first by default")
def list_washes(
    order: Literal["desc", "asc"] = "desc",
    limit: Optional[int] = Query(default=None, ge=1, le=5000),
    user: User = Depends(require_page("/records")),
    db: Session = Depends(get_db),
):
    scoped, company_id = company_scope(user)
    if scoped and company_id is None:
        return []
    return wash_service.list_washes(db, company_id=company_id, order=order, limit=limit)


@router.post("/washes", response_model=WashOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_page("/"))],
             summary="Record a wash (400 while the vehicle is not yet due)")
def record_wash(body: WashCreate, db: Session = Depends(get_db)):
    return wash_service.record_wash(db, body)
