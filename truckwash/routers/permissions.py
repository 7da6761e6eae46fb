"""Page permission overrides and the per-user navigation menu."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from truckwash.database import get_db
from truckwash.dependencies import current_user, require_admin
from truckwash.models.user import User
from truckwash.schemas.permission import NavigationItem, PermissionOut, PermissionUpdate
from truckwash.services import permission_service

router = APIRouter()


@router.get("/permissions", response_model=list[PermissionOut], dependencies=[Depends(current_user)])
def list_permissions(db: Session = Depends(get_db)):
    return permission_service.list_permissions(db)


@router.post("/permissions", response_model=PermissionOut, dependencies=[Depends(require_admin)],
             summary="Set a role/page override (admins only)")
def set_permission(body: PermissionUpdate, db: Session = Depends(get_db)):
    return permission_service.set_permission(db, body.role, body.page_route, body.is_allowed)


@router.get("/navigation", response_model=list[NavigationItem], summary="Pages the current user may open")
def navigation(user: User = Depends(current_user), db: Session = Depends(get_db)):
    return permission_service.navigation_for(db, user.role)
