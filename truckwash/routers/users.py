"""User administration (superAdmin / admin only)."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from truckwash.database import get_db
from truckwash.dependencies import require_admin
from truckwash.schemas.user import PasswordResetOut, UserCreate, UserOut, UserUpdate
from truckwash.services import auth_service

router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])


@router.get("/users", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db)):
    return auth_service.list_users(db)


@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(body: UserCreate, db: Session = Depends(get_db)):
    return auth_service.create_user(db, body)


@router.patch("/users/{user_id}", response_model=UserOut)
def update_user(user_id: str, body: UserUpdate, db: Session = Depends(get_db)):
    return auth_service.update_user(db, user_id, body.model_dump(exclude_unset=True))


@router.post("/users/{user_id}/reset-password", response_model=PasswordResetOut)
def reset_password(user_id: str, db: Session = Depends(get_db)):
    return {"new_password": auth_service.reset_password(db, user_id)}
