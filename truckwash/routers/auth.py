"""Session login / logout."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from truckwash.database import get_db
from truckwash.dependencies import SESSION_USER_KEY, current_user
from truckwash.exceptions import AuthError
from truckwash.models.user import User
from truckwash.schemas.user import LoginRequest, UserOut
from truckwash.services.auth_service import authenticate_user
from truckwash.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("/login", response_model=UserOut)
def login(body: LoginRequest, request: Request, db: Session = Depends(get_db)):
    user = authenticate_user(db, body.email, body.password)
    if user is None:
        raise AuthError("Invalid credentials")
    request.session[SESSION_USER_KEY] = {
        "id": user.id,
        "email": user.email,
        "role": user.role,
        "company_id": user.company_id,
    }
    logger.info(f"Login: {user.email} ({user.role})")
    return user


@router.post("/logout")
def logout(request: Request):
    request.session.pop(SESSION_USER_KEY, None)
    return {"status": "logged_out"}


@router.get("/user", response_model=UserOut)
def me(user: User = Depends(current_user)):
    return user
