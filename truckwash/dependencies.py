"""
Request dependencies: the logged-in user (from the signed session cookie)
and the authorization guards built on permission_service.can_access.
"""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from truckwash.database import get_db
from truckwash.exceptions import AuthError, ForbiddenError
from truckwash.models.user import User
from truckwash.services.permission_service import ADMIN_ROLES, TRANSPORT_ADMIN, check_access

SESSION_USER_KEY = "user"


def session_user(request: Request) -> Optional[dict]:
    return request.session.get(SESSION_USER_KEY)


def current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """401 unless the session belongs to an existing user."""
    data = session_user(request)
    user = db.get(User, data["id"]) if data else None
    if user is None:
        request.session.pop(SESSION_USER_KEY, None)
        raise AuthError()
    return user


def require_admin(user: User = Depends(current_user)) -> User:
    if user.role not in ADMIN_ROLES:
        raise ForbiddenError("Forbidden: Admin access required")
    return user


def require_page(route: str):
    """Guard an endpoint with the same policy that builds the navigation menu."""

    def guard(user: User = Depends(current_user), db: Session = Depends(get_db)) -> User:
        if not check_access(db, user.role, route):
            raise ForbiddenError(f"Your role does not have access to {route}")
        return user

    return guard


def company_scope(user: User) -> tuple[bool, Optional[int]]:
    """
    Row-level scoping for listings: (scoped, company_id).
    A transportAdmin only sees their own company's rows.
    """
    if user.role == TRANSPORT_ADMIN:
        return True, user.company_id
    return False, None
