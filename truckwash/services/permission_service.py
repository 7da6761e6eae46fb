"""
Role-based page access.

can_access() is the single policy used both for building the navigation
menu and for server-side authorization (dependencies.require_page). An
explicit PagePermission row wins; otherwise the role default applies:
superAdmin/admin everywhere, washOperative on the home route only, every
other role nowhere.
"""

from typing import Mapping, Optional

from sqlalchemy.orm import Session
from truckwash.exceptions import ValidationError
from truckwash.models.page_permission import PagePermission
from truckwash.utils.logger import get_logger

logger = get_logger(__name__)

HOME_ROUTE = "/"

SUPER_ADMIN = "superAdmin"
ADMIN = "admin"
TRANSPORT_ADMIN = "transportAdmin"
WASH_OPERATIVE = "washOperative"

USER_ROLES = (
    SUPER_ADMIN,
    ADMIN,
    TRANSPORT_ADMIN,
    "poAdmin",
    "plAdmin",
    "washAdmin",
    WASH_OPERATIVE,
)
ADMIN_ROLES = frozenset({SUPER_ADMIN, ADMIN})

SYSTEM_PAGES = (
    {"label": "Record Wash", "route": "/"},
    {"label": "Wash Records", "route": "/records"},
    {"label": "Manage Wash", "route": "/manage-wash"},
    {"label": "Manage Fleet", "route": "/manage"},
    {"label": "Manage Companies", "route": "/companies"},
    {"label": "Wash Edit", "route": "/wash-edit"},
    {"label": "Locations", "route": "/locations"},
    {"label": "Users", "route": "/users"},
    {"label": "Page Permissions", "route": "/permissions"},
)

Overrides = Mapping[tuple[str, str], bool]


def default_policy(role: Optional[str], route: str) -> bool:
    if role in ADMIN_ROLES:
        return True
    if role == WASH_OPERATIVE:
        return route == HOME_ROUTE
    return False


def can_access(overrides: Overrides, role: Optional[str], route: str) -> bool:
    """Pure policy check: explicit override, else the role default."""
    if role is None:
        return False
    override = overrides.get((role, route))
    if override is not None:
        return override
    return default_policy(role, route)


def load_overrides(db: Session, role: Optional[str] = None) -> dict[tuple[str, str], bool]:
    q = db.query(PagePermission)
    if role is not None:
        q = q.filter(PagePermission.role == role)
    return {(p.role, p.page_route): bool(p.is_allowed) for p in q.all()}


def check_access(db: Session, role: Optional[str], route: str) -> bool:
    return can_access(load_overrides(db, role), role, route)


def navigation_for(db: Session, role: Optional[str]) -> list[dict]:
    """Menu entries the role may open; same decision as check_access()."""
    overrides = load_overrides(db, role)
    return [page for page in SYSTEM_PAGES if can_access(overrides, role, page["route"])]


def list_permissions(db: Session) -> list[PagePermission]:
    return db.query(PagePermission).order_by(PagePermission.role, PagePermission.page_route).all()


def set_permission(db: Session, role: str, page_route: str, is_allowed: bool) -> PagePermission:
    """Create or update the override row for (role, page_route)."""
    if role not in USER_ROLES:
        raise ValidationError(f"Unknown role '{role}'", details={"field": "role", "allowed": list(USER_ROLES)})

    permission = (
        db.query(PagePermission)
        .filter(PagePermission.role == role, PagePermission.page_route == page_route)
        .first()
    )
    if permission is None:
        permission = PagePermission(role=role, page_route=page_route, is_allowed=is_allowed)
        db.add(permission)
    else:
        permission.is_allowed = is_allowed
    db.commit()
    db.refresh(permission)
    logger.info(f"Permission {role} {page_route} → {'allow' if is_allowed else 'deny'}")
    return permission
