"""
Password hashing, login checks and user administration.
"""

import secrets
from typing import Optional

from passlib.context import CryptContext
from sqlalchemy.orm import Session
from truckwash.exceptions import ConflictError, NotFoundError, ValidationError
from truckwash.models.user import User
from truckwash.schemas.user import UserCreate
from truckwash.services.permission_service import SUPER_ADMIN, USER_ROLES
from truckwash.utils.clock import utcnow
from truckwash.utils.logger import get_logger

logger = get_logger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__truncate_error=False,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


def find_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Returns the User when the credentials match, otherwise None."""
    user = find_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info(f"Login failed for {email}")
        return None
    return user


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.last_name, User.email).all()


def _check_role(role: str) -> None:
    if role not in USER_ROLES:
        raise ValidationError(f"Unknown role '{role}'", details={"field": "role", "allowed": list(USER_ROLES)})


def create_user(db: Session, data: UserCreate) -> User:
    _check_role(data.role)
    if find_user_by_email(db, data.email):
        raise ConflictError("User already exists with this email")

    now = utcnow()
    user = User(
        email=data.email.strip().lower(),
        first_name=data.first_name,
        last_name=data.last_name,
        password_hash=hash_password(data.password),
        role=data.role,
        company_id=data.company_id,
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"User {user.email} created with role {user.role}")
    return user


def update_user(db: Session, user_id: str, changes: dict) -> User:
    user = get_user(db, user_id)
    if changes.get("role") is not None:
        _check_role(changes["role"])
    for field, value in changes.items():
        if field == "role" and value is None:
            continue
        setattr(user, field, value)
    user.updated_at = utcnow()
    db.commit()
    db.refresh(user)
    logger.info(f"User {user.email} updated: {sorted(changes)}")
    return user


def reset_password(db: Session, user_id: str) -> str:
    """Sets and returns a fresh random password (16 hex characters)."""
    user = get_user(db, user_id)
    new_password = secrets.token_hex(8)
    user.password_hash = hash_password(new_password)
    user.updated_at = utcnow()
    db.commit()
    logger.info(f"Password reset for {user.email}")
    return new_password


def ensure_bootstrap_admin(db: Session, email: str, password: str) -> User:
    """Create a superAdmin with these credentials unless the email already exists."""
    user = find_user_by_email(db, email)
    if user is None:
        user = create_user(db, UserCreate(email=email, password=password, role=SUPER_ADMIN))
        logger.info(f"Bootstrap admin {user.email} created")
    return user
