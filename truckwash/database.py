"""
Database connection, session management, and table creation.
Uses SQLAlchemy with PostgreSQL (SQLite for tests). All models are
auto-imported here so create_tables() creates every table in one call.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from truckwash.config import settings


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # One shared connection so an in-memory database survives across sessions
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {
        "pool_pre_ping": True,          # Auto-reconnect if DB connection drops
        "pool_size": 10,
        "max_overflow": 20,
    }


database_url = settings.DATABASE_URL
if database_url.startswith("postgres://"):
    database_url = database_url.replace("postgres://", "postgresql://", 1)

engine = create_engine(database_url, echo=False, **_engine_options(database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency — yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """
    Creates all DB tables on startup. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from truckwash.models.wash_type import WashType           # noqa
    from truckwash.models.location import Location            # noqa
    from truckwash.models.company import Company              # noqa
    from truckwash.models.vehicle import Vehicle              # noqa
    from truckwash.models.wash import Wash                    # noqa
    from truckwash.models.report import WashList, Invoice     # noqa
    from truckwash.models.page_permission import PagePermission  # noqa
    from truckwash.models.user import User                    # noqa

    Base.metadata.create_all(bind=engine)


def ensure_reference_rows():
    """
    Guarantees rows that must exist before wash traffic is served:
    the unconfirmed-company sentinel, and the bootstrap admin when configured.
    """
    from truckwash.services.company_service import ensure_unconfirmed_company
    from truckwash.services.auth_service import ensure_bootstrap_admin

    db = SessionLocal()
    try:
        ensure_unconfirmed_company(db)
        if settings.SEED_ADMIN_EMAIL and settings.SEED_ADMIN_PASSWORD:
            ensure_bootstrap_admin(db, settings.SEED_ADMIN_EMAIL, settings.SEED_ADMIN_PASSWORD)
    finally:
        db.close()
