"""
System health check endpoint.
Returns status of backend + DB and the placeholder-company row.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from truckwash.database import get_db
from truckwash.services.company_ref import CompanyRef
from truckwash.services.company_service import find_company
from truckwash.utils.clock import utcnow

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db)):
    """
    Returns:
    - Backend status
    - Database connectivity
    - Whether the unconfirmed-company row is present
    """
    result = {
        "status": "ok",
        "timestamp": utcnow().isoformat(),
        "backend": "ok",
        "database": "unknown",
        "unconfirmed_company": "unknown",
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
        present = find_company(db, CompanyRef.UNCONFIRMED.company_id) is not None
        result["unconfirmed_company"] = "ok" if present else "missing"
        if not present:
            result["status"] = "degraded"
    except SQLAlchemyError as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    return result
