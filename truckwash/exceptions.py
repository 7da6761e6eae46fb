"""
Domain error taxonomy.

Services raise these; main.py renders every one of them as
{"kind": ..., "detail": ..., "details": ...} with the matching status code.
Nothing here is retried; the caller resubmits.
"""

from datetime import date
from typing import Any, Optional

from fastapi import status


class TruckWashError(Exception):
    """Base class for all errors surfaced to API callers."""

    kind = "error"
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request failed"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"kind": self.kind, "detail": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(TruckWashError):
    kind = "validation_error"
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request data"


class AuthError(TruckWashError):
    kind = "unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class ForbiddenError(AuthError):
    kind = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden"


class NotFoundError(TruckWashError):
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ConflictError(TruckWashError):
    kind = "conflict"
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class NoDataError(TruckWashError):
    kind = "no_data"
    status_code = status.HTTP_400_BAD_REQUEST
    message = "No wash records found for this company in the selected date range."


class WashNotDueError(TruckWashError):
    """Raised by the due-date gate. Carries the due date for display."""

    kind = "wash_not_due"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, due_date: date):
        self.due_date = due_date
        self.due_date_display = due_date.strftime("%d/%m/%Y")
        super().__init__(
            f"This vehicle cannot be washed until after {self.due_date_display}. "
            f"The next wash is due on that date.",
            details={"due_date": due_date.isoformat()},
        )
