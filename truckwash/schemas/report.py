from pydantic import BaseModel, Field, model_validator
from datetime import date, datetime
from typing import Optional


class ReportRequest(BaseModel):
    """Either an explicit start_date/end_date pair or a year/month pair."""

    company_id: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    year: Optional[int] = Field(default=None, ge=2000, le=2100)
    month: Optional[int] = Field(default=None, ge=1, le=12)

    @model_validator(mode="after")
    def check_period(self):
        has_range = self.start_date is not None or self.end_date is not None
        has_month = self.year is not None or self.month is not None
        if has_range and has_month:
            raise ValueError("Give either start_date/end_date or year/month, not both")
        if has_month and (self.year is None or self.month is None):
            raise ValueError("Both year and month are required")
        if not has_month and (self.start_date is None or self.end_date is None):
            raise ValueError("Both start_date and end_date are required")
        return self


class InvoiceRequest(ReportRequest):
    po_number: Optional[str] = Field(default=None, max_length=50)


class WashListOut(BaseModel):
    id: int
    company_id: int
    company_name: str
    start_date: date
    end_date: date
    generated_at: datetime


class InvoiceOut(WashListOut):
    po_number: Optional[str]
