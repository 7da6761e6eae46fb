from pydantic import BaseModel, Field
from datetime import date
from typing import Optional


class VehicleCreate(BaseModel):
    registration: str = Field(min_length=1, max_length=10)
    company_id: Optional[int] = None      # omitted → unconfirmed placeholder
    wash_frequency_days: Optional[int] = Field(default=None, ge=0)


class VehicleUpdate(BaseModel):
    company_id: Optional[int] = None
    wash_frequency_days: Optional[int] = Field(default=None, ge=0)
    next_wash_due_date: Optional[date] = None
    last_wash_type_id: Optional[int] = None


class VehicleOut(BaseModel):
    registration: str
    company_id: int
    wash_frequency_days: int
    next_wash_due_date: Optional[date]
    last_wash_type_id: Optional[int]

    class Config:
        from_attributes = True


class VehicleLookupOut(VehicleOut):
    company_name: str
