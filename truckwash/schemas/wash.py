from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class WashCreate(BaseModel):
    registration: str = Field(min_length=1, max_length=10)
    wash_type_id: int
    location: str = Field(min_length=1, max_length=30)
    driver_name: Optional[str] = Field(default=None, max_length=50)
    company_id: Optional[int] = None


class WashOut(BaseModel):
    id: int
    registration: str
    company_id: int
    location: str
    driver_name: Optional[str]
    wash_type_id: int
    washed_at: datetime

    class Config:
        from_attributes = True
