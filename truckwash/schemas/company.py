from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional


class CompanyContacts(BaseModel):
    transport_manager: Optional[str] = Field(default=None, max_length=100)
    transport_manager_email: Optional[str] = Field(default=None, max_length=100)
    transport_manager_phone: Optional[str] = Field(default=None, max_length=20)
    po_contact: Optional[str] = Field(default=None, max_length=100)
    po_contact_email: Optional[str] = Field(default=None, max_length=100)
    po_contact_phone: Optional[str] = Field(default=None, max_length=20)
    pl_contact: Optional[str] = Field(default=None, max_length=100)
    pl_contact_email: Optional[str] = Field(default=None, max_length=100)
    pl_contact_phone: Optional[str] = Field(default=None, max_length=20)


class CompanyCreate(CompanyContacts):
    name: str = Field(min_length=1, max_length=100)


class CompanyUpdate(CompanyContacts):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, v):
        if v is None:
            raise ValueError("name cannot be null")
        return v


class CompanyOut(CompanyContacts):
    id: int
    name: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True
