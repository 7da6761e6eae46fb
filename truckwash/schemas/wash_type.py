from pydantic import BaseModel, Field, field_validator
from decimal import Decimal
from typing import Optional


class WashTypeCreate(BaseModel):
    description: str = Field(min_length=1, max_length=100)
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class WashTypeUpdate(BaseModel):
    description: Optional[str] = Field(default=None, min_length=1, max_length=100)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)

    @field_validator("description", "price")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class WashTypeOut(BaseModel):
    id: int
    description: str
    price: Decimal

    class Config:
        from_attributes = True
