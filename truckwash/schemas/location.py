from pydantic import BaseModel, Field, field_validator
from typing import Optional


class LocationCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    motorway: str = Field(min_length=1, max_length=10)
    area: str = Field(min_length=1, max_length=50)
    postcode: str = Field(min_length=1, max_length=10)


class LocationUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    motorway: Optional[str] = Field(default=None, min_length=1, max_length=10)
    area: Optional[str] = Field(default=None, min_length=1, max_length=50)
    postcode: Optional[str] = Field(default=None, min_length=1, max_length=10)

    @field_validator("name", "motorway", "area", "postcode")
    @classmethod
    def not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class LocationOut(BaseModel):
    id: int
    name: str
    motorway: str
    area: str
    postcode: str

    class Config:
        from_attributes = True
