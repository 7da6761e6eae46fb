from pydantic import BaseModel, Field


class PermissionUpdate(BaseModel):
    role: str = Field(min_length=1, max_length=20)
    page_route: str = Field(min_length=1, max_length=50)
    is_allowed: bool


class PermissionOut(BaseModel):
    id: int
    role: str
    page_route: str
    is_allowed: bool

    class Config:
        from_attributes = True


class NavigationItem(BaseModel):
    label: str
    route: str
