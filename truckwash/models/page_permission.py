"""
Sparse per-role page access overrides. A missing (role, page_route) row means
the role's default policy applies (see permission_service.default_policy).
"""

from sqlalchemy import Column, Integer, String, Boolean, UniqueConstraint
from truckwash.database import Base


class PagePermission(Base):
    __tablename__ = "page_permissions"
    __table_args__ = (UniqueConstraint("role", "page_route", name="uq_page_permission_role_route"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    role = Column(String(20), nullable=False, index=True)
    page_route = Column(String(50), nullable=False)
    is_allowed = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<PagePermission {self.role} {self.page_route} allowed={self.is_allowed}>"
