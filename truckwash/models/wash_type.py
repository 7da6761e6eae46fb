"""
Wash types table: the admin-managed price list.
Referenced by washes.wash_type_id and vehicles.last_wash_type_id (no FK constraint;
deleting a wash type leaves historical washes pointing at the old id).
"""

from sqlalchemy import Column, Integer, String, Numeric
from truckwash.database import Base


class WashType(Base):
    __tablename__ = "washtypes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String(100), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    def __repr__(self):
        return f"<WashType {self.id} {self.description!r} price={self.price}>"
