"""
Wash ledger, one row per wash performed. Append-only.
company_id is a snapshot taken at wash time, not a live foreign key; it only
changes through the unconfirmed-company reconciliation in vehicle_service.
"""

from sqlalchemy import Column, Integer, String, DateTime
from truckwash.database import Base


class Wash(Base):
    __tablename__ = "washes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    registration = Column(String(10), nullable=False, index=True)
    company_id = Column(Integer, nullable=False, index=True)
    location = Column(String(30), nullable=False)
    driver_name = Column(String(50))
    wash_type_id = Column(Integer, nullable=False)
    washed_at = Column(DateTime, nullable=False, index=True)

    def __repr__(self):
        return f"<Wash {self.id} {self.registration} company={self.company_id} at={self.washed_at}>"
