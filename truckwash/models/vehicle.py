"""
Fleet registry table, keyed by registration plate (always stored uppercase).

next_wash_due_date is the date after which the vehicle may be washed again,
set to (wash date + wash_frequency_days) each time a wash is recorded.
"""

from sqlalchemy import Column, Integer, String, Date
from truckwash.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    registration = Column(String(10), primary_key=True)
    company_id = Column(Integer, nullable=False, index=True)
    wash_frequency_days = Column(Integer, default=0, nullable=False)
    next_wash_due_date = Column(Date)
    last_wash_type_id = Column(Integer)

    def __repr__(self):
        return (f"<Vehicle {self.registration} company={self.company_id} "
                f"due={self.next_wash_due_date}>")
