"""
Service-area catalogue. Independent reference data: washes store the
location name as a string snapshot, not a location id.
"""

from sqlalchemy import Column, Integer, String
from truckwash.database import Base


class Location(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    motorway = Column(String(10), nullable=False)
    area = Column(String(50), nullable=False)
    postcode = Column(String(10), nullable=False)

    def __repr__(self):
        return f"<Location {self.id} {self.name!r} {self.motorway}>"
