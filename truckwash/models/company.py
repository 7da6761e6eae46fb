"""
Customer companies. Row UNCONFIRMED_COMPANY_ID (999999, "To be confirmed")
is the reserved placeholder for vehicles not yet assigned to a real customer;
it is seeded on startup and can never be deleted.
"""

from sqlalchemy import Column, Integer, String, DateTime
from truckwash.database import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)

    transport_manager = Column(String(100))
    transport_manager_email = Column(String(100))
    transport_manager_phone = Column(String(20))

    po_contact = Column(String(100))
    po_contact_email = Column(String(100))
    po_contact_phone = Column(String(20))

    pl_contact = Column(String(100))
    pl_contact_email = Column(String(100))
    pl_contact_phone = Column(String(20))

    created_at = Column(DateTime)

    def __repr__(self):
        return f"<Company {self.id} {self.name!r}>"
