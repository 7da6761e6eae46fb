"""
Generated wash lists and invoices. Each row is a write-once audit artifact:
the rendered PDF is stored as-is and only ever downloaded afterwards.
"""

from sqlalchemy import Column, Integer, String, Date, DateTime, LargeBinary
from truckwash.database import Base


class WashList(Base):
    __tablename__ = "wash_lists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    generated_at = Column(DateTime, nullable=False)
    pdf_content = Column(LargeBinary, nullable=False)

    def __repr__(self):
        return f"<WashList {self.id} company={self.company_id} {self.start_date}..{self.end_date}>"


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(Integer, nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    po_number = Column(String(50))
    generated_at = Column(DateTime, nullable=False)
    pdf_content = Column(LargeBinary, nullable=False)

    def __repr__(self):
        return f"<Invoice {self.id} company={self.company_id} po={self.po_number}>"
