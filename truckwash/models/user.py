"""
Staff and customer logins. company_id scopes transportAdmin users to their
own company's vehicles and washes.
"""

import uuid

from sqlalchemy import Column, Integer, String, DateTime
from truckwash.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="washOperative")
    company_id = Column(Integer)
    created_at = Column(DateTime)
    updated_at = Column(DateTime)

    def __repr__(self):
        return f"<User {self.email} role={self.role}>"
