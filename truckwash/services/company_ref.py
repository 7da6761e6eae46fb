"""
Typed wrapper around a company id.

A vehicle or wash either belongs to a known customer company or to the
unconfirmed placeholder (settings.UNCONFIRMED_COMPANY_ID). All placeholder
checks go through CompanyRef so the magic id lives in exactly one place.
"""

from dataclasses import dataclass
from typing import Optional

from truckwash.config import settings


@dataclass(frozen=True)
class CompanyRef:
    """Known(id) when ``known_id`` is set, Unconfirmed when it is None."""

    known_id: Optional[int] = None

    @classmethod
    def known(cls, company_id: int) -> "CompanyRef":
        if company_id == settings.UNCONFIRMED_COMPANY_ID:
            return cls.UNCONFIRMED
        return cls(known_id=company_id)

    @classmethod
    def from_id(cls, company_id: Optional[int]) -> "CompanyRef":
        """None and the placeholder id both map to Unconfirmed."""
        if company_id is None:
            return cls.UNCONFIRMED
        return cls.known(company_id)

    @property
    def is_unconfirmed(self) -> bool:
        return self.known_id is None

    @property
    def company_id(self) -> int:
        """The id stored in the database for this reference."""
        return settings.UNCONFIRMED_COMPANY_ID if self.known_id is None else self.known_id

    def __str__(self):
        return "Unconfirmed" if self.is_unconfirmed else f"Known({self.known_id})"


CompanyRef.UNCONFIRMED = CompanyRef()
