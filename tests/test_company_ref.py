# tests/test_company_ref.py
"""Unit tests for the CompanyRef placeholder wrapper."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from truckwash.services.company_ref import CompanyRef


class TestCompanyRef:
    def test_none_is_unconfirmed(self):
        assert CompanyRef.from_id(None) is CompanyRef.UNCONFIRMED

    def test_placeholder_id_is_unconfirmed(self):
        ref = CompanyRef.from_id(999999)
        assert ref.is_unconfirmed
        assert ref == CompanyRef.UNCONFIRMED
        assert ref.company_id == 999999

    def test_known_company(self):
        ref = CompanyRef.known(42)
        assert not ref.is_unconfirmed
        assert ref.company_id == 42
        assert str(ref) == "Known(42)"

    def test_str_unconfirmed(self):
        assert str(CompanyRef.UNCONFIRMED) == "Unconfirmed"
