# tests/conftest.py

import pytest

from database import set_client
from tests.fakes import FakeClient

SCHOOL_ID = "school-1"
TODAY = "2024-06-10"


@pytest.fixture
def school_tables():
    return {
        "schools": [{
            "id": SCHOOL_ID,
            "name": "Green Valley School",
            "school_code": "GVS01",
            "is_active": True,
            "subscription_end_date": "2099-12-31",
            "total_periods": 6,
        }],
    }


@pytest.fixture
def client(school_tables):
    fake = FakeClient(school_tables)
    set_client(fake)
    yield fake
    set_client(None)


@pytest.fixture
def fixed_today(monkeypatch):
    """Freeze the IST date used by modules that stamp today's date"""
    for module in ("database.dashboard", "database.attendance", "database.periods"):
        monkeypatch.setattr(f"{module}.get_ist_date", lambda now=None: TODAY)
    return TODAY
