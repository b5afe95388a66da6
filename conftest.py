import pytest
from datetime import datetime
from zoneinfo import ZoneInfo

from httpx import ASGITransport, AsyncClient

from tumafast.main import app
from tumafast.core.config import settings


NAIROBI = ZoneInfo("Africa/Nairobi")


@pytest.fixture
async def test_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def strict_mode(monkeypatch):
    monkeypatch.setattr(settings, "PRICING_STRICT_MODE", True)
    yield


@pytest.fixture
def nairobi():
    return NAIROBI


@pytest.fixture
def morning(nairobi):
    """Tuesday 2024-03-12 09:00 in Nairobi"""
    return datetime(2024, 3, 12, 9, 0, tzinfo=nairobi)


@pytest.fixture
def late_afternoon(nairobi):
    """Tuesday 2024-03-12 15:30 in Nairobi"""
    return datetime(2024, 3, 12, 15, 30, tzinfo=nairobi)


@pytest.fixture
def valid_quote_data():
    return {
        "distance_meters": 5000,
        "vehicle_class": "motorbike",
        "service_tier": "standard",
        "stop_count": 1,
    }


@pytest.fixture
def valid_arrival_data():
    return {
        "distance_meters": 35000,
        "service_tier": "express",
        "scheduled_time": "2024-03-12T09:00:00+03:00",
    }


@pytest.fixture
def app_settings():
    """Return application settings"""
    return settings


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "arrival: marks tests related to arrival estimates"
    )
    config.addinivalue_line(
        "markers", "recommendation: marks tests related to vehicle recommendation"
    )
