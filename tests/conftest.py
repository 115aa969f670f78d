from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from petcare.application.plan_service import PlanService
from petcare.main import app
from petcare.presentation.api_routes import get_clock

# Autumn (October) unless a test picks its own date
FIXED_NOW = datetime(2024, 10, 15, 9, 30, tzinfo=UTC)


@pytest.fixture(name="fixed_now")
def fixed_now_fixture() -> datetime:
    return FIXED_NOW


@pytest.fixture(name="service")
def service_fixture(fixed_now: datetime) -> PlanService:
    return PlanService(lambda: fixed_now)


@pytest.fixture(name="client")
def client_fixture(fixed_now: datetime):
    """Test client whose plans are evaluated at a fixed date."""

    def get_clock_override():
        return lambda: fixed_now

    app.dependency_overrides[get_clock] = get_clock_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
