"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from investcalc.calculations.engine import InputParameters
from investcalc.calculations.presets import DEFAULT_INPUTS
from investcalc.main import app


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture(scope="session")
def anyio_backend():
    """Backend for async tests."""
    return "asyncio"


@pytest.fixture
def client():
    """Create test client."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def base_inputs() -> InputParameters:
    """Default scenario: 320k purchase, 1100 rent, 60k equity."""
    return DEFAULT_INPUTS


@pytest.fixture
def base_payload():
    """Default scenario as an API payload."""
    return {
        "purchase_price": 320000,
        "cold_rent_monthly": 1100,
        "non_alloc_costs_monthly": 120,
        "equity": 60000,
        "interest_rate_pct": 3.8,
        "initial_repayment_pct": 2.0,
        "vacancy_pct": 4,
        "closing_costs_pct": 10,
        "capex": 0,
        "reserves_monthly": 0,
    }
