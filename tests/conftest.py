"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from loan_fee_gateway.api.main import create_app
from loan_fee_gateway.domain.fees import FeeCalculator


@pytest.fixture
def calculator() -> FeeCalculator:
    """Calculator over the reference tables, clamping out-of-range amounts"""
    return FeeCalculator()


@pytest.fixture
def strict_calculator() -> FeeCalculator:
    """Calculator that rejects amounts outside the table range"""
    return FeeCalculator(strict_bounds=True)


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)
