"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from finplan_gateway.api.main import create_app
from finplan_gateway.domain.models import (
    AllocationPolicy,
    GoalSnapshot,
    LoanAdviceRequest,
)
from finplan_gateway.infrastructure.tables.allocation import load_allocation_policy


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def allocation_policy() -> AllocationPolicy:
    """Allocation table shipped with the package"""
    return load_allocation_policy()


@pytest.fixture
def dream_car_goal() -> GoalSnapshot:
    """Short-horizon goal whose SIP is above a typical budget"""
    return GoalSnapshot(
        name="Dream Car",
        goal_amount=800000,
        duration_years=3,
        current_savings=50000,
        expected_return_pct=11,
        max_affordable_sip=8000,
    )


@pytest.fixture
def child_education_goal() -> GoalSnapshot:
    """Long-horizon goal that fits its budget"""
    return GoalSnapshot(
        name="Child Education",
        goal_amount=1500000,
        duration_years=8,
        current_savings=100000,
        expected_return_pct=11,
        max_affordable_sip=12000,
    )


@pytest.fixture
def sample_loan() -> LoanAdviceRequest:
    """Home loan above the 40% safe-EMI limit for a 50k income"""
    return LoanAdviceRequest(
        monthly_income=50000,
        existing_emis=0,
        age=30,
        desired_loan_amount=2500000,
        interest_rate_pct=8.5,
        tenure_years=20,
    )
