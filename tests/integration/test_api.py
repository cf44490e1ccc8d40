"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "finplan-gateway"}


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/api/calculate_goal",
        json={"goal_amount": 800000, "duration_years": 3, "current_savings": 50000, "expected_return": 11},
    )

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "finplan_calculation_total" in response.text
    assert "http_request_duration_seconds" in response.text


def test_request_id_header(client: TestClient):
    generated = client.get("/health")
    echoed = client.get("/health", headers={"X-Request-ID": "req-123"})

    assert generated.headers["X-Request-ID"]
    assert echoed.headers["X-Request-ID"] == "req-123"


def test_calculate_goal(client: TestClient):
    """Test POST /api/calculate_goal with the Dream Car goal"""
    response = client.post(
        "/api/calculate_goal",
        json={
            "goal_amount": 800000,
            "duration_years": 3,
            "current_savings": 50000,
            "expected_return": 11,
            "max_affordable_sip": 15000,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["monthly_sip_required"] == pytest.approx(17221, abs=100)
    assert data["on_track"] is False
    assert data["total_investment"] + 50000 + data["total_interest_earned"] == pytest.approx(800000, abs=0.05)


def test_calculate_goal_zero_return(client: TestClient):
    response = client.post(
        "/api/calculate_goal",
        json={"goal_amount": 360000, "duration_years": 3, "current_savings": 0, "expected_return": 0},
    )

    assert response.status_code == 200
    assert response.json()["monthly_sip_required"] == 10000
    assert response.json()["on_track"] is True


def test_calculate_goal_rejects_negative_duration(client: TestClient):
    response = client.post(
        "/api/calculate_goal",
        json={"goal_amount": 800000, "duration_years": -3, "current_savings": 0, "expected_return": 11},
    )

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", "duration_years"]


def test_calculate_goal_rejects_duration_above_max(client: TestClient):
    """Domain validation reports the offending field"""
    response = client.post(
        "/api/calculate_goal",
        json={"goal_amount": 800000, "duration_years": 45, "current_savings": 0, "expected_return": 11},
    )

    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "invalid_input"
    assert response.json()["detail"]["field"] == "duration_years"


def test_adjust_goal(client: TestClient):
    """Test POST /api/adjust_goal with an 8k budget"""
    response = client.post(
        "/api/adjust_goal",
        json={"goal_amount": 800000, "duration_years": 3, "expected_return": 11, "max_affordable_sip": 8000},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["suggested_duration_years"] > 3
    assert data["suggested_down_payment"] > 0
    assert data["new_sip"] == 8000
    assert data["step_up_rate"] == 10
    assert "₹8,000/month" in data["suggestion"]


def test_adjust_goal_infeasible(client: TestClient):
    response = client.post(
        "/api/adjust_goal",
        json={"goal_amount": 50000000, "duration_years": 3, "expected_return": 2, "max_affordable_sip": 500},
    )

    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "infeasible"


def test_home_loan_advice_not_eligible(client: TestClient):
    """Test POST /api/home-loan/advice with the form's camelCase payload"""
    response = client.post(
        "/api/home-loan/advice",
        json={
            "monthlyIncome": 50000,
            "existingEmis": 0,
            "age": 30,
            "desiredLoanAmount": 2500000,
            "interestRate": 8.5,
            "tenure": 20,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "Not Eligible"
    assert data["monthly_emi"] == pytest.approx(21700, abs=50)
    assert data["max_safe_emi"] == 20000
    assert data["total_monthly_emi_with_existing"] == data["monthly_emi"]
    assert len(data["suggestions"]) >= 1


def test_home_loan_advice_eligible(client: TestClient):
    response = client.post(
        "/api/home-loan/advice",
        json={
            "monthlyIncome": 120000,
            "existingEmis": 5000,
            "age": 35,
            "desiredLoanAmount": 2500000,
            "interestRate": 8.5,
            "tenure": 20,
        },
    )

    assert response.status_code == 200
    assert response.json()["status"] == "Eligible"


@pytest.mark.parametrize(
    "field,value",
    [("age", 17), ("interestRate", 25), ("tenure", 40), ("monthlyIncome", 0)],
)
def test_home_loan_advice_rejects_out_of_range(client: TestClient, field, value):
    payload = {
        "monthlyIncome": 50000,
        "existingEmis": 0,
        "age": 30,
        "desiredLoanAmount": 2500000,
        "interestRate": 8.5,
        "tenure": 20,
    }
    payload[field] = value

    response = client.post("/api/home-loan/advice", json=payload)

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", field]


def test_investment_plan(client: TestClient):
    """Test POST /api/investment-plan with the form's defaults"""
    response = client.post(
        "/api/investment-plan",
        json={
            "investmentAmount": 10000,
            "investmentType": "sip",
            "riskLevel": 2,
            "hasHealthInsurance": False,
            "hasTermInsurance": True,
            "hasEmergencyFund": False,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert sum(c["percentage"] for c in data["breakdown"]) == 100
    assert sum(c["amount"] for c in data["breakdown"]) == pytest.approx(10000)
    assert data["breakdown"][0] == {"name": "Index Funds", "percentage": 40, "amount": 4000, "color": "#0088FE"}
    assert set(data["funds"]) == {"index_funds", "large_cap", "debt", "gold", "reits"}
    assert {"name", "ticker", "expense", "description"} <= set(data["funds"]["gold"][0])
    assert [w["severity"] for w in data["hygiene_warnings"]] == ["error", "warning", "success"]
    assert data["advice"]


@pytest.mark.parametrize("risk_level", ["Low", "high", 1, 3])
def test_investment_plan_accepts_risk_level_names_and_slider_values(client: TestClient, risk_level):
    response = client.post(
        "/api/investment-plan",
        json={"investmentAmount": 5000, "investmentType": "lumpsum", "riskLevel": risk_level},
    )

    assert response.status_code == 200
    assert sum(c["percentage"] for c in response.json()["breakdown"]) == 100


def test_investment_plan_rejects_unknown_risk_level(client: TestClient):
    response = client.post(
        "/api/investment-plan",
        json={"investmentAmount": 5000, "investmentType": "sip", "riskLevel": 7},
    )

    assert response.status_code == 422


def test_dashboard_summary(client: TestClient):
    """Test POST /api/dashboard/summary with two goals"""
    response = client.post(
        "/api/dashboard/summary",
        json={
            "goals": [
                {
                    "name": "Dream Car",
                    "goal_amount": 800000,
                    "duration_years": 3,
                    "current_savings": 50000,
                    "expected_return": 11,
                    "max_affordable_sip": 8000,
                },
                {
                    "name": "Child Education",
                    "goal_amount": 1500000,
                    "duration_years": 8,
                    "current_savings": 100000,
                    "expected_return": 11,
                    "max_affordable_sip": 12000,
                },
            ]
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["active_goals"] == 2
    assert data["projected_corpus"] == 2300000
    assert data["needs_attention"] == ["Dream Car"]
    assert data["total_monthly_sip"] == pytest.approx(
        sum(goal["monthly_sip_required"] for goal in data["goals"]), abs=0.02
    )


@pytest.mark.parametrize(
    "path,payload,field",
    [
        (
            "/api/calculate_goal",
            {"goal_amount": 1e300, "duration_years": 3, "current_savings": 0, "expected_return": 11},
            "goal_amount",
        ),
        (
            "/api/home-loan/advice",
            {
                "monthlyIncome": 50000,
                "existingEmis": 0,
                "age": 30,
                "desiredLoanAmount": 1e300,
                "interestRate": 8.5,
                "tenure": 20,
            },
            "desiredLoanAmount",
        ),
        ("/api/investment-plan", {"investmentAmount": 1e30, "investmentType": "sip", "riskLevel": 2}, "investmentAmount"),
    ],
)
def test_rejects_amounts_too_large_to_represent(client: TestClient, path, payload, field):
    """Huge finite amounts are a 422 naming the field, not a server error"""
    response = client.post(path, json=payload)

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", field]
