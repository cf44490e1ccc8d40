"""Pydantic schemas for API request/response validation

Field names follow the payloads the front end already sends: snake_case for
the goal endpoints, camelCase for the home loan and investment plan forms.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from finplan_gateway.domain.models import InvestmentType, RiskLevel
from finplan_gateway.domain.validation import MAX_AMOUNT

_RISK_LEVEL_ALIASES = {
    1: RiskLevel.LOW,
    2: RiskLevel.MEDIUM,
    3: RiskLevel.HIGH,
    "low": RiskLevel.LOW,
    "medium": RiskLevel.MEDIUM,
    "high": RiskLevel.HIGH,
}

_INVESTMENT_TYPE_ALIASES = {
    "sip": InvestmentType.SIP,
    "lumpsum": InvestmentType.LUMP_SUM,
    "lump_sum": InvestmentType.LUMP_SUM,
}


class ErrorDetail(BaseModel):
    """Body of a domain error response (under "detail")"""

    kind: str  # invalid_input | infeasible
    field: Optional[str] = None
    message: str


# Goals


class CalculateGoalRequest(BaseModel):
    """Request body for POST /api/calculate_goal"""

    goal_amount: float = Field(..., gt=0, le=MAX_AMOUNT, description="Target corpus in rupees")
    duration_years: float = Field(..., gt=0, description="Years until the goal")
    current_savings: float = Field(0.0, ge=0, le=MAX_AMOUNT, description="Amount already saved")
    expected_return: float = Field(..., gt=-100, le=100, description="Expected annual return in percent")
    max_affordable_sip: Optional[float] = Field(None, gt=0, le=MAX_AMOUNT, description="Monthly budget used for on_track")


class CalculateGoalResponse(BaseModel):
    """Response for POST /api/calculate_goal"""

    monthly_sip_required: float
    total_investment: float
    total_interest_earned: float
    on_track: bool


class AdjustGoalRequest(BaseModel):
    """Request body for POST /api/adjust_goal"""

    goal_amount: float = Field(..., gt=0, le=MAX_AMOUNT)
    duration_years: float = Field(..., gt=0)
    expected_return: float = Field(..., gt=-100, le=100)
    max_affordable_sip: float = Field(..., gt=0, le=MAX_AMOUNT)


class AdjustGoalResponse(BaseModel):
    """Response for POST /api/adjust_goal"""

    suggestion: str
    suggested_duration_years: float
    suggested_down_payment: float
    new_sip: float
    achievable_goal_amount: float
    step_up_rate: float
    step_up_starting_sip: float


# Home loan


class HomeLoanAdviceRequest(BaseModel):
    """Request body for POST /api/home-loan/advice"""

    model_config = ConfigDict(populate_by_name=True)

    monthly_income: float = Field(..., alias="monthlyIncome", gt=0, le=MAX_AMOUNT)
    existing_emis: float = Field(0.0, alias="existingEmis", ge=0, le=MAX_AMOUNT)
    age: int = Field(..., ge=18, le=80)
    desired_loan_amount: float = Field(..., alias="desiredLoanAmount", gt=0, le=MAX_AMOUNT)
    interest_rate: float = Field(..., alias="interestRate", ge=1, le=20)
    tenure: float = Field(..., ge=5, le=30, description="Loan tenure in years")


class HomeLoanAdviceResponse(BaseModel):
    """Response for POST /api/home-loan/advice"""

    status: str
    monthly_emi: float
    total_monthly_emi_with_existing: float
    max_safe_emi: float
    suggestions: List[str]


# Investment plan


class InvestmentPlanRequest(BaseModel):
    """Request body for POST /api/investment-plan"""

    model_config = ConfigDict(populate_by_name=True)

    investment_amount: float = Field(..., alias="investmentAmount", gt=0, le=MAX_AMOUNT)
    investment_type: InvestmentType = Field(InvestmentType.SIP, alias="investmentType")
    risk_level: RiskLevel = Field(RiskLevel.MEDIUM, alias="riskLevel")
    has_health_insurance: bool = Field(False, alias="hasHealthInsurance")
    has_term_insurance: bool = Field(False, alias="hasTermInsurance")
    has_emergency_fund: bool = Field(False, alias="hasEmergencyFund")

    @field_validator("risk_level", mode="before")
    @classmethod
    def parse_risk_level(cls, value: Any) -> Any:
        """Accept the slider value (1-3) or a case-insensitive name"""
        if isinstance(value, str):
            return _RISK_LEVEL_ALIASES.get(value.strip().lower(), value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return _RISK_LEVEL_ALIASES.get(value, value)
        return value

    @field_validator("investment_type", mode="before")
    @classmethod
    def parse_investment_type(cls, value: Any) -> Any:
        """Accept "sip" / "lumpsum" as sent by the form"""
        if isinstance(value, str):
            return _INVESTMENT_TYPE_ALIASES.get(value.strip().lower(), value)
        return value


class FundSchema(BaseModel):
    name: str
    ticker: str
    expense: float
    description: str


class BreakdownCategory(BaseModel):
    name: str
    percentage: float
    amount: float
    color: str


class HygieneWarningSchema(BaseModel):
    severity: str
    title: str
    description: str


class InvestmentPlanResponse(BaseModel):
    """Response for POST /api/investment-plan"""

    advice: List[str]
    breakdown: List[BreakdownCategory]
    funds: Dict[str, List[FundSchema]]
    hygiene_warnings: List[HygieneWarningSchema]


# Dashboard


class DashboardGoal(BaseModel):
    """One goal in POST /api/dashboard/summary"""

    name: str = Field(..., min_length=1)
    goal_amount: float = Field(..., gt=0, le=MAX_AMOUNT)
    duration_years: float = Field(..., gt=0)
    current_savings: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    expected_return: float = Field(..., gt=-100, le=100)
    max_affordable_sip: Optional[float] = Field(None, gt=0, le=MAX_AMOUNT)


class DashboardSummaryRequest(BaseModel):
    """Request body for POST /api/dashboard/summary"""

    goals: List[DashboardGoal]


class DashboardGoalStatus(BaseModel):
    name: str
    monthly_sip_required: float
    on_track: bool
    status: str


class DashboardSummaryResponse(BaseModel):
    """Response for POST /api/dashboard/summary"""

    total_monthly_sip: float
    active_goals: int
    projected_corpus: float
    needs_attention: List[str]
    goals: List[DashboardGoalStatus]
