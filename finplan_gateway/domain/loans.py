"""Home loan affordability engine - EMI calculation and eligibility advice"""

from typing import List

from finplan_gateway.domain.annuity import emi, monthly_rate, principal_for_emi
from finplan_gateway.domain.exceptions import InvalidInputError
from finplan_gateway.domain.models import LoanAdviceRequest, LoanAdviceResult, LoanStatus
from finplan_gateway.domain.validation import (
    require_non_negative,
    require_positive,
    require_range,
)
from finplan_gateway.utils.money import format_inr

MIN_AGE, MAX_AGE = 18, 80
MIN_RATE_PCT, MAX_RATE_PCT = 1.0, 20.0
MIN_TENURE_YEARS, MAX_TENURE_YEARS = 5.0, 30.0

SAFE_EMI_RATIO = 0.4  # total EMIs may use up to 40% of monthly income
COMFORTABLE_EMI_RATIO = 0.8  # below 80% of the safe limit leaves a buffer
RETIREMENT_AGE = 60


def validate_loan_request(request: LoanAdviceRequest) -> None:
    """
    Reject out-of-range loan inputs.

    Raises:
        InvalidInputError: With the offending field name
    """
    require_positive("monthlyIncome", request.monthly_income)
    require_non_negative("existingEmis", request.existing_emis)
    if isinstance(request.age, bool) or not isinstance(request.age, int):
        raise InvalidInputError("age", f"must be a whole number, got {request.age!r}")
    require_range("age", request.age, MIN_AGE, MAX_AGE)
    require_positive("desiredLoanAmount", request.desired_loan_amount)
    require_range("interestRate", request.interest_rate_pct, MIN_RATE_PCT, MAX_RATE_PCT)
    require_range("tenure", request.tenure_years, MIN_TENURE_YEARS, MAX_TENURE_YEARS)


def calculate_emi(principal: float, interest_rate_pct: float, tenure_years: float) -> float:
    """Monthly EMI for an amortizing loan at an annual rate over tenure_years"""
    return emi(principal, monthly_rate(interest_rate_pct), tenure_years * 12)


def affordable_principal(target_emi: float, interest_rate_pct: float, tenure_years: float) -> float:
    """Largest loan amount whose EMI does not exceed target_emi (0 if no headroom)"""
    if target_emi <= 0:
        return 0.0
    return principal_for_emi(target_emi, monthly_rate(interest_rate_pct), tenure_years * 12)


def advise_loan(
    request: LoanAdviceRequest,
    safe_emi_ratio: float = SAFE_EMI_RATIO,
    comfortable_emi_ratio: float = COMFORTABLE_EMI_RATIO,
) -> LoanAdviceResult:
    """
    Check a home loan against the safe-EMI rule and suggest remediation.

    Eligibility: EMI + existing EMIs <= safe_emi_ratio * monthly income.

    Suggestions when not eligible (in display order):
    - extend tenure to the maximum if it is shorter
    - pay down existing EMIs if there are any
    - reduce the loan amount to what the remaining headroom can service

    When eligible, a positive note below the comfortable threshold, otherwise a
    caution. A note is added when the loan runs past retirement age.

    Raises:
        InvalidInputError: On any field outside its domain
    """
    validate_loan_request(request)

    monthly_emi = calculate_emi(request.desired_loan_amount, request.interest_rate_pct, request.tenure_years)
    total_emi = monthly_emi + request.existing_emis
    max_safe_emi = safe_emi_ratio * request.monthly_income
    eligible = total_emi <= max_safe_emi

    if eligible:
        suggestions = _eligible_suggestions(total_emi, max_safe_emi, comfortable_emi_ratio)
    else:
        suggestions = _remediation_suggestions(request, max_safe_emi)

    if request.age + request.tenure_years > RETIREMENT_AGE:
        suggestions.append(
            f"This loan runs until age {request.age + request.tenure_years:g}, past the usual retirement "
            f"age of {RETIREMENT_AGE}. Plan how EMIs will be paid after retirement or choose a shorter tenure."
        )

    return LoanAdviceResult(
        status=LoanStatus.ELIGIBLE if eligible else LoanStatus.NOT_ELIGIBLE,
        monthly_emi=monthly_emi,
        total_monthly_emi_with_existing=total_emi,
        max_safe_emi=max_safe_emi,
        suggestions=suggestions,
    )


def _remediation_suggestions(request: LoanAdviceRequest, max_safe_emi: float) -> List[str]:
    suggestions: List[str] = []

    if request.tenure_years < MAX_TENURE_YEARS:
        longer_emi = calculate_emi(request.desired_loan_amount, request.interest_rate_pct, MAX_TENURE_YEARS)
        suggestions.append(
            f"Extend the loan tenure to {MAX_TENURE_YEARS:g} years to bring the EMI down to "
            f"{format_inr(longer_emi)}/month."
        )

    if request.existing_emis > 0:
        suggestions.append(
            f"Pay down your existing EMIs of {format_inr(request.existing_emis)}/month "
            f"before taking on this loan."
        )

    headroom = max_safe_emi - request.existing_emis
    principal = affordable_principal(headroom, request.interest_rate_pct, request.tenure_years)
    if principal > 0:
        suggestions.append(
            f"Reduce the loan amount to {format_inr(principal)} to keep your total EMI within "
            f"the safe limit of {format_inr(max_safe_emi)}/month."
        )
    else:
        suggestions.append(
            f"Your existing EMIs already use the safe limit of {format_inr(max_safe_emi)}/month. "
            f"Clear existing loans before applying."
        )

    return suggestions


def _eligible_suggestions(total_emi: float, max_safe_emi: float, comfortable_emi_ratio: float) -> List[str]:
    if total_emi < comfortable_emi_ratio * max_safe_emi:
        return ["Your total EMI is comfortably within the safe limit. You are in a good position to take this loan."]
    return [
        f"Your total EMI of {format_inr(total_emi)}/month is close to the safe limit of "
        f"{format_inr(max_safe_emi)}/month. Keep a buffer for rate hikes and emergencies."
    ]
