"""POST /api/home-loan/advice - home loan eligibility endpoint"""

import time
from fastapi import APIRouter, Depends, Request

from finplan_gateway.api.dependencies import get_request_id, get_settings
from finplan_gateway.api.v1.errors import internal_error, invalid_input
from finplan_gateway.api.v1.schemas import HomeLoanAdviceRequest, HomeLoanAdviceResponse
from finplan_gateway.config import Settings
from finplan_gateway.domain.exceptions import InvalidInputError
from finplan_gateway.domain.loans import advise_loan
from finplan_gateway.domain.models import LoanAdviceRequest
from finplan_gateway.infrastructure.observability.logging import log_calculation
from finplan_gateway.infrastructure.observability.metrics import record_calculation, record_loan_decision
from finplan_gateway.utils.money import round_money

router = APIRouter()


@router.post("/home-loan/advice", response_model=HomeLoanAdviceResponse)
def home_loan_advice(
    request_body: HomeLoanAdviceRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Check whether a home loan's EMI fits within the safe share of income.

    Returns the EMI breakdown, an Eligible / Not Eligible status and
    suggestions for improving eligibility.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = advise_loan(
            LoanAdviceRequest(
                monthly_income=request_body.monthly_income,
                existing_emis=request_body.existing_emis,
                age=request_body.age,
                desired_loan_amount=request_body.desired_loan_amount,
                interest_rate_pct=request_body.interest_rate,
                tenure_years=request_body.tenure,
            ),
            safe_emi_ratio=app_settings.safe_emi_ratio,
            comfortable_emi_ratio=app_settings.comfortable_emi_ratio,
        )
    except InvalidInputError as e:
        raise invalid_input("home_loan_advice", e, request_id)
    except Exception as e:
        raise internal_error("home_loan_advice", e, request_id)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("home_loan_advice", "ok")
    record_loan_decision(result.status.value)
    log_calculation(
        request_id,
        "home_loan_advice",
        result.status.value,
        duration_ms,
        monthly_emi=result.monthly_emi,
        max_safe_emi=result.max_safe_emi,
    )

    return HomeLoanAdviceResponse(
        status=result.status.value,
        monthly_emi=round_money(result.monthly_emi),
        total_monthly_emi_with_existing=round_money(result.total_monthly_emi_with_existing),
        max_safe_emi=round_money(result.max_safe_emi),
        suggestions=result.suggestions,
    )
