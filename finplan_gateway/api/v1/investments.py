"""POST /api/investment-plan - risk-based allocation endpoint"""

import time
from fastapi import APIRouter, Depends, Request

from finplan_gateway.api.dependencies import get_allocation_policy, get_request_id
from finplan_gateway.api.v1.errors import internal_error, invalid_input
from finplan_gateway.api.v1.schemas import (
    BreakdownCategory,
    FundSchema,
    HygieneWarningSchema,
    InvestmentPlanRequest,
    InvestmentPlanResponse,
)
from finplan_gateway.domain.allocation import plan_allocation
from finplan_gateway.domain.exceptions import InvalidInputError
from finplan_gateway.domain.models import AllocationPolicy, AllocationRequest
from finplan_gateway.infrastructure.observability.logging import log_calculation
from finplan_gateway.infrastructure.observability.metrics import record_allocation_plan, record_calculation

router = APIRouter()


@router.post("/investment-plan", response_model=InvestmentPlanResponse)
def investment_plan(
    request_body: InvestmentPlanRequest,
    request: Request,
    policy: AllocationPolicy = Depends(get_allocation_policy),
):
    """
    Split an investment across asset categories for the chosen risk level.

    Returns the breakdown for the allocation chart, fund suggestions keyed by
    category (e.g. "index_funds"), advice text and financial hygiene checks.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = plan_allocation(
            AllocationRequest(
                investment_amount=request_body.investment_amount,
                investment_type=request_body.investment_type,
                risk_level=request_body.risk_level,
                has_health_insurance=request_body.has_health_insurance,
                has_term_insurance=request_body.has_term_insurance,
                has_emergency_fund=request_body.has_emergency_fund,
            ),
            policy,
        )
    except InvalidInputError as e:
        raise invalid_input("investment_plan", e, request_id)
    except Exception as e:
        raise internal_error("investment_plan", e, request_id)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("investment_plan", "ok")
    record_allocation_plan(request_body.risk_level.value)
    log_calculation(
        request_id,
        "investment_plan",
        "ok",
        duration_ms,
        risk_level=request_body.risk_level.value,
        category_count=len(result.categories),
    )

    return InvestmentPlanResponse(
        advice=result.advice,
        breakdown=[
            BreakdownCategory(
                name=category.name,
                percentage=category.percentage,
                amount=float(category.amount),
                color=category.color,
            )
            for category in result.categories
        ],
        funds={
            category.key: [
                FundSchema(
                    name=fund.name,
                    ticker=fund.ticker,
                    expense=fund.expense_ratio,
                    description=fund.description,
                )
                for fund in category.funds
            ]
            for category in result.categories
        },
        hygiene_warnings=[
            HygieneWarningSchema(
                severity=warning.severity.value,
                title=warning.title,
                description=warning.description,
            )
            for warning in result.hygiene_warnings
        ],
    )
