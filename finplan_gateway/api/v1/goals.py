"""POST /api/calculate_goal and /api/adjust_goal - goal SIP planning endpoints"""

import time
from fastapi import APIRouter, Depends, Request

from finplan_gateway.api.dependencies import get_request_id, get_settings
from finplan_gateway.api.v1.errors import infeasible, internal_error, invalid_input
from finplan_gateway.api.v1.schemas import (
    AdjustGoalRequest,
    AdjustGoalResponse,
    CalculateGoalRequest,
    CalculateGoalResponse,
)
from finplan_gateway.config import Settings
from finplan_gateway.domain.exceptions import InfeasibleGoalError, InvalidInputError
from finplan_gateway.domain.goals import adjust_goal, project_goal
from finplan_gateway.domain.models import AdjustmentRequest, GoalProjectionRequest
from finplan_gateway.infrastructure.observability.logging import log_calculation
from finplan_gateway.infrastructure.observability.metrics import record_adjustment, record_calculation
from finplan_gateway.utils.money import round_money

router = APIRouter()


@router.post("/calculate_goal", response_model=CalculateGoalResponse)
def calculate_goal(
    request_body: CalculateGoalRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Calculate the monthly SIP required to reach a goal.

    on_track is false only when max_affordable_sip is supplied and the
    required SIP exceeds it.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = project_goal(
            GoalProjectionRequest(
                goal_amount=request_body.goal_amount,
                duration_years=request_body.duration_years,
                current_savings=request_body.current_savings,
                expected_return_pct=request_body.expected_return,
                max_affordable_sip=request_body.max_affordable_sip,
            ),
            max_duration_years=app_settings.max_goal_duration_years,
        )
    except InvalidInputError as e:
        raise invalid_input("calculate_goal", e, request_id)
    except Exception as e:
        raise internal_error("calculate_goal", e, request_id)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("calculate_goal", "ok")
    log_calculation(
        request_id,
        "calculate_goal",
        "on_track" if result.on_track else "over_budget",
        duration_ms,
        monthly_sip_required=result.monthly_sip_required,
    )

    return CalculateGoalResponse(
        monthly_sip_required=round_money(result.monthly_sip_required),
        total_investment=round_money(result.total_investment),
        total_interest_earned=round_money(result.total_interest_earned),
        on_track=result.on_track,
    )


@router.post("/adjust_goal", response_model=AdjustGoalResponse)
def adjust_goal_plan(
    request_body: AdjustGoalRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Suggest plans that fit the goal into a monthly SIP budget.

    Flow:
    1. Project the SIP the goal needs at its original duration
    2. If over budget, find the shortest whole-year duration the budget reaches
    3. Compute the down payment that closes the gap at the original duration
    4. Add the reduced-goal and step-up SIP alternatives
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = adjust_goal(
            AdjustmentRequest(
                goal_amount=request_body.goal_amount,
                duration_years=request_body.duration_years,
                expected_return_pct=request_body.expected_return,
                max_affordable_sip=request_body.max_affordable_sip,
            ),
            max_duration_years=app_settings.max_goal_duration_years,
            search_max_years=app_settings.duration_search_max_years,
            step_up_rate_pct=app_settings.step_up_rate_pct,
        )
    except InvalidInputError as e:
        raise invalid_input("adjust_goal", e, request_id)
    except InfeasibleGoalError as e:
        raise infeasible("adjust_goal", e, request_id)
    except Exception as e:
        raise internal_error("adjust_goal", e, request_id)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("adjust_goal", "ok")
    record_adjustment(request_body.duration_years, result.suggested_duration_years)
    log_calculation(
        request_id,
        "adjust_goal",
        "ok",
        duration_ms,
        suggested_duration_years=result.suggested_duration_years,
        suggested_down_payment=result.suggested_down_payment,
    )

    return AdjustGoalResponse(
        suggestion=result.suggestion_text,
        suggested_duration_years=result.suggested_duration_years,
        suggested_down_payment=round_money(result.suggested_down_payment),
        new_sip=round_money(result.new_sip),
        achievable_goal_amount=round_money(result.achievable_goal_amount),
        step_up_rate=result.step_up_rate_pct,
        step_up_starting_sip=round_money(result.step_up_starting_sip),
    )
