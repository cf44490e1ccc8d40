"""POST /api/dashboard/summary - goal dashboard totals"""

import time
from fastapi import APIRouter, Depends, Request

from finplan_gateway.api.dependencies import get_request_id, get_settings
from finplan_gateway.api.v1.errors import internal_error, invalid_input
from finplan_gateway.api.v1.schemas import (
    DashboardGoalStatus,
    DashboardSummaryRequest,
    DashboardSummaryResponse,
)
from finplan_gateway.config import Settings
from finplan_gateway.domain.dashboard import summarize_goals
from finplan_gateway.domain.exceptions import InvalidInputError
from finplan_gateway.domain.models import GoalSnapshot
from finplan_gateway.infrastructure.observability.logging import log_calculation
from finplan_gateway.infrastructure.observability.metrics import record_calculation
from finplan_gateway.utils.money import round_money

router = APIRouter()


@router.post("/dashboard/summary", response_model=DashboardSummaryResponse)
def dashboard_summary(
    request_body: DashboardSummaryRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """Total the monthly SIPs and target corpus of the caller's goals"""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        summary = summarize_goals(
            [
                GoalSnapshot(
                    name=goal.name,
                    goal_amount=goal.goal_amount,
                    duration_years=goal.duration_years,
                    current_savings=goal.current_savings,
                    expected_return_pct=goal.expected_return,
                    max_affordable_sip=goal.max_affordable_sip,
                )
                for goal in request_body.goals
            ],
            max_duration_years=app_settings.max_goal_duration_years,
        )
    except InvalidInputError as e:
        raise invalid_input("dashboard_summary", e, request_id)
    except Exception as e:
        raise internal_error("dashboard_summary", e, request_id)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation("dashboard_summary", "ok")
    log_calculation(
        request_id,
        "dashboard_summary",
        "ok",
        duration_ms,
        active_goals=summary.active_goals,
        needs_attention=len(summary.needs_attention),
    )

    return DashboardSummaryResponse(
        total_monthly_sip=round_money(summary.total_monthly_sip),
        active_goals=summary.active_goals,
        projected_corpus=round_money(summary.projected_corpus),
        needs_attention=summary.needs_attention,
        goals=[
            DashboardGoalStatus(
                name=goal.name,
                monthly_sip_required=round_money(goal.monthly_sip_required),
                on_track=goal.on_track,
                status=goal.status,
            )
            for goal in summary.goals
        ],
    )
