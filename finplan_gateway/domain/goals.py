"""Goal projection and SIP affordability adjustment - core business logic for goal planning"""

import logging
from typing import Optional

from finplan_gateway.domain.annuity import annuity_factor, future_value, growth_factor, monthly_rate
from finplan_gateway.domain.exceptions import InfeasibleGoalError, InvalidInputError
from finplan_gateway.domain.models import (
    AdjustmentRequest,
    AdjustmentResult,
    GoalProjectionRequest,
    GoalProjectionResult,
)
from finplan_gateway.domain.validation import (
    require_duration,
    require_non_negative,
    require_positive,
    require_return_pct,
)
from finplan_gateway.utils.money import format_inr

logger = logging.getLogger(__name__)

MAX_GOAL_DURATION_YEARS = 30.0
DURATION_SEARCH_MAX_YEARS = 50
STEP_UP_RATE_PCT = 10.0


def project_goal(
    request: GoalProjectionRequest,
    max_duration_years: Optional[float] = MAX_GOAL_DURATION_YEARS,
) -> GoalProjectionResult:
    """
    Calculate the monthly SIP needed to reach a goal amount.

    Solves
        goal = savings * (1+r)^n + sip * ((1+r)^n - 1) / r
    for sip, with r the monthly rate and n the number of months. At a 0%
    return the annuity factor is n, so sip = (goal - savings) / n.

    When the grown savings alone reach the goal the SIP is 0. on_track compares
    the SIP against max_affordable_sip when the caller supplies one.

    Raises:
        InvalidInputError: On any field outside its domain
    """
    require_positive("goal_amount", request.goal_amount)
    require_duration("duration_years", request.duration_years, max_duration_years)
    require_non_negative("current_savings", request.current_savings)
    require_return_pct("expected_return", request.expected_return_pct)
    if request.max_affordable_sip is not None:
        require_positive("max_affordable_sip", request.max_affordable_sip)

    rate = monthly_rate(request.expected_return_pct)
    months = request.duration_years * 12

    shortfall = request.goal_amount - request.current_savings * growth_factor(rate, months)
    monthly_sip = shortfall / annuity_factor(rate, months) if shortfall > 0 else 0.0

    total_investment = monthly_sip * months
    total_interest = request.goal_amount - request.current_savings - total_investment

    on_track = True
    if request.max_affordable_sip is not None:
        on_track = monthly_sip <= request.max_affordable_sip

    return GoalProjectionResult(
        monthly_sip_required=monthly_sip,
        total_investment=total_investment,
        total_interest_earned=total_interest,
        on_track=on_track,
    )


def find_minimum_duration(goal_amount: float, monthly_sip: float, rate: float, max_years: int) -> int:
    """
    Smallest whole number of years in [1, max_years] at which the SIP alone reaches the goal.

    Binary search over years: the corpus is strictly increasing in the number
    of months for any rate above -100%.

    Raises:
        InfeasibleGoalError: If even max_years falls short
    """
    if future_value(monthly_sip, rate, max_years * 12) < goal_amount:
        raise InfeasibleGoalError(
            f"A SIP of {format_inr(monthly_sip)}/month does not reach {format_inr(goal_amount)} "
            f"within {max_years} years"
        )

    low, high = 1, max_years
    while low < high:
        mid = (low + high) // 2
        if future_value(monthly_sip, rate, mid * 12) >= goal_amount:
            high = mid
        else:
            low = mid + 1
    return low


def required_down_payment(goal_amount: float, monthly_sip: float, rate: float, months: float) -> float:
    """Lump sum to invest now so that it plus the SIP reaches the goal (0 if the SIP suffices)"""
    shortfall = goal_amount - monthly_sip * annuity_factor(rate, months)
    if shortfall <= 0:
        return 0.0
    return shortfall / growth_factor(rate, months)


def step_up_starting_sip(goal_amount: float, rate: float, months: int, step_up_rate_pct: float) -> float:
    """
    First-year monthly SIP that reaches the goal when raised by step_up_rate_pct every 12 months.

    Month m (0-based) contributes sip * (1+s)^(m // 12), paid at month end and
    compounded for the remaining n - m - 1 months.
    """
    step = step_up_rate_pct / 100
    factor = sum(
        (1 + step) ** (m // 12) * growth_factor(rate, months - m - 1)
        for m in range(months)
    )
    return goal_amount / factor


def adjust_goal(
    request: AdjustmentRequest,
    max_duration_years: Optional[float] = MAX_GOAL_DURATION_YEARS,
    search_max_years: int = DURATION_SEARCH_MAX_YEARS,
    step_up_rate_pct: float = STEP_UP_RATE_PCT,
) -> AdjustmentResult:
    """
    Find plans that fit a goal into the user's monthly SIP budget.

    Strategies (all computed, returned together):
    1. Extend duration - fewest whole years at which the budget SIP reaches the goal
    2. Down payment now - lump sum that closes the gap over the original duration
    3. Reduce goal - corpus the budget SIP reaches over the original duration
    4. Step-up SIP - starting SIP that grows by step_up_rate_pct each year

    The new SIP is the budget itself.

    Raises:
        InvalidInputError: On any field outside its domain
        InfeasibleGoalError: If no duration within search_max_years reaches the goal
    """
    require_positive("max_affordable_sip", request.max_affordable_sip)
    if step_up_rate_pct < 0:
        raise InvalidInputError("step_up_rate", f"cannot be negative, got {step_up_rate_pct}")

    projection = project_goal(
        GoalProjectionRequest(
            goal_amount=request.goal_amount,
            duration_years=request.duration_years,
            current_savings=0.0,
            expected_return_pct=request.expected_return_pct,
            max_affordable_sip=request.max_affordable_sip,
        ),
        max_duration_years=max_duration_years,
    )

    rate = monthly_rate(request.expected_return_pct)
    months = request.duration_years * 12
    budget = request.max_affordable_sip

    if projection.on_track:
        suggested_years = request.duration_years
        down_payment = 0.0
    else:
        suggested_years = float(find_minimum_duration(request.goal_amount, budget, rate, search_max_years))
        down_payment = required_down_payment(request.goal_amount, budget, rate, months)

    achievable = future_value(budget, rate, months)
    step_up_sip = step_up_starting_sip(
        request.goal_amount, rate, max(int(round(months)), 1), step_up_rate_pct
    )

    text = _compose_suggestion(
        request, projection.on_track, suggested_years, down_payment, step_up_sip, step_up_rate_pct
    )
    logger.debug(
        "Goal adjustment computed",
        extra={
            "required_sip": projection.monthly_sip_required,
            "budget_sip": budget,
            "suggested_duration_years": suggested_years,
        },
    )

    return AdjustmentResult(
        suggestion_text=text,
        suggested_duration_years=suggested_years,
        suggested_down_payment=down_payment,
        new_sip=budget,
        achievable_goal_amount=achievable,
        step_up_rate_pct=step_up_rate_pct,
        step_up_starting_sip=step_up_sip,
    )


def _compose_suggestion(
    request: AdjustmentRequest,
    affordable: bool,
    suggested_years: float,
    down_payment: float,
    step_up_sip: float,
    step_up_rate_pct: float,
) -> str:
    budget = format_inr(request.max_affordable_sip)
    years = f"{request.duration_years:g}"

    if affordable:
        return (
            f"Your budget of {budget}/month already reaches {format_inr(request.goal_amount)} "
            f"in {years} years. No adjustment needed."
        )

    return (
        f"You may not meet your goal in {years} years with {budget}/month. "
        f"Consider increasing goal duration to {suggested_years:g} years, "
        f"or make a {format_inr(down_payment)} down payment now. "
        f"Alternatively, start a step-up SIP at {format_inr(step_up_sip)}/month "
        f"and raise it by {step_up_rate_pct:g}% every year."
    )
