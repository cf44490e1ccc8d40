"""Goal dashboard aggregation"""

from typing import List, Optional

from finplan_gateway.domain.exceptions import InvalidInputError
from finplan_gateway.domain.goals import MAX_GOAL_DURATION_YEARS, project_goal
from finplan_gateway.domain.models import DashboardSummary, GoalProjectionRequest, GoalSnapshot, GoalStatus


def summarize_goals(
    goals: List[GoalSnapshot],
    max_duration_years: Optional[float] = MAX_GOAL_DURATION_YEARS,
) -> DashboardSummary:
    """
    Project every goal and total the monthly SIPs and target corpus.

    A goal needs attention when its required SIP exceeds its own budget.
    """
    statuses = []
    for index, goal in enumerate(goals):
        try:
            projection = project_goal(
                GoalProjectionRequest(
                    goal_amount=goal.goal_amount,
                    duration_years=goal.duration_years,
                    current_savings=goal.current_savings,
                    expected_return_pct=goal.expected_return_pct,
                    max_affordable_sip=goal.max_affordable_sip,
                ),
                max_duration_years=max_duration_years,
            )
        except InvalidInputError as e:
            raise InvalidInputError(f"goals[{index}].{e.field}", e.message) from e
        statuses.append(GoalStatus(
            name=goal.name,
            monthly_sip_required=projection.monthly_sip_required,
            on_track=projection.on_track,
            status="On Track" if projection.on_track else "Needs Attention",
        ))

    return DashboardSummary(
        total_monthly_sip=sum((s.monthly_sip_required for s in statuses), 0.0),
        active_goals=len(statuses),
        projected_corpus=sum((goal.goal_amount for goal in goals), 0.0),
        needs_attention=[s.name for s in statuses if not s.on_track],
        goals=statuses,
    )
