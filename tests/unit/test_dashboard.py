"""Unit tests for goal dashboard aggregation"""

from dataclasses import replace

import pytest
from finplan_gateway.domain.dashboard import summarize_goals
from finplan_gateway.domain.exceptions import InvalidInputError
from finplan_gateway.domain.models import GoalSnapshot


def test_summarize_goals(dream_car_goal: GoalSnapshot, child_education_goal: GoalSnapshot):
    summary = summarize_goals([dream_car_goal, child_education_goal])

    assert summary.active_goals == 2
    assert summary.projected_corpus == 2300000
    assert summary.total_monthly_sip == pytest.approx(
        sum(goal.monthly_sip_required for goal in summary.goals)
    )
    assert summary.needs_attention == ["Dream Car"]
    assert [g.status for g in summary.goals] == ["Needs Attention", "On Track"]


def test_summarize_goals_without_budget_is_on_track(dream_car_goal: GoalSnapshot):
    summary = summarize_goals([replace(dream_car_goal, max_affordable_sip=None)])

    assert summary.needs_attention == []
    assert summary.goals[0].on_track is True


def test_summarize_goals_empty():
    summary = summarize_goals([])

    assert summary.active_goals == 0
    assert summary.total_monthly_sip == 0
    assert summary.projected_corpus == 0
    assert summary.goals == []


def test_summarize_goals_rejects_invalid_goal(dream_car_goal: GoalSnapshot):
    with pytest.raises(InvalidInputError) as exc_info:
        summarize_goals([replace(dream_car_goal, duration_years=0)])

    assert exc_info.value.field == "goals[0].duration_years"


def test_summarize_goals_names_position_of_invalid_goal(dream_car_goal: GoalSnapshot):
    with pytest.raises(InvalidInputError) as exc_info:
        summarize_goals([dream_car_goal, replace(dream_car_goal, current_savings=-1)])

    assert exc_info.value.field == "goals[1].current_savings"
