"""Investment allocation planner - risk-based asset split and financial hygiene checks"""

from decimal import Decimal
from typing import List

from finplan_gateway.domain.exceptions import AllocationTableError
from finplan_gateway.domain.models import (
    AllocationPolicy,
    AllocationRequest,
    AllocationResult,
    CategoryAllocation,
    HygieneWarning,
    RiskLevel,
    Severity,
)
from finplan_gateway.domain.validation import require_positive
from finplan_gateway.utils.money import PAISA, floor_money, to_decimal


def validate_policy(policy: AllocationPolicy) -> None:
    """
    Check that every risk level is fully specified and sums to 100%.

    Raises:
        AllocationTableError: On a missing risk level, unknown category,
            negative weight or a total other than 100
    """
    known = {category.name for category in policy.categories}
    for level in RiskLevel:
        weights = policy.weights.get(level)
        if weights is None:
            raise AllocationTableError(f"No allocation weights for risk level {level.value}")

        unknown = set(weights) - known
        if unknown:
            raise AllocationTableError(f"Unknown categories for {level.value}: {sorted(unknown)}")
        if any(pct < 0 or pct > 100 for pct in weights.values()):
            raise AllocationTableError(f"Weights for {level.value} must be between 0 and 100")

        total = sum(weights.values())
        if total != 100:
            raise AllocationTableError(f"Weights for {level.value} sum to {total}, expected 100")


def split_amount(total: Decimal, percentages: List[int]) -> List[Decimal]:
    """
    Split total by percentages, rounding each share down to paise.

    The largest share absorbs the remainder so the parts add up to total exactly.
    """
    amounts = [floor_money(total * pct / 100) for pct in percentages]
    remainder = total - sum(amounts, Decimal("0"))
    if remainder and amounts:
        largest = max(range(len(percentages)), key=lambda i: percentages[i])
        amounts[largest] += remainder
    return [amount.quantize(PAISA) for amount in amounts]


def check_financial_hygiene(request: AllocationRequest) -> List[HygieneWarning]:
    """One independent entry each for emergency fund, health and term insurance"""
    warnings = []

    if request.has_emergency_fund:
        warnings.append(HygieneWarning(
            severity=Severity.SUCCESS,
            title="Emergency Fund Ready",
            description="Great job having an emergency fund in place!",
        ))
    else:
        warnings.append(HygieneWarning(
            severity=Severity.ERROR,
            title="Emergency Fund Missing",
            description="We recommend building an emergency fund of 3-6 months of expenses before investing.",
        ))

    if request.has_health_insurance:
        warnings.append(HygieneWarning(
            severity=Severity.SUCCESS,
            title="Health Insurance Ready",
            description="You're protected with health insurance. Good planning!",
        ))
    else:
        warnings.append(HygieneWarning(
            severity=Severity.WARNING,
            title="Health Insurance Missing",
            description="Consider getting health insurance before investing to protect against medical emergencies.",
        ))

    if request.has_term_insurance:
        warnings.append(HygieneWarning(
            severity=Severity.SUCCESS,
            title="Term Insurance Ready",
            description="Your dependents are protected with term insurance. Well done!",
        ))
    else:
        warnings.append(HygieneWarning(
            severity=Severity.WARNING,
            title="Term Insurance Missing",
            description="If you have dependents, consider getting term insurance for financial protection.",
        ))

    return warnings


def plan_allocation(request: AllocationRequest, policy: AllocationPolicy) -> AllocationResult:
    """
    Main entry point: split an investment across asset categories by risk level.

    Categories keep the table's order; zero-weight categories are left out.
    Advice is the risk-level text, the investment-type text, and a line per
    hygiene gap.

    Raises:
        InvalidInputError: If the investment amount is not positive
        AllocationTableError: If the policy table is malformed
    """
    require_positive("investmentAmount", request.investment_amount)
    validate_policy(policy)

    weights = policy.weights[request.risk_level]
    selected = [category for category in policy.categories if weights.get(category.name, 0) > 0]
    percentages = [weights[category.name] for category in selected]
    amounts = split_amount(to_decimal(request.investment_amount), percentages)

    categories = [
        CategoryAllocation(
            name=category.name,
            key=category.key,
            percentage=pct,
            amount=amount,
            color=category.color,
            funds=category.funds,
        )
        for category, pct, amount in zip(selected, percentages, amounts)
    ]

    hygiene = check_financial_hygiene(request)

    advice = list(policy.risk_advice.get(request.risk_level, ()))
    type_line = policy.type_advice.get(request.investment_type)
    if type_line:
        advice.append(type_line)
    advice.extend(
        f"{warning.title}: {warning.description}"
        for warning in hygiene
        if warning.severity != Severity.SUCCESS
    )

    return AllocationResult(categories=categories, advice=advice, hygiene_warnings=hygiene)
