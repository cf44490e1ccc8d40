"""Prometheus metrics for monitoring calculation volume, loan eligibility and allocation mix"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "finplan_calculation_total",
    "Total planning calculations served",
    ["operation", "outcome"],  # outcome: ok | invalid_input | infeasible | error
)

loan_decision_counter = Counter(
    "finplan_loan_decision_total",
    "Home loan eligibility verdicts",
    ["status"],  # Eligible | Not Eligible
)

allocation_plan_counter = Counter(
    "finplan_allocation_plan_total",
    "Investment plans generated by risk level",
    ["risk_level"],
)

adjustment_extension_histogram = Histogram(
    "finplan_adjustment_extension_years",
    "Years added to a goal to fit the SIP budget",
    buckets=[0, 1, 2, 3, 5, 8, 13, 21, 34, 50],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(operation: str, outcome: str) -> None:
    calculation_counter.labels(operation=operation, outcome=outcome).inc()


def record_loan_decision(status: str) -> None:
    loan_decision_counter.labels(status=status).inc()


def record_allocation_plan(risk_level: str) -> None:
    allocation_plan_counter.labels(risk_level=risk_level).inc()


def record_adjustment(original_years: float, suggested_years: float) -> None:
    """Record how far the duration had to be stretched (0 when the budget already fits)"""
    adjustment_extension_histogram.observe(max(suggested_years - original_years, 0))
