"""Domain models - pure Python dataclasses representing planning requests and results"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Tuple


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class InvestmentType(str, Enum):
    SIP = "SIP"
    LUMP_SUM = "LumpSum"


class LoanStatus(str, Enum):
    ELIGIBLE = "Eligible"
    NOT_ELIGIBLE = "Not Eligible"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"


@dataclass(frozen=True)
class GoalProjectionRequest:
    """Target corpus to reach over a horizon"""

    goal_amount: float
    duration_years: float
    current_savings: float
    expected_return_pct: float
    max_affordable_sip: Optional[float] = None  # budget used for on_track


@dataclass(frozen=True)
class GoalProjectionResult:
    """Monthly SIP needed to reach a goal"""

    monthly_sip_required: float
    total_investment: float
    total_interest_earned: float
    on_track: bool


@dataclass(frozen=True)
class AdjustmentRequest:
    """Goal that does not fit the monthly budget"""

    goal_amount: float
    duration_years: float
    expected_return_pct: float
    max_affordable_sip: float


@dataclass(frozen=True)
class AdjustmentResult:
    """Alternative plans that fit the monthly budget"""

    suggestion_text: str
    suggested_duration_years: float
    suggested_down_payment: float
    new_sip: float
    achievable_goal_amount: float
    step_up_rate_pct: float
    step_up_starting_sip: float


@dataclass(frozen=True)
class LoanAdviceRequest:
    """Home loan application details"""

    monthly_income: float
    existing_emis: float
    age: int
    desired_loan_amount: float
    interest_rate_pct: float
    tenure_years: float


@dataclass(frozen=True)
class LoanAdviceResult:
    """EMI affordability verdict"""

    status: LoanStatus
    monthly_emi: float
    total_monthly_emi_with_existing: float
    max_safe_emi: float
    suggestions: List[str]


@dataclass(frozen=True)
class FundRecommendation:
    name: str
    ticker: str
    expense_ratio: float
    description: str


@dataclass(frozen=True)
class CategorySpec:
    """Asset category as configured in the allocation table"""

    name: str
    color: str
    funds: Tuple[FundRecommendation, ...] = ()

    @property
    def key(self) -> str:
        """Lower snake-case key, e.g. "Index Funds" -> "index_funds" """
        return "".join(c for c in self.name.lower().replace(" ", "_") if c.isalnum() or c == "_")


@dataclass(frozen=True)
class AllocationPolicy:
    """Risk-level weights, fund lists and advice text for the allocation planner"""

    categories: Tuple[CategorySpec, ...]
    weights: Dict[RiskLevel, Dict[str, int]]
    risk_advice: Dict[RiskLevel, Tuple[str, ...]] = field(default_factory=dict)
    type_advice: Dict[InvestmentType, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AllocationRequest:
    investment_amount: float
    investment_type: InvestmentType
    risk_level: RiskLevel
    has_health_insurance: bool
    has_term_insurance: bool
    has_emergency_fund: bool


@dataclass(frozen=True)
class CategoryAllocation:
    """Share of the investment assigned to one asset category"""

    name: str
    key: str
    percentage: int
    amount: Decimal
    color: str
    funds: Tuple[FundRecommendation, ...]


@dataclass(frozen=True)
class HygieneWarning:
    severity: Severity
    title: str
    description: str


@dataclass(frozen=True)
class AllocationResult:
    categories: List[CategoryAllocation]
    advice: List[str]
    hygiene_warnings: List[HygieneWarning]


@dataclass(frozen=True)
class GoalSnapshot:
    """One goal on the dashboard, as supplied by the caller"""

    name: str
    goal_amount: float
    duration_years: float
    current_savings: float
    expected_return_pct: float
    max_affordable_sip: Optional[float] = None


@dataclass(frozen=True)
class GoalStatus:
    name: str
    monthly_sip_required: float
    on_track: bool
    status: str  # "On Track" or "Needs Attention"


@dataclass(frozen=True)
class DashboardSummary:
    total_monthly_sip: float
    active_goals: int
    projected_corpus: float
    needs_attention: List[str]
    goals: List[GoalStatus]
