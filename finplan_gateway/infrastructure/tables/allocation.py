"""Allocation policy table loaded from JSON and validated with Pydantic"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from finplan_gateway.domain.allocation import validate_policy
from finplan_gateway.domain.exceptions import AllocationTableError
from finplan_gateway.domain.models import (
    AllocationPolicy,
    CategorySpec,
    FundRecommendation,
    InvestmentType,
    RiskLevel,
)

DEFAULT_TABLE_PATH = Path(__file__).with_name("allocation_table.json")


class FundEntry(BaseModel):
    name: str = Field(..., min_length=1)
    ticker: str = Field(..., min_length=1)
    expense_ratio: float = Field(..., ge=0)
    description: str = ""


class CategoryEntry(BaseModel):
    name: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)
    funds: List[FundEntry] = []


class AllocationTableFile(BaseModel):
    """Shape of allocation_table.json"""

    categories: List[CategoryEntry] = Field(..., min_length=1)
    weights: Dict[RiskLevel, Dict[str, int]]
    risk_advice: Dict[RiskLevel, List[str]] = {}
    type_advice: Dict[InvestmentType, str] = {}

    def to_policy(self) -> AllocationPolicy:
        return AllocationPolicy(
            categories=tuple(
                CategorySpec(
                    name=category.name,
                    color=category.color,
                    funds=tuple(
                        FundRecommendation(
                            name=fund.name,
                            ticker=fund.ticker,
                            expense_ratio=fund.expense_ratio,
                            description=fund.description,
                        )
                        for fund in category.funds
                    ),
                )
                for category in self.categories
            ),
            weights={level: dict(weights) for level, weights in self.weights.items()},
            risk_advice={level: tuple(lines) for level, lines in self.risk_advice.items()},
            type_advice=dict(self.type_advice),
        )


def load_allocation_policy(path: Optional[str] = None) -> AllocationPolicy:
    """
    Read and validate an allocation table.

    Args:
        path: JSON file to load (default: table shipped with the package)

    Raises:
        AllocationTableError: If the file is missing, not JSON, or fails validation
    """
    table_path = Path(path) if path else DEFAULT_TABLE_PATH

    try:
        policy = AllocationTableFile.model_validate_json(table_path.read_text(encoding="utf-8")).to_policy()
    except OSError as e:
        raise AllocationTableError(f"Cannot read allocation table {table_path}: {e}") from e
    except ValidationError as e:
        raise AllocationTableError(f"Allocation table {table_path} is invalid: {e}") from e

    validate_policy(policy)
    logging.info("Allocation table loaded", extra={"path": str(table_path)})
    return policy
