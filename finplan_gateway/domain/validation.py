"""Input domain checks raising InvalidInputError with the offending field"""

import math
from typing import Optional

from finplan_gateway.domain.exceptions import InvalidInputError

# Largest amount that still quantizes to paise at default Decimal precision
MAX_AMOUNT = 1e15


def _require_finite(field: str, value: float) -> None:
    if value is None or not math.isfinite(value):
        raise InvalidInputError(field, "must be a finite number")


def _require_bounded(field: str, value: float) -> None:
    if value > MAX_AMOUNT:
        raise InvalidInputError(field, f"cannot exceed {MAX_AMOUNT:.0f}, got {value}")


def require_positive(field: str, value: float) -> None:
    _require_finite(field, value)
    if value <= 0:
        raise InvalidInputError(field, f"must be greater than 0, got {value}")
    _require_bounded(field, value)


def require_non_negative(field: str, value: float) -> None:
    _require_finite(field, value)
    if value < 0:
        raise InvalidInputError(field, f"cannot be negative, got {value}")
    _require_bounded(field, value)


def require_range(field: str, value: float, low: float, high: float) -> None:
    """Inclusive [low, high]"""
    _require_finite(field, value)
    if value < low or value > high:
        raise InvalidInputError(field, f"must be between {low} and {high}, got {value}")


def require_duration(field: str, value: float, max_years: Optional[float]) -> None:
    require_positive(field, value)
    if max_years is not None and value > max_years:
        raise InvalidInputError(field, f"cannot exceed {max_years} years, got {value}")


def require_return_pct(field: str, value: float) -> None:
    """Annual return must stay above -100% so the corpus cannot go negative"""
    _require_finite(field, value)
    if value <= -100:
        raise InvalidInputError(field, f"must be greater than -100, got {value}")
