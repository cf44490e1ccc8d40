"""Compound-growth and annuity formulas shared by goal and loan calculations

All rates are monthly decimal rates (e.g. 11% p.a. -> 0.11 / 12) and all
periods are months.
"""


def monthly_rate(annual_pct: float) -> float:
    """Annual percentage -> monthly decimal rate"""
    return annual_pct / 12 / 100


def growth_factor(rate: float, months: float) -> float:
    """(1 + r)^n"""
    return (1 + rate) ** months


def annuity_factor(rate: float, months: float) -> float:
    """
    Future value of 1 paid at the end of each month for n months.

    ((1 + r)^n - 1) / r, degenerating to n when r == 0.
    """
    if rate == 0:
        return months
    return (growth_factor(rate, months) - 1) / rate


def future_value(monthly_contribution: float, rate: float, months: float, lump_sum: float = 0.0) -> float:
    """Corpus after n months from a starting lump sum plus a monthly SIP"""
    return lump_sum * growth_factor(rate, months) + monthly_contribution * annuity_factor(rate, months)


def emi(principal: float, rate: float, months: float) -> float:
    """
    Equated monthly installment for an amortizing loan.

    P * r * (1 + r)^n / ((1 + r)^n - 1), or P / n when r == 0.
    """
    if rate == 0:
        return principal / months
    growth = growth_factor(rate, months)
    return principal * rate * growth / (growth - 1)


def principal_for_emi(target_emi: float, rate: float, months: float) -> float:
    """Inverse of emi(): largest principal serviceable by target_emi"""
    if rate == 0:
        return target_emi * months
    growth = growth_factor(rate, months)
    return target_emi * (growth - 1) / (rate * growth)
