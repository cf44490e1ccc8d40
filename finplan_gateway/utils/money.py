"""Money rounding and formatting utilities"""

from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP

PAISA = Decimal("0.01")


def to_decimal(amount: float) -> Decimal:
    """Convert a float amount to Decimal rounded half-up to paise"""
    return Decimal(str(amount)).quantize(PAISA, rounding=ROUND_HALF_UP)


def round_money(amount: float) -> float:
    """Round half-up to 2 decimal places"""
    return float(to_decimal(amount))


def floor_money(amount: Decimal) -> Decimal:
    """Truncate to paise"""
    return amount.quantize(PAISA, rounding=ROUND_DOWN)


def format_inr(amount: float) -> str:
    """Format as whole rupees with thousands separators, e.g. 200000 -> "₹2,00,000" """
    rupees = int(to_decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if rupees < 0 else ""
    digits = str(abs(rupees))

    # Indian grouping: last three digits, then pairs
    if len(digits) <= 3:
        grouped = digits
    else:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        grouped = ",".join(pairs + [tail])

    return f"{sign}₹{grouped}"
