from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

RUPEE = "₹"


def to_decimal(value: float | int | Decimal) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_rupees(value: float | int | Decimal) -> int:
    return int(to_decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def group_indian(whole: int) -> str:
    """Group digits the Indian way: last three, then pairs (``1,23,45,678``)."""
    digits = str(abs(whole))
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs: list[str] = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join([*pairs, tail])


def format_inr(value: float | int | Decimal) -> str:
    rupees = round_rupees(value)
    sign = "-" if rupees < 0 else ""
    return f"{sign}{RUPEE}{group_indian(rupees)}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


__all__ = ["RUPEE", "format_inr", "format_percent", "group_indian", "round_rupees", "to_decimal"]
