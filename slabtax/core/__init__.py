from slabtax.core.calculator import (
    BracketContribution,
    CalculationResult,
    compute,
    effective_rate,
    taxable_income,
)
from slabtax.core.formatting import format_inr, format_percent
from slabtax.core.inputs import InvalidInput, parse_bool, parse_income

__all__ = [
    "BracketContribution",
    "CalculationResult",
    "InvalidInput",
    "compute",
    "effective_rate",
    "format_inr",
    "format_percent",
    "parse_bool",
    "parse_income",
    "taxable_income",
]
