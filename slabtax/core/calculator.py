"""Slab-wise income tax computation.

``compute`` is pure: it maps a gross annual income and the salaried flag to
the total tax and the per-slab contributions, low slab first. Parsing and
rendering are left to callers.
"""
from __future__ import annotations

from dataclasses import dataclass

from slabtax.core.slabs import EXEMPTION_CEILING, SLABS, STANDARD_DEDUCTION, slab_label


@dataclass(frozen=True)
class BracketContribution:
    label: str
    amount: float


@dataclass(frozen=True)
class CalculationResult:
    total_tax: float
    breakdown: tuple[BracketContribution, ...]

    @property
    def exempt(self) -> bool:
        return not self.breakdown


def taxable_income(gross_income: float, is_salaried: bool) -> float:
    if is_salaried:
        return max(0.0, gross_income - STANDARD_DEDUCTION)
    return gross_income


def compute(gross_income: float, is_salaried: bool) -> CalculationResult:
    taxable = taxable_income(gross_income, is_salaried)
    if taxable <= EXEMPTION_CEILING:
        # No slab entries at all on the rebate path, not even the 0% one.
        return CalculationResult(total_tax=0.0, breakdown=())

    tax = 0.0
    remaining = taxable
    contributions: list[BracketContribution] = []
    lowest, *taxed = SLABS
    for slab in reversed(taxed):
        if remaining > slab.floor:
            in_slab = (remaining - slab.floor) * slab.rate
            contributions.append(BracketContribution(slab_label(slab), in_slab))
            tax += in_slab
            remaining = slab.floor
    contributions.append(BracketContribution(slab_label(lowest), 0.0))
    contributions.reverse()
    return CalculationResult(total_tax=tax, breakdown=tuple(contributions))


def effective_rate(total_tax: float, gross_income: float) -> float:
    if gross_income <= 0:
        return 0.0
    return total_tax / gross_income * 100


__all__ = [
    "BracketContribution",
    "CalculationResult",
    "compute",
    "effective_rate",
    "taxable_income",
]
