"""Caller-owned estimator state.

Every transition returns a new :class:`EstimatorState`; nothing is kept at
module level. Editing the income or the salaried flag drops the previous
result so a stale figure is never shown against new inputs.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from slabtax.core.calculator import CalculationResult, compute
from slabtax.core.inputs import InvalidInput, parse_income


@dataclass(frozen=True)
class EstimatorState:
    income_text: str = ""
    is_salaried: bool = False
    result: CalculationResult | None = None
    show_info: bool = False


def with_income(state: EstimatorState, text: str) -> EstimatorState:
    return replace(state, income_text=text, result=None)


def with_salaried(state: EstimatorState, is_salaried: bool) -> EstimatorState:
    return replace(state, is_salaried=is_salaried, result=None)


def toggle_info(state: EstimatorState) -> EstimatorState:
    return replace(state, show_info=not state.show_info)


def gross_income(state: EstimatorState) -> float | None:
    try:
        return parse_income(state.income_text)
    except InvalidInput:
        return None


def calculate(state: EstimatorState) -> EstimatorState:
    amount = gross_income(state)
    if amount is None:
        return state
    return replace(state, result=compute(amount, state.is_salaried))


__all__ = [
    "EstimatorState",
    "calculate",
    "gross_income",
    "toggle_info",
    "with_income",
    "with_salaried",
]
