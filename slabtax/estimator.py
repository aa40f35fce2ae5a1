from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from slabtax.core.calculator import CalculationResult, compute, effective_rate, taxable_income
from slabtax.core.formatting import format_inr, format_percent
from slabtax.core.slabs import (
    EXEMPTION_CEILING,
    SCHEDULE_LABEL,
    SLABS,
    STANDARD_DEDUCTION,
    slab_label,
    slab_summary,
)

logger = logging.getLogger("slabtax.estimator")


class EstimateRequest(BaseModel):
    income: float = Field(
        ...,
        description="Gross annual income in rupees",
        validation_alias=AliasChoices("income", "annual_income", "gross_income"),
    )
    salaried: bool = Field(
        False,
        description="Apply the standard deduction for salaried filers",
        validation_alias=AliasChoices("salaried", "is_salaried"),
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @field_validator("income")
    @classmethod
    def _require_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("income must be a finite amount")
        return value


def summarize_result(result: CalculationResult, income: float, salaried: bool) -> dict[str, Any]:
    taxable = taxable_income(income, salaried)
    deduction = STANDARD_DEDUCTION if salaried else 0.0
    rate = effective_rate(result.total_tax, income)
    logger.debug(
        "Estimated tax income=%s salaried=%s taxable=%s total=%s", income, salaried, taxable, result.total_tax
    )
    return {
        "income": income,
        "salaried": salaried,
        "standard_deduction": deduction,
        "taxable_income": taxable,
        "total_tax": result.total_tax,
        "effective_rate": round(rate, 2),
        "exempt": result.exempt,
        "breakdown": [
            {
                "label": item.label,
                "amount": item.amount,
                "amount_display": format_inr(item.amount),
            }
            for item in result.breakdown
        ],
        "display": {
            "income": format_inr(income),
            "standard_deduction": format_inr(deduction),
            "taxable_income": format_inr(max(0.0, taxable)),
            "total_tax": format_inr(result.total_tax),
            "effective_rate": format_percent(rate),
        },
    }


def compute_estimate_summary(income: float, salaried: bool) -> dict[str, Any]:
    return summarize_result(compute(income, salaried), income, salaried)


def estimate(payload: EstimateRequest) -> dict[str, Any]:
    return compute_estimate_summary(payload.income, payload.salaried)


def slab_schedule() -> dict[str, Any]:
    return {
        "schedule": SCHEDULE_LABEL,
        "standard_deduction": STANDARD_DEDUCTION,
        "exemption_ceiling": EXEMPTION_CEILING,
        "slabs": [
            {
                "floor": slab.floor,
                "rate": slab.rate,
                "label": slab_label(slab),
                "summary": slab_summary(slab),
            }
            for slab in SLABS
        ],
    }


__all__ = [
    "EstimateRequest",
    "compute_estimate_summary",
    "estimate",
    "slab_schedule",
    "summarize_result",
]
