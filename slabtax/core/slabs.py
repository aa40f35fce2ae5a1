from __future__ import annotations

from dataclasses import dataclass

from slabtax.core.formatting import format_inr

SCHEDULE_LABEL = "FY 2025-26"

STANDARD_DEDUCTION = 75_000.0
EXEMPTION_CEILING = 1_200_000.0


@dataclass(frozen=True)
class Slab:
    floor: float
    rate: float


# New regime slabs, ascending by floor
SLABS: tuple[Slab, ...] = (
    Slab(0.0, 0.00),
    Slab(400_000.0, 0.05),
    Slab(800_000.0, 0.10),
    Slab(1_200_000.0, 0.15),
    Slab(1_600_000.0, 0.20),
    Slab(2_000_000.0, 0.25),
    Slab(2_400_000.0, 0.30),
)


def _percent(rate: float) -> str:
    return f"{round(rate * 100):d}%"


def slab_ceiling(slab: Slab) -> float | None:
    index = SLABS.index(slab)
    if index + 1 < len(SLABS):
        return SLABS[index + 1].floor
    return None


def slab_label(slab: Slab) -> str:
    ceiling = slab_ceiling(slab)
    if ceiling is None:
        return f"Above {format_inr(slab.floor)} ({_percent(slab.rate)})"
    return f"{format_inr(slab.floor)} - {format_inr(ceiling)} ({_percent(slab.rate)})"


def slab_summary(slab: Slab) -> str:
    """Info-panel wording, e.g. ``₹4,00,000 - ₹8,00,000: 5%``."""
    ceiling = slab_ceiling(slab)
    rate = "Nil" if slab.rate == 0 else _percent(slab.rate)
    if ceiling is None:
        return f"Above {format_inr(slab.floor)}: {rate}"
    return f"{format_inr(slab.floor)} - {format_inr(ceiling)}: {rate}"


__all__ = [
    "EXEMPTION_CEILING",
    "SCHEDULE_LABEL",
    "SLABS",
    "STANDARD_DEDUCTION",
    "Slab",
    "slab_ceiling",
    "slab_label",
    "slab_summary",
]
