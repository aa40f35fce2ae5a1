from dataclasses import FrozenInstanceError

import pytest

from slabtax.core.slabs import (
    EXEMPTION_CEILING,
    SLABS,
    STANDARD_DEDUCTION,
    slab_ceiling,
    slab_label,
    slab_summary,
)


def test_slab_table_matches_schedule():
    assert [(slab.floor, slab.rate) for slab in SLABS] == [
        (0.0, 0.0),
        (400_000.0, 0.05),
        (800_000.0, 0.10),
        (1_200_000.0, 0.15),
        (1_600_000.0, 0.20),
        (2_000_000.0, 0.25),
        (2_400_000.0, 0.30),
    ]
    assert STANDARD_DEDUCTION == 75_000.0
    assert EXEMPTION_CEILING == 1_200_000.0


def test_slab_ceiling_is_next_floor():
    assert slab_ceiling(SLABS[0]) == 400_000.0
    assert slab_ceiling(SLABS[-2]) == 2_400_000.0
    assert slab_ceiling(SLABS[-1]) is None


def test_slab_labels():
    assert [slab_label(slab) for slab in SLABS] == [
        "₹0 - ₹4,00,000 (0%)",
        "₹4,00,000 - ₹8,00,000 (5%)",
        "₹8,00,000 - ₹12,00,000 (10%)",
        "₹12,00,000 - ₹16,00,000 (15%)",
        "₹16,00,000 - ₹20,00,000 (20%)",
        "₹20,00,000 - ₹24,00,000 (25%)",
        "Above ₹24,00,000 (30%)",
    ]


def test_slab_summaries_for_info_panel():
    assert slab_summary(SLABS[0]) == "₹0 - ₹4,00,000: Nil"
    assert slab_summary(SLABS[1]) == "₹4,00,000 - ₹8,00,000: 5%"
    assert slab_summary(SLABS[-1]) == "Above ₹24,00,000: 30%"


def test_slabs_are_immutable():
    with pytest.raises(FrozenInstanceError):
        SLABS[0].rate = 0.2  # type: ignore[misc]
