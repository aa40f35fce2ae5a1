import pytest

from slabtax.core.inputs import InvalidInput, parse_bool, parse_income


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1500000", 1_500_000.0),
        ("  15,00,000 ", 1_500_000.0),
        ("₹15,00,000", 1_500_000.0),
        ("Rs. 12,00,000", 1_200_000.0),
        ("INR 900000", 900_000.0),
        ("15L", 1_500_000.0),
        ("12.5 lakh", 1_250_000.0),
        ("1.5cr", 15_000_000.0),
        ("750k", 750_000.0),
        ("2m", 2_000_000.0),
        ("1_000_000", 1_000_000.0),
        ("1e6", 1_000_000.0),
        ("−50000", -50_000.0),
        ("0", 0.0),
    ],
)
def test_parse_income_accepts_common_forms(text, expected):
    assert parse_income(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", "-", ".", "abc", "12x", "1,2,3abc"])
def test_parse_income_rejects_garbage(text):
    with pytest.raises(InvalidInput):
        parse_income(text)


@pytest.mark.parametrize("text", ["nan", "NaN", "inf", "-inf", "infinity"])
def test_parse_income_rejects_non_finite(text):
    with pytest.raises(InvalidInput, match="finite"):
        parse_income(text)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        parse_income("twelve lakh")


@pytest.mark.parametrize("text, expected", [("yes", True), ("on", True), ("1", True), ("no", False), ("", False)])
def test_parse_bool(text, expected):
    assert parse_bool(text) is expected


def test_parse_bool_rejects_unknown():
    with pytest.raises(InvalidInput):
        parse_bool("maybe")


@pytest.mark.parametrize("text", ["--5", "-₹-5", "- -5", "-+5", "+-5"])
def test_parse_income_rejects_doubled_sign(text):
    with pytest.raises(InvalidInput, match="Could not understand income"):
        parse_income(text)
