from __future__ import annotations

import math
import re

NUM_SUFFIXES = {
    "k": 1_000.0,
    "l": 100_000.0,
    "lac": 100_000.0,
    "lakh": 100_000.0,
    "lakhs": 100_000.0,
    "m": 1_000_000.0,
    "cr": 10_000_000.0,
    "crore": 10_000_000.0,
    "crores": 10_000_000.0,
}

_CURRENCY_PREFIX_RE = re.compile(r"^(?:₹|\$|rs\.?|inr)\s*")
_SUFFIX_RE = re.compile(r"^(.*?\d\.?)\s*([a-z]+)$")


class InvalidInput(ValueError):
    """Raised when an income figure cannot be turned into a finite number."""


def parse_income(text: str) -> float:
    cleaned = (text or "").strip().lower()
    if not cleaned:
        raise InvalidInput("Please enter your annual income.")
    cleaned = cleaned.replace("−", "-").replace("–", "-")
    negative = cleaned.startswith("-")
    if negative:
        cleaned = cleaned[1:].lstrip()
    cleaned = _CURRENCY_PREFIX_RE.sub("", cleaned)
    if cleaned.startswith(("-", "+")):
        raise InvalidInput(f"Could not understand income '{text.strip()}'.")
    multiplier = 1.0
    match = _SUFFIX_RE.match(cleaned)
    if match and match.group(2) in NUM_SUFFIXES:
        cleaned = match.group(1)
        multiplier = NUM_SUFFIXES[match.group(2)]
    cleaned = cleaned.replace(",", "").replace(" ", "").replace("_", "")
    if cleaned in {"", "-", "."}:
        raise InvalidInput("Please enter your annual income.")
    try:
        value = float(cleaned) * multiplier
    except ValueError as exc:
        raise InvalidInput(f"Could not understand income '{text.strip()}'.") from exc
    if not math.isfinite(value):
        raise InvalidInput("Income must be a finite amount.")
    return -value if negative else value


def parse_bool(text: str) -> bool:
    lowered = (text or "").strip().lower()
    if lowered in {"y", "yes", "true", "1", "on"}:
        return True
    if lowered in {"n", "no", "false", "0", "off", ""}:
        return False
    raise InvalidInput("Enter yes or no.")


__all__ = ["InvalidInput", "NUM_SUFFIXES", "parse_bool", "parse_income"]
