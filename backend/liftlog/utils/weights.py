"""
Weight conversion between pounds and kilograms.

Weights are stored in pounds; conversion happens only for display.
"""
from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Any

class WeightUnit(str, Enum):
    lbs = "lbs"
    kg = "kg"

CANONICAL_UNIT = WeightUnit.lbs

# Two independently rounded constants, not exact reciprocals
LBS_TO_KG = 0.453592
KG_TO_LBS = 2.20462

def is_valid_weight_unit(value: Any) -> bool:
    """Strict membership check for values read from cookies or user input."""
    if isinstance(value, WeightUnit):
        return True
    return isinstance(value, str) and value in {u.value for u in WeightUnit}

def _to_number(weight: Any) -> float | None:
    if isinstance(weight, bool):
        return None
    if isinstance(weight, (int, float, Decimal)):
        num = float(weight)
    elif isinstance(weight, str):
        try:
            num = float(weight.strip())
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(num) else num

def convert_weight(weight: int | float | Decimal | str, from_unit: WeightUnit | str, to_unit: WeightUnit | str) -> float | Decimal:
    """
    Convert a weight between units.

    Accepts numbers, Decimals (as the store returns NUMERIC columns) or numeric
    strings. Anything that does not parse converts to 0 instead of raising.
    Same-unit conversion hands numbers back untouched, so a Decimal stays exact.
    """
    num = _to_number(weight)
    if num is None:
        return 0

    src, dst = WeightUnit(from_unit), WeightUnit(to_unit)
    if src == dst:
        return num if isinstance(weight, str) else weight
    if src == WeightUnit.lbs:
        return num * LBS_TO_KG
    return num * KG_TO_LBS

def format_weight_value(weight: float | Decimal) -> str:
    return f"{float(weight):.1f}"

def format_weight(weight: float | Decimal, unit: WeightUnit | str) -> str:
    """'185.5 lbs' style label, always one decimal."""
    return f"{format_weight_value(weight)} {WeightUnit(unit).value}"
