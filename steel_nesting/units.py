# steel_nesting/units.py
# Feet/inches helpers. Everything inside the engine is in inches;
# feet only appear at the edges (stock lengths, line lengths, cut list text).

from __future__ import annotations

import math
from typing import Tuple


def to_inches(length_ft: float = 0, length_in: float = 0) -> float:
    """12 * ft + in. No bounds checking; negative inputs pass through."""
    return length_ft * 12 + length_in


def round_up_to_increment(inches: float, increment: float = 0.125) -> float:
    """
    Round up to the next multiple of `increment` (default 1/8").
    increment must be > 0 (checked by NestingConfig.validate, not here).
    """
    return math.ceil(inches / increment) * increment


def to_feet_and_inches(total_inches: float) -> Tuple[int, float]:
    """
    182.5 -> (15, 2.5). Rounded to 2 decimals before splitting, so 119.999 -> (10, 0.0).
    """
    total = round(total_inches, 2)
    ft = math.floor(total / 12)
    return ft, round(total - ft * 12, 2)


def format_feet_inches(total_inches: float) -> str:
    """182.5 -> 15'-2.50\""""
    ft, inch = to_feet_and_inches(total_inches)
    return f"{ft}'-{inch:.2f}\""
