"""
Score rounding shared by scoring and response processing.
"""
from __future__ import annotations

import math
from fractions import Fraction
from typing import Union

_HALF = Fraction(1, 2)


def exact(value: Union[int, float, Fraction]) -> Fraction:
    """Decimal value of a configured weight (0.15 stays 15/100, not the nearest binary float)."""
    if isinstance(value, Fraction):
        return value
    return Fraction(str(value))


def round_half_up(value: Union[int, float, Fraction]) -> int:
    """Round .5 up for non-negative scores (Python's round() is banker's)."""
    return int(math.floor(exact(value) + _HALF))
