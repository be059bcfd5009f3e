"""
Stat Constraints
================
Pure functions used by the Stat mod pipeline.
Each helper takes plain numbers and returns a plain answer.
No exceptions raised - bad input falls back to a sensible default.
"""

import math
from typing import Any, Optional


# =============================================================================
# COERCION
# =============================================================================


def is_number(value: Any) -> bool:
    """True for real ints/floats. Booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_number(value: Any, default: Optional[float]) -> Optional[float]:
    """
    Read a raw option as a float.

    Accepts ints, floats and numeric strings ("12", "-inf").
    Returns `default` for None, bools, NaN and anything unparseable.
    """
    if value is None or isinstance(value, bool):
        return default

    if is_number(value):
        val = float(value)
    elif isinstance(value, str):
        try:
            val = float(value.strip())
        except ValueError:
            return default
    else:
        return default

    if math.isnan(val):
        return default

    return val


def coerce_increment(value: Any) -> Optional[float]:
    """
    Read the increment unit. A negative unit counts as its magnitude, since
    multiples of -5 are multiples of 5. Zero, infinity and junk disable it.
    """
    val = coerce_number(value, None)
    if val is None or val == 0 or math.isinf(val):
        return None
    return abs(val)


# =============================================================================
# BOUNDS
# =============================================================================


def check_min_max(value: float, minimum: float, maximum: float) -> bool:
    """True if value sits inside [minimum, maximum] (inclusive). NaN never does."""
    return minimum <= value <= maximum


def clamp_min_max(value: float, minimum: float, maximum: float) -> float:
    """Pull value back to whichever bound it crossed."""
    if value > maximum:
        return maximum
    if value < minimum:
        return minimum
    return value


# =============================================================================
# INCREMENTS
# =============================================================================


def check_increment(value: float, increment: float) -> bool:
    """Exact remainder test: value must be a whole multiple of increment."""
    return value % increment == 0


def round_to_increment(value: float, increment: float) -> float:
    """
    Round value to the nearest multiple of increment.

    A remainder of exactly half an increment rounds up, toward the larger
    multiple. Python's floored modulo keeps the remainder non-negative, so
    negative values round to their true nearest multiple as well:

        round_to_increment(7.5, 5)  -> 10.0
        round_to_increment(7, 5)    -> 5.0
        round_to_increment(-2.5, 1) -> -2.0
    """
    remainder = value % increment
    if remainder / increment < 0.5:
        return value - remainder
    return value - remainder + increment
