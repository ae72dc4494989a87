"""Input sanitization for captain signals.

Every signal has a valid range and a default. A value that is missing,
not a real number, not finite, or out of range is replaced by its default.
Nothing here raises.

Key Functions:
    sanitize_value - Scalar version (used per record)
    sanitize_array - Vectorized version (used by the fast path and DataFrames)

Usage:
    from captaincy.data.validation import sanitize_value
    from captaincy.config import FORM_RANGE

    form = sanitize_value(raw_form, FORM_RANGE, default=5.0)
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Tuple

import numpy as np


def sanitize_value(
    value: Any,
    bounds: Tuple[float, float],
    default: float,
    integral: bool = False,
) -> float:
    """Coerce a raw signal to a float inside bounds, or return default.

    Args:
        value: Raw input (any type)
        bounds: Inclusive (low, high) range
        default: Replacement for invalid input
        integral: Also require a whole number (fixture difficulty)

    Returns:
        Sanitized float
    """
    # bool is an int subclass but never a valid signal
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return float(default)

    number = float(value)
    low, high = bounds
    if not math.isfinite(number) or number < low or number > high:
        return float(default)
    if integral and not number.is_integer():
        return float(default)
    return number


def sanitize_array(
    values: Any,
    bounds: Tuple[float, float],
    default: float,
    integral: bool = False,
) -> np.ndarray:
    """Vectorized sanitize_value for numeric arrays.

    Callers must pass int or float data; object/bool data goes through
    sanitize_value element-wise instead.
    """
    arr = np.asarray(values, dtype=float)
    low, high = bounds
    with np.errstate(invalid="ignore"):
        valid = np.isfinite(arr) & (arr >= low) & (arr <= high)
        if integral:
            valid &= np.floor(arr) == arr
    return np.where(valid, arr, float(default))


def is_numeric_dtype(arr: np.ndarray) -> bool:
    """True for int/uint/float arrays (bool and object excluded)."""
    return arr.dtype.kind in "iuf"
