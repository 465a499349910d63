"""Numeric clamping helpers for calculator inputs.

Calculators never reject a number. Out-of-range values are pulled to the
nearest valid bound, and anything that is not a finite number counts as zero.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


def finite(value: Any) -> float:
    """Convert a value to a finite float, treating everything else as 0.0.
    
    Args:
        value: Number-like input (``None``, NaN and infinities become 0.0)
        
    Returns:
        The value as a float, or 0.0 if it is missing or not finite
        
    Example:
        >>> finite(12)
        12.0
        >>> finite(float('nan'))
        0.0
    """
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Treating non-numeric value %r as 0", value)
        return 0.0
    if not np.isfinite(number):
        logger.debug("Treating non-finite value %r as 0", value)
        return 0.0
    return number


def non_negative(value: Any) -> float:
    """Clamp a value to ``>= 0``.
    
    Example:
        >>> non_negative(-5)
        0.0
    """
    return max(0.0, finite(value))


def clamp_unit(value: Any) -> float:
    """Clip a value into the closed interval ``[0, 1]``.
    
    Example:
        >>> clamp_unit(1.5)
        1.0
    """
    return min(max(finite(value), 0.0), 1.0)


def positive_int(value: Any, minimum: int = 1) -> int:
    """Floor a value to an integer no smaller than ``minimum``.
    
    Args:
        value: Number-like input
        minimum: Lowest integer returned (1 for period counts, 0 for day counts)
        
    Returns:
        ``max(minimum, floor(value))``
        
    Example:
        >>> positive_int(11.9)
        11
        >>> positive_int(-3, minimum=0)
        0
    """
    return max(minimum, int(np.floor(finite(value))))
