"""Common utilities shared across all calculators.

This module provides the numeric clamping helpers that turn user-entered
values into the domain each calculation accepts.
"""

from .clamping import clamp_unit, finite, non_negative, positive_int

__all__ = [
    'clamp_unit',
    'finite',
    'non_negative',
    'positive_int',
]
