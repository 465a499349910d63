"""Budget-specific calculations.

This module splits monthly income into savings and per-category spending
allowances.
"""

from .allocation import (
    DEFAULT_CATEGORY_WEIGHTS,
    DEFAULT_SAVING_RATE,
    BudgetAllocation,
    allocate_budget,
    normalize_weights,
)

__all__ = [
    'DEFAULT_CATEGORY_WEIGHTS',
    'DEFAULT_SAVING_RATE',
    'BudgetAllocation',
    'allocate_budget',
    'normalize_weights',
]
