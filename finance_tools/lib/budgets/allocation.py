"""Monthly budget allocation.

Income is divided into a saving portion and a spendable remainder, and the
remainder is shared out across spending categories in proportion to their
weights.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..common import clamp_unit, non_negative

logger = logging.getLogger(__name__)

DEFAULT_SAVING_RATE = 0.2

# Read-only; pass an explicit mapping to allocate_budget to override.
DEFAULT_CATEGORY_WEIGHTS: Mapping[str, float] = MappingProxyType({
    'Food & Dining': 0.25,
    'Transportation': 0.1,
    'Housing': 0.25,
    'Utilities': 0.1,
    'Shopping': 0.1,
    'Entertainment': 0.1,
    'Other': 0.1,
})


@dataclass(frozen=True)
class BudgetAllocation:
    """Result of splitting income into saving and categorized spending."""

    saving: float
    spending: float
    by_category: Mapping[str, float] = field(default_factory=dict)


def normalize_weights(weights: Mapping[str, float]) -> Dict[str, float]:
    """Scale category weights so they sum to 1.
    
    Negative or non-numeric weights count as 0. When every weight is 0 the
    total is treated as 1, so each category keeps a weight of 0.
    
    Args:
        weights: Mapping of category names to relative weights
        
    Returns:
        Dictionary with the same keys and normalized weights
        
    Example:
        >>> normalize_weights({'Rent': 3, 'Food': 1})
        {'Rent': 0.75, 'Food': 0.25}
    """
    cleaned = {category: non_negative(weight) for category, weight in weights.items()}
    total = sum(cleaned.values())
    if total == 0:
        if cleaned:
            logger.debug("Category weights sum to zero; every category gets 0")
        total = 1.0
    return {category: weight / total for category, weight in cleaned.items()}


def allocate_budget(
    income: float,
    saving_rate: float = DEFAULT_SAVING_RATE,
    category_weights: Optional[Mapping[str, float]] = None,
) -> BudgetAllocation:
    """Allocate monthly income to savings and spending categories.
    
    Args:
        income: Monthly income; negative values are treated as 0
        saving_rate: Share of income to save, clipped to [0, 1]
        category_weights: Relative spending weights per category. Defaults to
            ``DEFAULT_CATEGORY_WEIGHTS``
        
    Returns:
        BudgetAllocation whose ``saving`` and ``spending`` add up to the
        clamped income, and whose ``by_category`` values add up to ``spending``
        
    Example:
        >>> result = allocate_budget(10_000_000, 0.2, {'A': 0.5, 'B': 0.5})
        >>> result.saving, result.spending
        (2000000.0, 8000000.0)
        >>> dict(result.by_category)
        {'A': 4000000.0, 'B': 4000000.0}
    """
    inc = non_negative(income)
    rate = clamp_unit(saving_rate)
    remaining = inc * (1 - rate)

    weights = DEFAULT_CATEGORY_WEIGHTS if category_weights is None else category_weights
    shares = normalize_weights(weights)
    budget = {category: remaining * share for category, share in shares.items()}

    return BudgetAllocation(
        saving=inc * rate,
        spending=remaining,
        by_category=MappingProxyType(budget),
    )
