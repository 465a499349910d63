"""Compound growth of savings and progress towards savings goals."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..common import non_negative, positive_int


@dataclass(frozen=True)
class GoalProgress:
    """Progress towards a savings target."""

    progress: float
    remaining: float
    completed: bool


def _growth_factor(rate: float, periods: float) -> float:
    """Return ``(1 + rate) ** periods``, or infinity once it overflows."""
    if rate == 0:
        return 1.0
    try:
        return math.exp(periods * math.log1p(rate))
    except OverflowError:
        return math.inf


def _annuity_factor(rate: float, periods: float) -> float:
    """Return ``((1 + rate) ** periods - 1) / rate`` for a positive rate."""
    try:
        return math.expm1(periods * math.log1p(rate)) / rate
    except OverflowError:
        return math.inf


def compound_growth(
    principal: float,
    annual_rate: float,
    periods_per_year: float,
    years: float,
    monthly_contribution: float = 0,
) -> float:
    """Calculate the future value of savings with regular contributions.
    
    The principal compounds ``periods_per_year`` times a year. Contributions
    are always treated as an ordinary annuity compounding monthly, whatever
    ``periods_per_year`` is, and only whole months are counted.
    
    Args:
        principal: Starting amount, clamped to >= 0
        annual_rate: Nominal annual rate as a decimal (0.08 = 8%), clamped to >= 0
        periods_per_year: Compounding periods per year, floored and clamped to >= 1
        years: Investment horizon in years, clamped to >= 0
        monthly_contribution: Amount added at the end of each month, clamped to >= 0
        
    Returns:
        Future value of the principal plus the contributions; infinity when
        the horizon is too long for a float
        
    Example:
        >>> compound_growth(1000, 0, 12, 1, 100)
        2200.0
    """
    p = non_negative(principal)
    r = non_negative(annual_rate)
    n = positive_int(periods_per_year)
    t = non_negative(years)
    m = non_negative(monthly_contribution)

    base = p * _growth_factor(r / n, n * t) if p else 0.0

    monthly_rate = r / 12
    months = t * 12
    months = positive_int(months, minimum=0) if math.isfinite(months) else math.inf
    if not m:
        contribution_value = 0.0
    elif monthly_rate == 0:
        contribution_value = months * m
    else:
        contribution_value = m * _annuity_factor(monthly_rate, months)

    return base + contribution_value


def goal_progress(saved_amount: float, target_amount: float) -> GoalProgress:
    """Measure how far savings have come towards a target.
    
    Args:
        saved_amount: Amount saved so far, clamped to >= 0
        target_amount: Goal amount, clamped to >= 0
        
    Returns:
        GoalProgress with ``progress`` in [0, 1] (0 when the target is 0),
        the non-negative amount still ``remaining``, and whether the goal is
        ``completed``
        
    Example:
        >>> goal_progress(50, 200)
        GoalProgress(progress=0.25, remaining=150.0, completed=False)
    """
    saved = non_negative(saved_amount)
    target = non_negative(target_amount)
    if target == 0:
        return GoalProgress(progress=0.0, remaining=0.0, completed=False)

    progress = min(saved / target, 1.0)
    return GoalProgress(
        progress=progress,
        remaining=max(target - saved, 0.0),
        completed=saved >= target,
    )
