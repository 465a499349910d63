"""End-of-month balance projection."""

from __future__ import annotations

from datetime import date
from typing import Optional

import pandas as pd

from ..common import finite, non_negative, positive_int


def project_balance(
    current_balance: float,
    daily_average_spend: float,
    days_remaining: float,
    projected_income: float = 0,
) -> float:
    """Project the balance left at the end of the period.
    
    The result is not clamped: a negative value is a projected deficit.
    
    Args:
        current_balance: Balance today; may be negative (existing debt)
        daily_average_spend: Expected spending per day, clamped to >= 0
        days_remaining: Days left in the period, floored and clamped to >= 0
        projected_income: Income still expected this period, clamped to >= 0
        
    Returns:
        ``current_balance + projected_income - daily_average_spend * days_remaining``
        
    Example:
        >>> project_balance(5_000_000, 200_000, 10)
        3000000.0
    """
    balance = finite(current_balance)
    avg = non_negative(daily_average_spend)
    days = positive_int(days_remaining, minimum=0)
    income = non_negative(projected_income)
    expected_spending = avg * days
    return balance + income - expected_spending


def days_left_in_month(today: Optional[date] = None) -> int:
    """Count the days remaining in the month after ``today``.
    
    Args:
        today: Reference date; defaults to the current local date
        
    Returns:
        Days in the month minus today's day number (0 on the last day)
        
    Example:
        >>> days_left_in_month(date(2024, 2, 10))
        19
    """
    stamp = pd.Timestamp(today if today is not None else date.today())
    return max(0, int(stamp.days_in_month) - int(stamp.day))
