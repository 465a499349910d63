"""Projection calculators.

This module provides forward-looking calculations: end-of-month balance,
compound growth of savings, savings goal progress, and loan repayments.
"""

from .balance import days_left_in_month, project_balance
from .growth import GoalProgress, compound_growth, goal_progress
from .loans import amortization_schedule, loan_monthly_payment

__all__ = [
    # Balance
    'days_left_in_month',
    'project_balance',
    # Growth
    'GoalProgress',
    'compound_growth',
    'goal_progress',
    # Loans
    'amortization_schedule',
    'loan_monthly_payment',
]
