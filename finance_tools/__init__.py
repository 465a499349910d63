"""Top‑level package for the personal finance calculation tools.

This file makes the directory a Python package and exposes
convenient names.  The primary modules are:

* ``lib.budgets`` – splitting income into savings and category budgets
* ``lib.projections`` – balance, compound growth, goal and loan calculations
* ``lib.analytics`` – transaction records and category percentages

Every calculator is a pure function: it reads nothing but its arguments
and clamps out-of-range numbers instead of raising.  Loading transactions,
formatting amounts and drawing charts are left to the calling application.
"""

from .lib.analytics import (
    TransactionRecord,
    category_breakdown,
    percentages_by_category,
    recent_average_spend,
)
from .lib.budgets import DEFAULT_CATEGORY_WEIGHTS, BudgetAllocation, allocate_budget
from .lib.projections import (
    GoalProgress,
    amortization_schedule,
    compound_growth,
    days_left_in_month,
    goal_progress,
    loan_monthly_payment,
    project_balance,
)

__all__ = [
    "DEFAULT_CATEGORY_WEIGHTS",
    "BudgetAllocation",
    "GoalProgress",
    "TransactionRecord",
    "allocate_budget",
    "amortization_schedule",
    "category_breakdown",
    "compound_growth",
    "days_left_in_month",
    "goal_progress",
    "loan_monthly_payment",
    "percentages_by_category",
    "project_balance",
    "recent_average_spend",
]
