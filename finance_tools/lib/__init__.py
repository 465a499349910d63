"""Calculation library for the finance tools.

Structure:
    - common/: Input clamping shared by every calculator
    - budgets/: Income allocation into savings and spending categories
    - projections/: Balance, compound growth, goal and loan calculations
    - analytics/: Transaction records and category breakdowns
"""

__all__ = ['common', 'budgets', 'projections', 'analytics']
