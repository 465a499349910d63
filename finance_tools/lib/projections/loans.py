"""Loan repayment calculations."""

from __future__ import annotations

import logging
import math

import pandas as pd

from ..common import non_negative, positive_int

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ['Month', 'Payment', 'Interest', 'Principal', 'Balance']


def loan_monthly_payment(principal: float, annual_rate: float, term_months: float) -> float:
    """Calculate the fixed monthly payment for an amortizing loan.
    
    Args:
        principal: Amount borrowed, clamped to >= 0
        annual_rate: Nominal annual rate as a decimal, clamped to >= 0
        term_months: Number of monthly payments, floored and clamped to >= 1
        
    Returns:
        Monthly payment; ``principal / term_months`` for an interest-free loan
        
    Example:
        >>> loan_monthly_payment(1200, 0, 12)
        100.0
    """
    p = non_negative(principal)
    r = non_negative(annual_rate) / 12
    n = positive_int(term_months)
    if r == 0:
        return p / n
    # Same as r * (1+r)**n / ((1+r)**n - 1) without overflow or cancellation
    discount = -math.expm1(-n * math.log1p(r))
    if discount == 0:
        return p / n
    return p * (r / discount)


def amortization_schedule(principal: float, annual_rate: float, term_months: float) -> pd.DataFrame:
    """Build the month-by-month repayment table for a fixed-payment loan.
    
    Each row splits the payment from ``loan_monthly_payment`` into interest
    on the outstanding balance and principal repaid. The last payment is
    adjusted so the loan closes at exactly zero.
    
    Args:
        principal: Amount borrowed, clamped to >= 0
        annual_rate: Nominal annual rate as a decimal, clamped to >= 0
        term_months: Number of monthly payments, floored and clamped to >= 1
        
    Returns:
        DataFrame with columns: Month, Payment, Interest, Principal, Balance
        (one row per month, empty when nothing is borrowed)
    """
    p = non_negative(principal)
    r = non_negative(annual_rate) / 12
    n = positive_int(term_months)
    if p == 0:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)

    payment = loan_monthly_payment(p, annual_rate, n)
    balance = p
    rows = []
    for month in range(1, n + 1):
        interest = balance * r
        principal_paid = payment - interest
        if month == n:
            principal_paid = balance
        balance -= principal_paid
        rows.append({
            'Month': month,
            'Payment': interest + principal_paid,
            'Interest': interest,
            'Principal': principal_paid,
            'Balance': balance,
        })

    schedule = pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
    logger.debug("Built %d-month schedule, total interest %.2f", n, schedule['Interest'].sum())
    return schedule
