"""Category share calculations for spending statistics."""

from __future__ import annotations

import logging
from typing import Dict, Iterable

import numpy as np
import pandas as pd

from .transactions import RecordLike, records_frame

logger = logging.getLogger(__name__)


def percentages_by_category(transactions: Iterable[RecordLike]) -> Dict[str, float]:
    """Calculate each category's share of the total transaction amount.
    
    Amounts are summed at face value, with no absolute value taken. Records
    without a category count towards the total but belong to no category,
    so the returned fractions can add up to less than 1.
    
    Args:
        transactions: TransactionRecord values or mappings
        
    Returns:
        Dictionary mapping category to fraction of the total; empty when the
        total is 0 or too large to represent
        
    Example:
        >>> percentages_by_category([
        ...     {'amount': 100, 'category': 'A'},
        ...     {'amount': 100, 'category': 'B'},
        ... ])
        {'A': 0.5, 'B': 0.5}
    """
    frame = records_frame(transactions)
    with np.errstate(over='ignore', invalid='ignore'):
        total = float(frame['Amount'].sum())
    if total == 0:
        logger.debug("Transaction total is zero; no category percentages")
        return {}
    if not np.isfinite(total):
        logger.debug("Transaction total %r is not finite; no category percentages", total)
        return {}

    categorized = frame[frame['Category'].notna()]
    grouped = categorized.groupby('Category', sort=False)['Amount'].sum()
    return {str(category): float(amount) / total for category, amount in grouped.items()}


def category_breakdown(transactions: Iterable[RecordLike]) -> pd.DataFrame:
    """Summarize categories with a positive total for the statistics view.
    
    Categories whose amounts net to zero or below are dropped, and the
    percentages are relative to the sum of the remaining categories.
    
    Args:
        transactions: TransactionRecord values or mappings
        
    Returns:
        DataFrame with columns: Category, Amount, Percent (0-100), sorted by
        Amount descending
    """
    frame = records_frame(transactions)
    categorized = frame[frame['Category'].notna()]
    if categorized.empty:
        return pd.DataFrame(columns=['Category', 'Amount', 'Percent'])

    totals = categorized.groupby('Category', sort=False)['Amount'].sum()
    totals = totals[totals > 0].sort_values(ascending=False, kind='stable')
    if totals.empty:
        return pd.DataFrame(columns=['Category', 'Amount', 'Percent'])

    summary = totals.reset_index()
    summary['Percent'] = summary['Amount'] / summary['Amount'].sum() * 100
    return summary
