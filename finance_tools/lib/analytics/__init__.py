"""Analytics over historical transaction records.

This module provides the transaction record type plus category percentage
and recent spending calculations used by the statistics and tools views.
"""

from .transactions import (
    TransactionRecord,
    coerce_record,
    recent_average_spend,
    records_frame,
)
from .categories import (
    category_breakdown,
    percentages_by_category,
)

__all__ = [
    # Transactions
    'TransactionRecord',
    'coerce_record',
    'recent_average_spend',
    'records_frame',
    # Categories
    'category_breakdown',
    'percentages_by_category',
]
