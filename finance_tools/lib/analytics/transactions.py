"""Transaction records handed over by the storage layer.

Records arrive already loaded and filtered by the caller. This module only
normalizes them into a frame and derives simple spending rates from them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping, Optional, Union

import pandas as pd

from ..common import finite, non_negative, positive_int
from ...settings import get_config_value

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ['Transaction Date', 'Amount', 'Category']

DEFAULT_WINDOW_DAYS = 30


@dataclass(frozen=True)
class TransactionRecord:
    """A single income or expense entry.

    ``amount`` is signed by the caller's convention and used at face value.
    ``occurred_at`` is a date-like string and only matters for date windows.
    """

    amount: float
    category: Optional[str] = None
    occurred_at: Optional[str] = None


RecordLike = Union[TransactionRecord, Mapping[str, Any]]


def _clean_category(category: Any) -> Optional[str]:
    if category is None:
        return None
    text = str(category)
    return text if text else None


def coerce_record(record: RecordLike) -> TransactionRecord:
    """Turn a record or a plain mapping into a normalized ``TransactionRecord``.
    
    Mappings may use ``occurred_at``, ``occurredAt``, ``date`` or ``createdAt``
    for the date, checked in that order. Missing or non-finite amounts become
    0.0 and an empty category counts as no category.
    
    Raises:
        TypeError: If ``record`` is neither a TransactionRecord nor a mapping
        
    Example:
        >>> coerce_record({'amount': 120, 'category': 'Food', 'date': '2024-03-01'})
        TransactionRecord(amount=120.0, category='Food', occurred_at='2024-03-01')
    """
    if isinstance(record, TransactionRecord):
        return TransactionRecord(
            amount=finite(record.amount),
            category=_clean_category(record.category),
            occurred_at=record.occurred_at,
        )
    if isinstance(record, Mapping):
        occurred_at = (
            record.get('occurred_at')
            or record.get('occurredAt')
            or record.get('date')
            or record.get('createdAt')
        )
        return TransactionRecord(
            amount=finite(record.get('amount')),
            category=_clean_category(record.get('category')),
            occurred_at=occurred_at or None,
        )
    raise TypeError(f"Unsupported transaction record type: {type(record).__name__}")


def records_frame(transactions: Iterable[RecordLike]) -> pd.DataFrame:
    """Build a transaction DataFrame from records.
    
    Args:
        transactions: TransactionRecord values or mappings
        
    Returns:
        DataFrame with columns: Transaction Date, Amount, Category
    """
    rows = [
        {
            'Transaction Date': rec.occurred_at,
            'Amount': rec.amount,
            'Category': rec.category,
        }
        for rec in map(coerce_record, transactions)
    ]
    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    frame['Amount'] = frame['Amount'].astype(float)
    return frame


def recent_average_spend(
    transactions: Iterable[RecordLike],
    today: Optional[date] = None,
    window_days: Optional[int] = None,
) -> float:
    """Average transaction amount over the trailing window.
    
    Records dated within ``window_days`` days of ``today`` (inclusive) are
    summed and divided by how many there are. Records with a missing or
    unparseable date are left out. This is the per-day spending suggestion
    handed to ``project_balance``.
    
    Args:
        transactions: TransactionRecord values or mappings
        today: Reference date; defaults to the current local date
        window_days: Window length; defaults to ``projection.recent_window_days``
            from the tools settings (30)
        
    Returns:
        Average amount per record in the window, clamped to >= 0
        (0.0 when no record falls inside it)
    """
    if window_days is None:
        window_days = get_config_value(
            'tools', 'projection', 'recent_window_days', default=DEFAULT_WINDOW_DAYS
        )
    window = positive_int(window_days, minimum=0)

    frame = records_frame(transactions)
    if frame.empty:
        return 0.0

    dates = pd.to_datetime(
        frame['Transaction Date'], errors='coerce', utc=True, format='ISO8601'
    ).dt.tz_localize(None)
    reference = pd.Timestamp(today if today is not None else date.today())
    age_days = (reference - dates.dt.normalize()).dt.days
    recent = frame[dates.notna() & (age_days <= window)]

    if recent.empty:
        logger.debug("No transactions in the last %d days", window)
        return 0.0
    return non_negative(recent['Amount'].sum() / max(1, len(recent)))
