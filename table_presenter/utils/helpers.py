"""Helper utilities for turning record values into comparable text."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd


def is_missing(value: object) -> bool:
    """Return True for None, NaN and NaT values."""
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # Containers make pd.isna return an array.
        return False


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if is_missing(value):
        return ""
    if isinstance(value, pd.Timestamp):
        return value.date().isoformat()
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def fold_text(value: object) -> str:
    """Return the case-folded text used for search matching."""
    return normalize_text(value).casefold()
