from __future__ import annotations

import math
from typing import Iterable

import pandas as pd
from dateutil.relativedelta import relativedelta


def missing_columns(df: pd.DataFrame, cols: Iterable[str]) -> list:
    """Required columns absent from df, in the order given."""
    return [c for c in cols if c not in df.columns]


def month_starts(as_of_date: pd.Timestamp, n_months: int) -> pd.DatetimeIndex:
    """
    Generate month-start dates for projection periods after as_of_date.
    If as_of_date is mid-month, we still project starting next month-start.
    Dates past the Timestamp range come back as NaT.
    """
    as_of = pd.Timestamp(as_of_date)
    try:
        first = (as_of.to_period("M") + 1).to_timestamp(how="start")
        return pd.date_range(first, periods=n_months, freq="MS")
    except (pd.errors.OutOfBoundsDatetime, OverflowError):
        return pd.DatetimeIndex([pd.NaT] * n_months)


def horizon_end(as_of_date: pd.Timestamp, years: int) -> pd.Timestamp:
    """Calendar date `years` after as_of_date (Feb 29 clamps to Feb 28). NaT if out of range."""
    try:
        return pd.Timestamp(pd.Timestamp(as_of_date).to_pydatetime() + relativedelta(years=years))
    except (pd.errors.OutOfBoundsDatetime, OverflowError):
        return pd.NaT


def format_currency(value: float, currency: str = "$", decimals: int = 2) -> str:
    """Format with thousands separators, e.g. -1234.5 -> '-$1,234.50'."""
    value = float(value)
    if math.isnan(value):
        return f"{currency}nan"
    value = round(value, decimals)
    sign = "-" if value < 0 else ""
    return f"{sign}{currency}{abs(value):,.{decimals}f}"


def format_date_label(ts) -> str:
    """ISO date label; NaT renders as 'Invalid Date'."""
    if pd.isna(ts):
        return "Invalid Date"
    return pd.Timestamp(ts).strftime("%Y-%m-%d")
