"""
Display tables for the dashboard.
Values are rounded only here, never in the engine.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import pandas as pd

from core.utils import format_currency, format_date_label, horizon_end
from engine.base import Projection, RevenueResult


def results_table(
    results: Sequence[RevenueResult],
    *,
    currency: str = "$",
    decimals: int = 2,
) -> List[Tuple[str, str]]:
    """(entity name, formatted revenue) rows, e.g. ('Entity 1', '$9,000.00')."""
    return [(r.entity_name, format_currency(r.revenue, currency, decimals)) for r in results]


def results_dataframe(
    results: Sequence[RevenueResult],
    *,
    currency: str = "$",
    decimals: int = 2,
) -> pd.DataFrame:
    rows = results_table(results, currency=currency, decimals=decimals)
    return pd.DataFrame(rows, columns=["Entity", "Projected Revenue"])


def projection_summary(
    projection: Optional[Projection],
    *,
    as_of_date: Optional[pd.Timestamp] = None,
    currency: str = "$",
    decimals: int = 2,
) -> pd.DataFrame:
    """Metric / Value table of the revenue breakdown. Empty when there is no projection."""
    if projection is None:
        return pd.DataFrame(columns=["Metric", "Value"])

    def fmt(v: float) -> str:
        return format_currency(v, currency, decimals)

    rows = [
        {"Metric": "Latest Credit Price", "Value": fmt(projection.latest_price)},
        {"Metric": "Credits per Month", "Value": f"{projection.credits_per_month:,.{decimals}f}"},
        {"Metric": "Monthly Revenue", "Value": fmt(projection.monthly_revenue)},
        {"Metric": "Annual Revenue", "Value": fmt(projection.annual_revenue)},
        {"Metric": f"Total Revenue ({projection.years} yr)", "Value": fmt(projection.total_revenue)},
        {"Metric": "Allocated to Entities", "Value": fmt(projection.allocated_total)},
        {"Metric": "Unallocated", "Value": fmt(projection.unallocated)},
    ]
    if as_of_date is not None and not pd.isna(as_of_date):
        rows.insert(0, {"Metric": "Price As Of", "Value": format_date_label(as_of_date)})
        rows.insert(1, {
            "Metric": "Horizon Ends",
            "Value": format_date_label(horizon_end(as_of_date, projection.years)),
        })
    return pd.DataFrame(rows)
