"""
Month-by-month revenue schedule over the projection horizon.

Long format, one row per (month, entity):
    month, date, entity_index, entity, revenue, cumulative_revenue

Months start at the month after the last observation's date. If that date
is NaT the `date` column is NaT and rows are identified by `month` only.
The last cumulative_revenue of each entity equals its allocated revenue.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from core.schema import MONTHS_PER_YEAR
from core.utils import month_starts
from data_prep.observations import Observation

from .allocator import latest_price
from .base import Entity

SCHEDULE_COLUMNS = ["month", "date", "entity_index", "entity", "revenue", "cumulative_revenue"]


def monthly_schedule(
    observations: Sequence[Observation],
    entities: Sequence[Entity],
    credits_per_month: float,
    years: int,
) -> pd.DataFrame:
    price = latest_price(observations)
    if price is None or len(entities) == 0:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)
    if int(years) != years or years < 1:
        raise ValueError(f"years must be a positive integer, got {years!r}")

    n_months = int(years) * MONTHS_PER_YEAR
    months = np.arange(1, n_months + 1)

    as_of = observations[-1].date
    if pd.isna(as_of):
        dates = pd.DatetimeIndex([pd.NaT] * n_months)
    else:
        dates = month_starts(as_of, n_months)

    monthly_revenue = price * float(credits_per_month)

    frames = []
    for i, entity in enumerate(entities):
        per_month = entity.percentage / 100.0 * monthly_revenue
        frames.append(
            pd.DataFrame(
                {
                    "month": months,
                    "date": dates,
                    "entity_index": i,
                    "entity": entity.name,
                    "revenue": np.full(n_months, per_month, dtype=float),
                    "cumulative_revenue": per_month * months.astype(float),
                }
            )
        )
    return pd.concat(frames, ignore_index=True)[SCHEDULE_COLUMNS]
