"""
Build (date, price) observations from a raw price-history frame.

Only rows with an empty price field are dropped. Unparseable dates become
NaT and unparseable prices become NaN; those rows are kept and flow
downstream unchanged. Row order is preserved, never re-sorted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from core.schema import PRICE_COLUMN, WEEK_OF_COLUMN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observation:
    """One weekly price point. `date` may be NaT and `price` may be NaN."""

    date: pd.Timestamp
    price: float


def parse_week_of(values: pd.Series) -> pd.Series:
    """
    Parse 'Week Of' strings element-wise; NaT where parsing fails.

    Offsets are normalised to UTC and dropped, so a mix of naive and
    offset-qualified dates still parses.
    """
    text = values.fillna("").astype(str).str.strip()
    parsed = pd.to_datetime(text, errors="coerce", format="mixed", utc=True)
    return parsed.dt.tz_localize(None)


def parse_price(values: pd.Series) -> pd.Series:
    """Parse price strings as floats; NaN where parsing fails."""
    text = values.fillna("").astype(str).str.strip()
    return pd.to_numeric(text, errors="coerce").astype(float)


def has_price(values: pd.Series) -> pd.Series:
    """Boolean mask: True where the price field is non-empty."""
    return values.fillna("").astype(str).str.strip() != ""


def build_observations(frame: pd.DataFrame) -> Tuple[Observation, ...]:
    """
    Convert a raw frame (all columns as strings) into observations.

    A missing price column means every row has an empty price, so nothing
    survives. A missing 'Week Of' column gives NaT for every date.
    """
    if frame.empty:
        return ()

    if PRICE_COLUMN not in frame.columns:
        logger.warning("Column %r not found; all %d rows dropped.", PRICE_COLUMN, len(frame))
        return ()

    keep = has_price(frame[PRICE_COLUMN])
    kept = frame.loc[keep]

    if WEEK_OF_COLUMN in kept.columns:
        dates = parse_week_of(kept[WEEK_OF_COLUMN])
    else:
        logger.warning("Column %r not found; dates set to NaT.", WEEK_OF_COLUMN)
        dates = pd.Series(pd.NaT, index=kept.index, dtype="datetime64[ns]")
    prices = parse_price(kept[PRICE_COLUMN])

    n_dropped = int((~keep).sum())
    if n_dropped:
        logger.info("Dropped %d rows with an empty price field.", n_dropped)

    return tuple(
        Observation(date=pd.Timestamp(d) if pd.notna(d) else pd.NaT, price=float(p))
        for d, p in zip(dates, prices)
    )


def observations_to_frame(observations: Sequence[Observation]) -> pd.DataFrame:
    """Two-column frame (date, price) in observation order."""
    return pd.DataFrame(
        {
            "date": pd.to_datetime([o.date for o in observations]),
            "price": np.asarray([o.price for o in observations], dtype=float),
        }
    )
