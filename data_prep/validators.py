"""
Data quality checks for an uploaded price history.

Informational only: nothing here blocks ingestion or the projection.
Catches:
- Missing required columns
- Empty uploads
- Unparseable dates / prices (kept as NaT / NaN)
- Negative prices
- Weeks that are not in ascending order (the latest price is taken by position)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from core.schema import PRICE_HISTORY_COLUMNS
from core.utils import missing_columns

from .observations import Observation, observations_to_frame


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a price history."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_price_history(
    observations: Sequence[Observation],
    raw: Optional[pd.DataFrame] = None,
    *,
    columns: tuple = PRICE_HISTORY_COLUMNS,
) -> ValidationResult:
    """
    Run all checks on ingested observations.
    Pass the raw frame to also check the header row.
    """
    result = ValidationResult()

    # --- Schema checks ---
    if raw is not None and len(raw.columns) > 0:
        missing = missing_columns(raw, columns)
        if missing:
            result.errors.append(f"Missing required columns: {missing}")

    n = len(observations)
    if n == 0:
        result.warnings.append("No price observations loaded (0 rows with a price).")
        return result

    df = observations_to_frame(observations)

    # --- Dates ---
    n_bad_dates = int(df["date"].isna().sum())
    if n_bad_dates > 0:
        result.warnings.append(f"{n_bad_dates} rows have an unparseable Week Of date.")

    valid_dates = df["date"].dropna()
    if not valid_dates.is_monotonic_increasing:
        result.warnings.append(
            "Weeks are not in ascending order; the latest price is taken from the "
            "last row, not the latest date."
        )

    # --- Prices ---
    n_bad_prices = int(df["price"].isna().sum())
    if n_bad_prices > 0:
        result.warnings.append(f"{n_bad_prices} rows have an unparseable price.")

    n_neg = int((df["price"] < 0).sum())
    if n_neg > 0:
        result.warnings.append(f"{n_neg} rows have a negative price.")

    if pd.isna(df["price"].iloc[-1]):
        result.warnings.append("The latest price is not a number; projected revenue will be NaN.")

    return result
