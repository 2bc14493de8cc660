from __future__ import annotations

from typing import Tuple

# Columns of the weekly credit price export. The ingestor reads ONLY these.
WEEK_OF_COLUMN: str = "Week Of"
PRICE_COLUMN: str = "Weekly Average Credit Price ($)"

PRICE_HISTORY_COLUMNS: Tuple[str, ...] = (
    WEEK_OF_COLUMN,
    PRICE_COLUMN,
)

# Projection horizons offered by the dashboard (years).
HORIZON_CHOICES: Tuple[int, ...] = (1, 5, 10)

MONTHS_PER_YEAR: int = 12
