"""
Data preparation — loading price-history CSVs, building observations, validation.
"""

from .loader import load_price_csv, ingest_price_csv
from .observations import (
    Observation,
    build_observations,
    observations_to_frame,
    parse_week_of,
    parse_price,
)
from .validators import validate_price_history

__all__ = [
    "load_price_csv",
    "ingest_price_csv",
    "Observation",
    "build_observations",
    "observations_to_frame",
    "parse_week_of",
    "parse_price",
    "validate_price_history",
]
