"""
Chart inputs as ordered (label, value) pairs.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from core.utils import format_date_label
from data_prep.observations import Observation
from engine.base import RevenueResult


def price_series(observations: Sequence[Observation]) -> List[Tuple[str, float]]:
    """Historical price line: ISO week label -> price, in observation order."""
    return [(format_date_label(o.date), float(o.price)) for o in observations]


def revenue_bars(results: Sequence[RevenueResult]) -> List[Tuple[str, float]]:
    """Per-entity revenue bars, in entity order. Duplicate names are kept."""
    return [(r.entity_name, float(r.revenue)) for r in results]
