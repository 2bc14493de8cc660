"""
Revenue allocator: a pure function of (observations, entities, credits/month, years).

No rounding happens here; presentation rounds to 2 decimals. Negative or
zero inputs are accepted and propagate (a negative share gives negative
revenue). The horizon is not range-checked here; the session state and the
dashboard restrict it to the offered choices.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from core.schema import MONTHS_PER_YEAR
from data_prep.observations import Observation

from .base import Entity, Projection, ProjectionInput, RevenueResult


def latest_price(observations: Sequence[Observation]) -> Optional[float]:
    """Price of the last observation by position (not by date). None when empty."""
    if len(observations) == 0:
        return None
    return float(observations[-1].price)


def compute_projection(inp: ProjectionInput) -> Projection:
    monthly = inp.latest_price * float(inp.credits_per_month)
    annual = monthly * MONTHS_PER_YEAR
    total = annual * inp.years

    shares = np.asarray([e.percentage for e in inp.entities], dtype=float) / 100.0
    revenue = shares * total

    results = tuple(
        RevenueResult(entity_name=e.name, revenue=float(r))
        for e, r in zip(inp.entities, revenue)
    )
    return Projection(
        latest_price=inp.latest_price,
        credits_per_month=float(inp.credits_per_month),
        years=inp.years,
        monthly_revenue=monthly,
        annual_revenue=annual,
        total_revenue=total,
        results=results,
    )


def project_revenue(
    observations: Sequence[Observation],
    entities: Sequence[Entity],
    credits_per_month: float,
    years: int,
) -> Optional[Projection]:
    """Full breakdown, or None when there are no observations yet."""
    price = latest_price(observations)
    if price is None:
        return None
    inp = ProjectionInput(
        latest_price=price,
        credits_per_month=credits_per_month,
        years=years,
        entities=tuple(entities),
    )
    return compute_projection(inp)


def allocate_revenue(
    observations: Sequence[Observation],
    entities: Sequence[Entity],
    credits_per_month: float,
    years: int,
) -> List[RevenueResult]:
    """One RevenueResult per entity, in entity order. Empty when there is no data."""
    projection = project_revenue(observations, entities, credits_per_month, years)
    if projection is None:
        return []
    return list(projection.results)
