"""
Value types shared by the allocator, the session state and the dashboard.
All frozen: an edit produces a new value.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple

import pandas as pd


@dataclass(frozen=True)
class Entity:
    """A stakeholder entitled to `percentage` percent of projected revenue."""

    name: str
    percentage: float

    def renamed(self, name: str) -> "Entity":
        return replace(self, name=str(name))

    def with_percentage(self, percentage: float) -> "Entity":
        return replace(self, percentage=float(percentage))


@dataclass(frozen=True)
class RevenueResult:
    entity_name: str
    revenue: float


@dataclass(frozen=True)
class ProjectionInput:
    latest_price: float
    credits_per_month: float
    years: int
    entities: Tuple[Entity, ...] = ()


@dataclass(frozen=True)
class Projection:
    """
    Full revenue breakdown for one ProjectionInput.

    monthly_revenue = latest_price * credits_per_month
    annual_revenue  = monthly_revenue * 12
    total_revenue   = annual_revenue * years
    results[i]      = entities[i].percentage / 100 * total_revenue
    """

    latest_price: float
    credits_per_month: float
    years: int
    monthly_revenue: float
    annual_revenue: float
    total_revenue: float
    results: Tuple[RevenueResult, ...] = field(default_factory=tuple)

    @property
    def allocated_total(self) -> float:
        return float(sum(r.revenue for r in self.results))

    @property
    def unallocated(self) -> float:
        """Positive when shares sum below 100%, negative when over-allocated."""
        return self.total_revenue - self.allocated_total

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [{"Entity": r.entity_name, "Revenue": r.revenue} for r in self.results],
            columns=["Entity", "Revenue"],
        )
