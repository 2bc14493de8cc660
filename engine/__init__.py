"""
Revenue engine — entity model, pure allocator, session state, monthly schedule.
"""

from .base import Entity, RevenueResult, ProjectionInput, Projection
from .allocator import allocate_revenue, project_revenue, latest_price
from .state import CalculatorState, default_state
from .schedule import monthly_schedule

__all__ = [
    "Entity",
    "RevenueResult",
    "ProjectionInput",
    "Projection",
    "allocate_revenue",
    "project_revenue",
    "latest_price",
    "CalculatorState",
    "default_state",
    "monthly_schedule",
]
