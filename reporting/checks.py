from __future__ import annotations

from typing import Optional, Sequence

from engine.base import Entity

TARGET_TOTAL_PERCENTAGE = 100


def percentage_total(entities: Sequence[Entity]) -> float:
    total = 0.0
    for e in entities:
        total += e.percentage
    return total


def percentage_warning(entities: Sequence[Entity]) -> Optional[str]:
    """
    Warning text when shares do not sum to exactly 100, else None.
    Exact float comparison: 33.3 * 3 entities warns. Never blocks the projection.
    """
    total = percentage_total(entities)
    if total != TARGET_TOTAL_PERCENTAGE:
        return f"Total percentage must equal 100%. Current total: {total:g}%"
    return None
