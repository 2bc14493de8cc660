"""
Calculator configuration.
Defaults for a fresh session; nothing here is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .schema import HORIZON_CHOICES


@dataclass(frozen=True)
class CalculatorConfig:
    # participating entities
    n_entities: int = 5
    default_percentage: float = 20.0
    entity_name_prefix: str = "Entity"

    # projection inputs
    credits_per_month: float = 1000.0
    years: int = 1
    horizon_choices: Tuple[int, ...] = HORIZON_CHOICES

    # presentation
    currency: str = "$"
    decimals: int = 2

    def default_entity_names(self) -> Tuple[str, ...]:
        return tuple(f"{self.entity_name_prefix} {i + 1}" for i in range(self.n_entities))
