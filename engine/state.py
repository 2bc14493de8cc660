"""
Session state for the calculator.

One immutable record, one update function per field. Every update returns a
new CalculatorState and leaves the old one untouched, so the projection is
always recomputed from current values (there is no "recalculate" action).
Entity count is fixed when the state is created.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from core.config import CalculatorConfig
from core.schema import HORIZON_CHOICES
from data_prep.observations import Observation

from .allocator import allocate_revenue, project_revenue
from .base import Entity, Projection, RevenueResult


@dataclass(frozen=True)
class CalculatorState:
    observations: Tuple[Observation, ...] = ()
    entities: Tuple[Entity, ...] = ()
    credits_per_month: float = 1000.0
    years: int = 1

    @property
    def has_data(self) -> bool:
        return len(self.observations) > 0

    def projection(self) -> Optional[Projection]:
        return project_revenue(self.observations, self.entities, self.credits_per_month, self.years)

    def revenue(self) -> List[RevenueResult]:
        return allocate_revenue(self.observations, self.entities, self.credits_per_month, self.years)


def default_entities(config: CalculatorConfig) -> Tuple[Entity, ...]:
    return tuple(
        Entity(name=name, percentage=float(config.default_percentage))
        for name in config.default_entity_names()
    )


def default_state(config: Optional[CalculatorConfig] = None) -> CalculatorState:
    config = config or CalculatorConfig()
    if config.years not in config.horizon_choices:
        raise ValueError(f"Default horizon {config.years} not in {config.horizon_choices}")
    return CalculatorState(
        observations=(),
        entities=default_entities(config),
        credits_per_month=float(config.credits_per_month),
        years=int(config.years),
    )


def with_observations(state: CalculatorState, observations: Sequence[Observation]) -> CalculatorState:
    """Replace the dataset in full (no merge with what was loaded before)."""
    return replace(state, observations=tuple(observations))


def _check_index(state: CalculatorState, index: int) -> None:
    if not 0 <= index < len(state.entities):
        raise IndexError(f"Entity index {index} out of range (0..{len(state.entities) - 1})")


def _replace_entity(state: CalculatorState, index: int, entity: Entity) -> CalculatorState:
    entities = list(state.entities)
    entities[index] = entity
    return replace(state, entities=tuple(entities))


def with_entity_name(state: CalculatorState, index: int, name: str) -> CalculatorState:
    _check_index(state, index)
    return _replace_entity(state, index, state.entities[index].renamed(name))


def with_entity_percentage(state: CalculatorState, index: int, percentage: float) -> CalculatorState:
    _check_index(state, index)
    return _replace_entity(state, index, state.entities[index].with_percentage(percentage))


def with_credits_per_month(state: CalculatorState, credits_per_month: float) -> CalculatorState:
    return replace(state, credits_per_month=float(credits_per_month))


def with_years(
    state: CalculatorState,
    years: int,
    *,
    choices: Tuple[int, ...] = HORIZON_CHOICES,
) -> CalculatorState:
    if years not in choices:
        raise ValueError(f"Horizon must be one of {choices}, got {years!r}")
    return replace(state, years=int(years))
