"""Configuration layer: constants and typed config dataclasses."""

from turmite_islands.config.constants import (
    AGENTS_PER_ISLAND,
    BACKGROUND_COLOR,
    FLUSH_THRESHOLD,
    GRID_SIZE,
    MUTATION_RATE,
    NUM_COLORS,
    NUM_HEADINGS,
    NUM_ISLANDS,
    NUM_STATES,
    STAGNATION_THRESHOLD,
    TICKS_PER_BATCH,
    TICKS_PER_GENERATION,
    TOURNAMENT_SIZE,
    TURN_CHOICES,
)
from turmite_islands.config.types import (
    EvolutionConfig,
    FitnessPolicy,
    PlacementMode,
    SelectionPolicy,
)

__all__ = [
    "AGENTS_PER_ISLAND",
    "BACKGROUND_COLOR",
    "EvolutionConfig",
    "FLUSH_THRESHOLD",
    "FitnessPolicy",
    "GRID_SIZE",
    "MUTATION_RATE",
    "NUM_COLORS",
    "NUM_HEADINGS",
    "NUM_ISLANDS",
    "NUM_STATES",
    "PlacementMode",
    "STAGNATION_THRESHOLD",
    "SelectionPolicy",
    "TICKS_PER_BATCH",
    "TICKS_PER_GENERATION",
    "TOURNAMENT_SIZE",
    "TURN_CHOICES",
]
