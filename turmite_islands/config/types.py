"""Configuration dataclasses and mode enums for island evolution runs.

All frozen dataclasses that parameterise a run live here. Validation happens
in ``__post_init__`` so an invalid configuration is rejected at construction
time, before any island is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from turmite_islands.config.constants import (
    AGENTS_PER_ISLAND,
    GRID_SIZE,
    MUTATION_RATE,
    NUM_ISLANDS,
    STAGNATION_THRESHOLD,
    TICKS_PER_BATCH,
    TICKS_PER_GENERATION,
    TOURNAMENT_SIZE,
)

__all__ = [
    "EvolutionConfig",
    "FitnessPolicy",
    "PlacementMode",
    "SelectionPolicy",
]

# ---------------------------------------------------------------------------
# Mode enums
# ---------------------------------------------------------------------------


class SelectionPolicy(Enum):
    """Strategy used to derive the next generation's populations."""

    DOMINANCE = "dominance"
    TOURNAMENT = "tournament"


class FitnessPolicy(Enum):
    """How per-team scores are derived from an island's color histogram."""

    RAW = "raw"
    DOMINANCE = "dominance"


class PlacementMode(Enum):
    """Where agents are dropped when an island is seeded."""

    TEAM_HALVES = "team_halves"
    RANDOM = "random"


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EvolutionConfig:
    """Runtime parameters for one island-model evolution run."""

    num_islands: int = NUM_ISLANDS
    agents_per_island: int = AGENTS_PER_ISLAND
    grid_size: int = GRID_SIZE
    ticks_per_generation: int = TICKS_PER_GENERATION
    mutation_rate: float = MUTATION_RATE
    ticks_per_batch: int = TICKS_PER_BATCH
    stagnation_threshold: float = STAGNATION_THRESHOLD
    """Dominance-policy only."""
    tournament_size: int = TOURNAMENT_SIZE
    """Tournament-policy only."""
    selection_policy: SelectionPolicy = SelectionPolicy.DOMINANCE
    fitness_policy: FitnessPolicy = FitnessPolicy.RAW
    """Team score fed to tournament selection and shown in summaries."""
    placement: PlacementMode | None = None
    """``None`` picks team halves for dominance runs, random for tournaments."""
    shuffle_islands: bool = True
    """Shuffle populations across islands before every seeding."""
    preset_start: bool = False
    """Start from the hand-written Langton presets instead of random tables."""
    seed: int = 0

    def __post_init__(self) -> None:
        if self.num_islands < 1:
            raise ValueError("num_islands must be >= 1")
        if self.agents_per_island < 2:
            raise ValueError("agents_per_island must be >= 2 (one per team)")
        if self.grid_size < 2:
            raise ValueError("grid_size must be >= 2")
        if self.ticks_per_generation < 1:
            raise ValueError("ticks_per_generation must be >= 1")
        if self.ticks_per_batch < 1:
            raise ValueError("ticks_per_batch must be >= 1")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError("mutation_rate must be in [0.0, 1.0]")
        if not 0.0 <= self.stagnation_threshold <= 1.0:
            raise ValueError("stagnation_threshold must be in [0.0, 1.0]")
        if self.tournament_size < 1:
            raise ValueError("tournament_size must be >= 1")

    @property
    def team_size(self) -> int:
        """Number of team-A slots; team B takes the remainder."""
        return self.agents_per_island // 2

    def resolved_placement(self) -> PlacementMode:
        if self.placement is not None:
            return self.placement
        if self.selection_policy == SelectionPolicy.TOURNAMENT:
            return PlacementMode.RANDOM
        return PlacementMode.TEAM_HALVES
