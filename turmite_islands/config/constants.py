"""Centralized domain constants for turmite island evolution.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_SIZE = 64
"""Default side length of the square toroidal grid."""

NUM_ISLANDS = 8
"""Default number of independent simulation instances."""

AGENTS_PER_ISLAND = 24
"""Default number of agents per island, split evenly between the two teams."""

TICKS_PER_GENERATION = 50_000
"""Default number of ticks every island runs before fitness is evaluated."""

TICKS_PER_BATCH = 100
"""Ticks advanced between scheduler yields; no effect on simulation outcome."""

MUTATION_RATE = 0.01
"""Per-field resample probability applied to every rule of a bred child."""

STAGNATION_THRESHOLD = 0.01
"""Dominance score below which a non-loser island is re-randomized."""

TOURNAMENT_SIZE = 2
"""Number of candidates drawn per tournament."""

BACKGROUND_COLOR = 0
"""Cell color of unclaimed territory."""

NUM_COLORS = 3
"""Palette size: background, team A, team B."""

NUM_STATES = 1
"""Number of agent internal states covered by generated rule tables."""

NUM_HEADINGS = 4
"""Up, Right, Down, Left."""

TURN_CHOICES: tuple[int, ...] = (-1, 1)
"""Rule alphabet for heading changes: left or right, never straight or reverse."""

FLUSH_THRESHOLD = 4_096
"""Flush generation log rows to Parquet once this in-memory row count is reached."""
