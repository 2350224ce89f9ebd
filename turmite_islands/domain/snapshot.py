"""Typed read-only views of island state handed to display collaborators.

Snapshots copy grid contents, so a consumer may keep them across ticks
without observing later writes.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from turmite_islands.metrics.fitness import IslandFitness


@dataclass(frozen=True)
class AgentState:
    """Immutable view of a single agent at one point in time."""

    agent_id: int
    x: int
    y: int
    heading: int
    team: int


@dataclass(frozen=True)
class IslandSnapshot:
    """Grid contents, agents, and current fitness of one island."""

    island: int
    cells: np.ndarray
    agents: tuple[AgentState, ...]
    fitness: IslandFitness


@dataclass(frozen=True)
class GenerationSnapshot:
    """Everything a renderer needs at one externally observable point."""

    generation: int
    tick: int
    phase: str
    islands: tuple[IslandSnapshot, ...]
