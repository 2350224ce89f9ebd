"""One island: a grid plus the agents painting it."""

from __future__ import annotations

from collections.abc import Sequence
from random import Random

from turmite_islands.config.types import PlacementMode
from turmite_islands.domain.agent import Agent, Team
from turmite_islands.domain.grid import Grid
from turmite_islands.domain.rules import RuleTable
from turmite_islands.domain.snapshot import AgentState, IslandSnapshot
from turmite_islands.metrics.fitness import IslandFitness


class SimulationInstance:
    """Owns a grid and its live agents for the duration of one generation."""

    def __init__(self, index: int, grid_size: int) -> None:
        self.index = index
        self.grid = Grid(grid_size)
        self.agents: list[Agent] = []
        self.lookup_misses = 0

    def reset(
        self,
        rule_tables: Sequence[RuleTable],
        team_size: int,
        placement: PlacementMode,
        rng: Random,
    ) -> None:
        """Clear the grid and recreate one agent per rule table.

        The first ``team_size`` tables become team A, the rest team B. With
        team-halves placement, team A starts in the left half of the grid and
        team B in the right half.
        """
        size = self.grid.size
        mid = size // 2
        self.grid.reset()
        self.lookup_misses = 0
        self.agents = []
        for slot, rules in enumerate(rule_tables):
            team = Team.A if slot < team_size else Team.B
            if placement == PlacementMode.TEAM_HALVES:
                x = rng.randrange(mid) if team == Team.A else mid + rng.randrange(size - mid)
            else:
                x = rng.randrange(size)
            y = rng.randrange(size)
            heading = rng.randrange(4)
            self.agents.append(Agent(x=x, y=y, heading=heading, team=team, rules=rules))

    def clear_agents(self) -> None:
        self.agents = []

    def tick(self) -> None:
        """Advance every agent once, in list order."""
        grid = self.grid
        for agent in self.agents:
            if not agent.step(grid):
                self.lookup_misses += 1

    def advance(self, ticks: int) -> None:
        for _ in range(ticks):
            self.tick()

    def fitness(self) -> IslandFitness:
        return IslandFitness.from_histogram(self.grid.histogram)

    def snapshot(self) -> IslandSnapshot:
        return IslandSnapshot(
            island=self.index,
            cells=self.grid.to_array(),
            agents=tuple(
                AgentState(agent_id=i, x=a.x, y=a.y, heading=a.heading, team=int(a.team))
                for i, a in enumerate(self.agents)
            ),
            fitness=self.fitness(),
        )
