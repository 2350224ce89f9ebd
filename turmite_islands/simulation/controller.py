"""Island-model evolution controller.

The controller owns one ``SimulationInstance`` per island, the populations
that seed them, and the random source driving placement and breeding. It is
a small state machine::

    IDLE -> SEEDING -> STEPPING -> EVALUATING -> BREEDING -> SEEDING -> ...

``stop`` returns a stepping controller to IDLE at a tick boundary without
breeding. There is no terminal state.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from random import Random

from turmite_islands.config.types import EvolutionConfig
from turmite_islands.domain.instance import SimulationInstance
from turmite_islands.domain.snapshot import GenerationSnapshot
from turmite_islands.evolution.population import Population, preset_population, random_population
from turmite_islands.evolution.strategies import (
    EvolutionStrategy,
    ReplacementOutcome,
    build_strategy,
)
from turmite_islands.metrics.fitness import IslandFitness

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Controller lifecycle state."""

    IDLE = "idle"
    SEEDING = "seeding"
    STEPPING = "stepping"
    EVALUATING = "evaluating"
    BREEDING = "breeding"


class EvolutionController:
    """Runs every island in lockstep and breeds populations between generations."""

    def __init__(self, config: EvolutionConfig | None = None) -> None:
        self.config = config or EvolutionConfig()
        self.rng = Random(self.config.seed)
        self.strategy: EvolutionStrategy = build_strategy(self.config, self.rng)
        self.instances: list[SimulationInstance] = []
        self.populations: list[Population] = []
        self.generation = 0
        self.tick = 0
        self.phase = Phase.IDLE
        self.last_fitness: list[IslandFitness] = []
        self.last_outcomes: list[ReplacementOutcome] = []
        self._build()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _build(self) -> None:
        config = self.config
        self.instances = [
            SimulationInstance(index=i, grid_size=config.grid_size)
            for i in range(config.num_islands)
        ]
        self.populations = [self._fresh_population() for _ in range(config.num_islands)]
        self.generation = 0
        self.tick = 0
        self.last_fitness = [IslandFitness() for _ in range(config.num_islands)]
        self.last_outcomes = []
        self.phase = Phase.IDLE

    def _fresh_population(self) -> Population:
        if self.config.preset_start:
            return preset_population(self.config.agents_per_island)
        return random_population(self.config.agents_per_island, self.rng)

    def reset_all(
        self,
        num_islands: int | None = None,
        agents_per_island: int | None = None,
        grid_size: int | None = None,
    ) -> None:
        """Reinitialize every island with fresh populations and generation 0.

        Any argument left as ``None`` keeps the current configuration value.
        The controller passes through IDLE and is seeded immediately.
        """
        self.config = replace(
            self.config,
            num_islands=self.config.num_islands if num_islands is None else num_islands,
            agents_per_island=(
                self.config.agents_per_island if agents_per_island is None else agents_per_island
            ),
            grid_size=self.config.grid_size if grid_size is None else grid_size,
        )
        self.strategy = build_strategy(self.config, self.rng)
        self._build()
        logger.debug(
            "reset: %d islands x %d agents on %dx%d grids",
            self.config.num_islands,
            self.config.agents_per_island,
            self.config.grid_size,
            self.config.grid_size,
        )
        self.seed()

    def seed(self) -> None:
        """Clear every grid and recreate agents from the current populations."""
        if self.phase not in (Phase.IDLE, Phase.SEEDING):
            raise RuntimeError(f"cannot seed while {self.phase.value}")
        self.phase = Phase.SEEDING
        if self.config.shuffle_islands:
            self.rng.shuffle(self.populations)
        placement = self.config.resolved_placement()
        for instance, population in zip(self.instances, self.populations, strict=True):
            instance.reset(population.rule_tables, population.team_size, placement, self.rng)
        self.tick = 0
        self.phase = Phase.STEPPING
        logger.debug("generation %d seeded", self.generation)

    def stop(self) -> None:
        """Abandon the running generation at the current tick boundary."""
        if self.phase != Phase.STEPPING:
            return
        for instance in self.instances:
            instance.clear_agents()
        self.phase = Phase.IDLE
        logger.debug("stopped generation %d at tick %d", self.generation, self.tick)

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    @property
    def remaining_ticks(self) -> int:
        return self.config.ticks_per_generation - self.tick

    @property
    def generation_complete(self) -> bool:
        return self.phase == Phase.STEPPING and self.remaining_ticks <= 0

    def advance(self, ticks: int) -> int:
        """Advance every island by up to ``ticks`` ticks; return the count run.

        Islands share no state, so each island's tick ``n`` completes before
        the next island's tick ``n`` without changing any outcome.
        """
        if self.phase != Phase.STEPPING:
            raise RuntimeError(f"cannot advance while {self.phase.value}")
        count = max(0, min(ticks, self.remaining_ticks))
        for _ in range(count):
            for instance in self.instances:
                instance.tick()
        self.tick += count
        return count

    def finish_generation(self) -> list[IslandFitness]:
        """Evaluate every island, breed the next populations, bump the generation."""
        if not self.generation_complete:
            raise RuntimeError("generation has not run its full tick budget")
        self.phase = Phase.EVALUATING
        fitness = [instance.fitness() for instance in self.instances]

        self.phase = Phase.BREEDING
        result = self.strategy.replace(self.populations, fitness)
        self.populations = list(result.populations)
        self.last_fitness = fitness
        self.last_outcomes = list(result.outcomes)

        misses = sum(instance.lookup_misses for instance in self.instances)
        logger.info(
            "generation %d: best dominance %.4f, mean %.4f, lookup misses %d",
            self.generation,
            max(f.dominance for f in fitness),
            sum(f.dominance for f in fitness) / len(fitness),
            misses,
        )
        self.generation += 1
        self.phase = Phase.SEEDING
        return fitness

    def step_one_generation(self) -> list[IslandFitness]:
        """Run a whole generation synchronously and return its per-island fitness."""
        if self.phase in (Phase.IDLE, Phase.SEEDING):
            self.seed()
        self.advance(self.remaining_ticks)
        return self.finish_generation()

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def snapshot(self) -> GenerationSnapshot:
        """Copy of every island's grid, agents, and current fitness."""
        return GenerationSnapshot(
            generation=self.generation,
            tick=self.tick,
            phase=self.phase.value,
            islands=tuple(instance.snapshot() for instance in self.instances),
        )
