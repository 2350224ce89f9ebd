"""Interchangeable selection/replacement strategies for the island loop.

Both strategies expose the same ``select`` / ``crossover`` / ``mutate`` /
``replace`` surface, so the controller drives either one through the same
seed-step-evaluate-breed cycle.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Any

from turmite_islands.config.types import EvolutionConfig, SelectionPolicy
from turmite_islands.domain.agent import Team
from turmite_islands.domain.rules import RuleTable
from turmite_islands.evolution.operators import (
    crossover_rule_tables,
    crossover_team,
    mutate_rule_table,
    mutate_team,
    tournament_select,
)
from turmite_islands.evolution.population import Population, TeamGenome, random_population
from turmite_islands.metrics.fitness import IslandFitness, dominance_scores

logger = logging.getLogger(__name__)


class ReplacementOutcome(Enum):
    """What happened to one island's population at a generation boundary."""

    CARRIED = "carried"
    BRED = "bred"
    RANDOMIZED = "randomized"


@dataclass(frozen=True)
class BreedingResult:
    """Next-generation populations plus the per-island outcome."""

    populations: tuple[Population, ...]
    outcomes: tuple[ReplacementOutcome, ...]


class EvolutionStrategy(ABC):
    """Uniform interface over the selection/crossover/mutation/replacement steps."""

    def __init__(self, config: EvolutionConfig, rng: Random) -> None:
        self.config = config
        self.rng = rng

    @abstractmethod
    def select(self, populations: Sequence[Population], fitness: Sequence[IslandFitness]) -> Any:
        """Choose the breeding material for the next generation."""

    @abstractmethod
    def crossover(self, parent1: Any, parent2: Any) -> Any:
        """Combine two parents into one child."""

    @abstractmethod
    def mutate(self, genome: Any) -> Any:
        """Return a mutated copy of ``genome``."""

    @abstractmethod
    def replace(
        self, populations: Sequence[Population], fitness: Sequence[IslandFitness]
    ) -> BreedingResult:
        """Produce every island's population for the next generation."""

    def _check_lengths(
        self, populations: Sequence[Population], fitness: Sequence[IslandFitness]
    ) -> None:
        if len(populations) != len(fitness):
            raise ValueError("populations and fitness must have one entry per island")
        if not populations:
            raise ValueError("populations must not be empty")


@dataclass(frozen=True)
class DominanceSelection:
    """Winner/loser choice across islands by dominance score."""

    winner: int
    loser: int
    scores: tuple[float, ...]


class DominanceReplacement(EvolutionStrategy):
    """Islands compete with each other on how lopsided their territory split is.

    The most dominant island breeds a replacement for the least dominant one.
    Any other island below the stagnation threshold is re-randomized; the
    remaining islands carry over unchanged.
    """

    def select(
        self, populations: Sequence[Population], fitness: Sequence[IslandFitness]
    ) -> DominanceSelection:
        scores = dominance_scores(fitness)
        winner = loser = 0
        for index, score in enumerate(scores):
            if score > scores[winner]:
                winner = index
            if score < scores[loser]:
                loser = index
        return DominanceSelection(winner=winner, loser=loser, scores=tuple(scores))

    def crossover(self, parent1: RuleTable, parent2: RuleTable) -> RuleTable:
        return crossover_rule_tables(parent1, parent2, self.rng)

    def mutate(self, genome: RuleTable) -> RuleTable:
        return mutate_rule_table(genome, self.config.mutation_rate, self.rng)

    def replace(
        self, populations: Sequence[Population], fitness: Sequence[IslandFitness]
    ) -> BreedingResult:
        self._check_lengths(populations, fitness)
        selection = self.select(populations, fitness)
        new_populations = list(populations)
        outcomes = [ReplacementOutcome.CARRIED] * len(populations)

        for index, score in enumerate(selection.scores):
            if index != selection.loser and score < self.config.stagnation_threshold:
                logger.info("island %d stagnant (dominance %.4f); randomizing", index, score)
                new_populations[index] = random_population(len(populations[index]), self.rng)
                outcomes[index] = ReplacementOutcome.RANDOMIZED

        winning = populations[selection.winner].rule_tables
        children = []
        for _ in range(len(populations[selection.loser])):
            parent1 = winning[self.rng.randrange(len(winning))]
            parent2 = winning[self.rng.randrange(len(winning))]
            children.append(self.mutate(self.crossover(parent1, parent2)))
        new_populations[selection.loser] = Population(
            rule_tables=tuple(children), team_size=populations[selection.loser].team_size
        )
        outcomes[selection.loser] = ReplacementOutcome.BRED
        logger.debug(
            "winner island %d (%.4f) bred loser island %d (%.4f)",
            selection.winner,
            selection.scores[selection.winner],
            selection.loser,
            selection.scores[selection.loser],
        )
        return BreedingResult(populations=tuple(new_populations), outcomes=tuple(outcomes))


class TournamentSelection(EvolutionStrategy):
    """Each team evolves against its own counterparts on every island.

    Team genomes from all islands form the candidate pool, scored by that
    team's territory. Every island's team genome is replaced by a mutated
    child of two parents drawn from the tournament winners.
    """

    def select(
        self, populations: Sequence[Population], fitness: Sequence[IslandFitness]
    ) -> dict[Team, list[TeamGenome]]:
        pools: dict[Team, list[TeamGenome]] = {}
        for team in Team:
            candidates = [population.team(team) for population in populations]
            scores = [f.score(team, self.config.fitness_policy) for f in fitness]
            pools[team] = tournament_select(
                candidates, scores, k=self.config.tournament_size, n=len(populations), rng=self.rng
            )
        return pools

    def crossover(self, parent1: TeamGenome, parent2: TeamGenome) -> TeamGenome:
        return crossover_team(parent1, parent2, self.rng)

    def mutate(self, genome: TeamGenome) -> TeamGenome:
        return mutate_team(genome, self.config.mutation_rate, self.rng)

    def replace(
        self, populations: Sequence[Population], fitness: Sequence[IslandFitness]
    ) -> BreedingResult:
        self._check_lengths(populations, fitness)
        pools = self.select(populations, fitness)
        new_populations = list(populations)
        for team in Team:
            pool = pools[team]
            for index in range(len(new_populations)):
                parent1 = pool[self.rng.randrange(len(pool))]
                parent2 = pool[self.rng.randrange(len(pool))]
                child = self.mutate(self.crossover(parent1, parent2))
                new_populations[index] = new_populations[index].with_team(team, child)
        outcomes = (ReplacementOutcome.BRED,) * len(new_populations)
        return BreedingResult(populations=tuple(new_populations), outcomes=outcomes)


def build_strategy(config: EvolutionConfig, rng: Random) -> EvolutionStrategy:
    """Instantiate the strategy named by ``config.selection_policy``."""
    if config.selection_policy == SelectionPolicy.TOURNAMENT:
        return TournamentSelection(config, rng)
    return DominanceReplacement(config, rng)
