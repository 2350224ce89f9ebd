"""Genetic operators: uniform crossover, per-field mutation, tournament selection.

Genes are swapped whole. A child's rule row is always the very object found
in one of its parents at the same position, never a blend. Rule tables are
immutable tuples, so operators build new tables and a parent can never be
changed through its child.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from random import Random
from typing import TypeVar

from turmite_islands.config.constants import NUM_COLORS, TURN_CHOICES
from turmite_islands.domain.rules import Rule, RuleTable
from turmite_islands.evolution.population import TeamGenome

T = TypeVar("T")


def crossover_rule_tables(parent1: RuleTable, parent2: RuleTable, rng: Random) -> RuleTable:
    """Uniform crossover over cell-color rows.

    Rows only one parent defines are inherited from that parent.
    """
    length = max(len(parent1), len(parent2))
    child = []
    for color in range(length):
        if color >= len(parent1):
            child.append(parent2[color])
        elif color >= len(parent2):
            child.append(parent1[color])
        else:
            child.append(parent1[color] if rng.random() < 0.5 else parent2[color])
    return tuple(child)


def crossover_team(parent1: TeamGenome, parent2: TeamGenome, rng: Random) -> TeamGenome:
    """Slot-wise crossover of two team genomes, row-wise inside every slot."""
    if len(parent1) != len(parent2):
        raise ValueError("team genomes must have the same number of slots")
    return tuple(crossover_rule_tables(a, b, rng) for a, b in zip(parent1, parent2))


def mutate_rule(rule: Rule, rate: float, rng: Random) -> Rule:
    """Resample ``turn`` and ``new_color`` independently with probability ``rate``."""
    turn = rule.turn
    new_color = rule.new_color
    if rng.random() < rate:
        turn = rng.choice(TURN_CHOICES)
    if rng.random() < rate:
        new_color = rng.randrange(NUM_COLORS)
    if turn == rule.turn and new_color == rule.new_color:
        return rule
    return replace(rule, turn=turn, new_color=new_color)


def mutate_rule_table(table: RuleTable, rate: float, rng: Random) -> RuleTable:
    """Return a mutated copy of ``table``; ``new_state`` is never touched."""
    return tuple(
        tuple(None if rule is None else mutate_rule(rule, rate, rng) for rule in row)
        for row in table
    )


def mutate_team(genome: TeamGenome, rate: float, rng: Random) -> TeamGenome:
    return tuple(mutate_rule_table(table, rate, rng) for table in genome)


def tournament_select(
    candidates: Sequence[T],
    scores: Sequence[float],
    k: int,
    n: int,
    rng: Random,
) -> list[T]:
    """Run ``n`` independent size-``k`` tournaments and return the winners.

    Contestants are drawn uniformly with replacement; the highest score wins,
    and the earliest drawn contestant wins a tie.
    """
    if len(candidates) != len(scores):
        raise ValueError("candidates and scores must have the same length")
    if not candidates:
        raise ValueError("candidates must not be empty")
    if k < 1:
        raise ValueError("k must be >= 1")
    winners: list[T] = []
    for _ in range(n):
        best = rng.randrange(len(candidates))
        for _ in range(k - 1):
            challenger = rng.randrange(len(candidates))
            if scores[challenger] > scores[best]:
                best = challenger
        winners.append(candidates[best])
    return winners
