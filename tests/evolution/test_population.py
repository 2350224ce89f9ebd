"""Tests for turmite_islands.evolution.population module."""

from __future__ import annotations

from random import Random

import pytest

from turmite_islands.domain.agent import Team
from turmite_islands.domain.rules import generate_rule_table, langton_preset
from turmite_islands.evolution.population import (
    Population,
    preset_population,
    random_population,
)


def test_random_population_splits_teams() -> None:
    population = random_population(7, Random(0))
    assert len(population) == 7
    assert population.team_size == 3
    assert len(population.team(Team.A)) == 3
    assert len(population.team(Team.B)) == 4


def test_preset_population_uses_team_colors() -> None:
    population = preset_population(4)
    assert population.team(Team.A) == (langton_preset(1), langton_preset(1))
    assert population.team(Team.B) == (langton_preset(2), langton_preset(2))


def test_with_team_replaces_only_that_team() -> None:
    rng = Random(1)
    population = random_population(4, rng)
    genome = (generate_rule_table(rng), generate_rule_table(rng))
    updated = population.with_team(Team.B, genome)
    assert updated.team(Team.A) == population.team(Team.A)
    assert updated.team(Team.B) == genome
    assert population.team(Team.B) != genome


def test_with_team_rejects_slot_count_change() -> None:
    rng = Random(2)
    population = random_population(4, rng)
    with pytest.raises(ValueError):
        population.with_team(Team.A, (generate_rule_table(rng),))


def test_team_size_out_of_range_rejected() -> None:
    with pytest.raises(ValueError):
        Population(rule_tables=(generate_rule_table(Random(0)),), team_size=2)
