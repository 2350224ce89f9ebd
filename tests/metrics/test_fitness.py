"""Tests for turmite_islands.metrics.fitness module."""

from __future__ import annotations

import pytest

from turmite_islands.config.types import FitnessPolicy
from turmite_islands.domain.agent import Team
from turmite_islands.metrics.fitness import IslandFitness, dominance_fractions, dominance_scores


def test_fractions_over_painted_tiles() -> None:
    assert dominance_fractions(30, 10) == (0.75, 0.25)


def test_zero_denominator_gives_zero_fractions() -> None:
    assert dominance_fractions(0, 0) == (0.0, 0.0)
    fitness = IslandFitness(team_a_tiles=0, team_b_tiles=0, background_tiles=64)
    assert fitness.dominance == 0.0


def test_from_histogram_reads_team_colors() -> None:
    fitness = IslandFitness.from_histogram((10, 4, 2))
    assert fitness.background_tiles == 10
    assert fitness.team_a_tiles == 4
    assert fitness.team_b_tiles == 2


def test_dominance_is_symmetric() -> None:
    a_wins = IslandFitness(team_a_tiles=90, team_b_tiles=10)
    b_wins = IslandFitness(team_a_tiles=10, team_b_tiles=90)
    assert a_wins.dominance == pytest.approx(0.8)
    assert b_wins.dominance == pytest.approx(0.8)


def test_raw_and_dominance_policies() -> None:
    fitness = IslandFitness(team_a_tiles=30, team_b_tiles=10, background_tiles=24)
    assert fitness.score(Team.A, FitnessPolicy.RAW) == 30.0
    assert fitness.score(Team.B, FitnessPolicy.RAW) == 10.0
    assert fitness.score(Team.A, FitnessPolicy.DOMINANCE) == pytest.approx(0.75)
    assert fitness.score(Team.B, FitnessPolicy.DOMINANCE) == pytest.approx(0.25)


def test_dominance_scores_preserve_island_order() -> None:
    fitness = [IslandFitness(5, 5), IslandFitness(10, 0), IslandFitness(0, 0)]
    assert dominance_scores(fitness) == [0.0, 1.0, 0.0]


def test_to_row_has_log_columns() -> None:
    row = IslandFitness(3, 1, 12).to_row()
    assert set(row) == {
        "team_a_tiles",
        "team_b_tiles",
        "background_tiles",
        "fraction_a",
        "fraction_b",
        "dominance",
    }
    assert row["dominance"] == pytest.approx(0.5)
