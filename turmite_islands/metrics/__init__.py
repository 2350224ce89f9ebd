"""Fitness metrics over island territory."""

from turmite_islands.metrics.fitness import IslandFitness, dominance_fractions, dominance_scores

__all__ = ["IslandFitness", "dominance_fractions", "dominance_scores"]
