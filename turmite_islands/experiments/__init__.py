"""Experiments layer: CLI-driven evolution runs."""

from turmite_islands.experiments.run_evolution import main, run_evolution

__all__ = ["main", "run_evolution"]
