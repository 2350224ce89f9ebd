"""Simulation engine: island controller, batch scheduler, and Parquet log."""

from turmite_islands.simulation.controller import EvolutionController, Phase
from turmite_islands.simulation.persistence import GenerationLogWriter, flush_generation_columns
from turmite_islands.simulation.scheduler import GenerationScheduler

__all__ = [
    "EvolutionController",
    "GenerationLogWriter",
    "GenerationScheduler",
    "Phase",
    "flush_generation_columns",
]
