"""Tests for turmite_islands.simulation.scheduler module."""

from __future__ import annotations

import threading

import pytest

from turmite_islands.config.types import EvolutionConfig
from turmite_islands.domain.snapshot import GenerationSnapshot
from turmite_islands.simulation.controller import EvolutionController, Phase
from turmite_islands.simulation.scheduler import GenerationScheduler


def _controller() -> EvolutionController:
    return EvolutionController(
        EvolutionConfig(
            num_islands=2,
            agents_per_island=4,
            grid_size=8,
            ticks_per_generation=20,
            ticks_per_batch=5,
            seed=3,
        )
    )


def test_run_finishes_requested_generations() -> None:
    controller = _controller()
    generations: list[int] = []
    scheduler = GenerationScheduler(
        controller, on_generation=lambda snap: generations.append(snap.generation)
    )
    assert scheduler.run(max_generations=3) == 3
    assert generations == [1, 2, 3]
    assert controller.generation == 3
    assert not scheduler.running


def test_on_batch_called_once_per_batch() -> None:
    controller = _controller()
    ticks: list[int] = []
    scheduler = GenerationScheduler(controller, on_batch=lambda snap: ticks.append(snap.tick))
    scheduler.run(max_generations=1)
    assert ticks == [5, 10, 15, 20]


def test_batch_override() -> None:
    controller = _controller()
    ticks: list[int] = []
    scheduler = GenerationScheduler(
        controller, ticks_per_batch=8, on_batch=lambda snap: ticks.append(snap.tick)
    )
    scheduler.run(max_generations=1)
    assert ticks == [8, 16, 20]


def test_stop_from_callback_halts_at_batch_boundary() -> None:
    controller = _controller()
    seen: list[GenerationSnapshot] = []

    def on_batch(snapshot: GenerationSnapshot) -> None:
        seen.append(snapshot)
        if snapshot.tick == 10:
            scheduler.stop()

    scheduler = GenerationScheduler(controller, on_batch=on_batch)
    assert scheduler.run() == 0
    assert [s.tick for s in seen] == [5, 10]
    assert controller.phase == Phase.IDLE
    assert controller.generation == 0


def test_stop_from_another_thread() -> None:
    controller = EvolutionController(
        EvolutionConfig(
            num_islands=2,
            agents_per_island=4,
            grid_size=8,
            ticks_per_generation=1_000_000,
            ticks_per_batch=10,
            seed=3,
        )
    )
    first_batch = threading.Event()
    scheduler = GenerationScheduler(controller, on_batch=lambda snap: first_batch.set())
    results: list[int] = []
    worker = threading.Thread(target=lambda: results.append(scheduler.run()))
    worker.start()
    assert first_batch.wait(timeout=10)
    scheduler.stop()
    worker.join(timeout=10)
    assert not worker.is_alive()
    assert results == [0]
    assert controller.phase == Phase.IDLE
    assert controller.generation == 0
    assert controller.tick % 10 == 0


def test_stop_before_run_cancels_that_run() -> None:
    controller = _controller()
    scheduler = GenerationScheduler(controller)
    scheduler.stop()
    assert scheduler.run(max_generations=1) == 0
    assert controller.phase == Phase.IDLE
    assert controller.generation == 0
    assert scheduler.run(max_generations=1) == 1


def test_start_discards_pending_stop() -> None:
    controller = _controller()
    scheduler = GenerationScheduler(controller)
    scheduler.stop()
    scheduler.start()
    assert scheduler.run(max_generations=1) == 1
    assert controller.generation == 1


def test_reset_returns_to_generation_zero() -> None:
    controller = _controller()
    scheduler = GenerationScheduler(controller)
    scheduler.run(max_generations=2)
    scheduler.reset()
    assert controller.generation == 0
    assert controller.phase == Phase.STEPPING
    assert scheduler.run(max_generations=1) == 1


def test_invalid_batch_rejected() -> None:
    with pytest.raises(ValueError):
        GenerationScheduler(_controller(), ticks_per_batch=0)
