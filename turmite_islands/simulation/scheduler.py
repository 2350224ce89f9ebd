"""Generation scheduler: drives the tick loop in batches between display yields.

Batch size is a responsiveness knob only. The controller advances whole
ticks, so stopping between batches always leaves every grid and agent in a
consistent state.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from turmite_islands.domain.snapshot import GenerationSnapshot
from turmite_islands.simulation.controller import EvolutionController, Phase

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[GenerationSnapshot], None]


class GenerationScheduler:
    """Runs the controller's generation cycle until stopped.

    ``on_batch`` receives a snapshot after every batch of ticks and
    ``on_generation`` one after every finished generation. Either callback,
    or another thread, may call ``stop``. A ``stop`` issued before ``run``
    gets going cancels that run; ``start`` or ``reset`` discards it.
    """

    def __init__(
        self,
        controller: EvolutionController,
        ticks_per_batch: int | None = None,
        on_batch: SnapshotCallback | None = None,
        on_generation: SnapshotCallback | None = None,
    ) -> None:
        self.controller = controller
        self.ticks_per_batch = (
            controller.config.ticks_per_batch if ticks_per_batch is None else ticks_per_batch
        )
        if self.ticks_per_batch < 1:
            raise ValueError("ticks_per_batch must be >= 1")
        self.on_batch = on_batch
        self.on_generation = on_generation
        self._running = threading.Event()
        self._stop_requested = threading.Event()
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._running.is_set()

    def start(self) -> None:
        """Arm the run flag, discarding any stop requested while idle."""
        with self._lock:
            self._stop_requested.clear()
            self._running.set()

    def stop(self) -> None:
        with self._lock:
            self._stop_requested.set()
            self._running.clear()

    def reset(self) -> None:
        """Stop, then reseed the controller with fresh populations at generation 0."""
        self.stop()
        self.controller.stop()
        self.controller.reset_all()
        self._stop_requested.clear()

    def run(self, max_generations: int | None = None) -> int:
        """Run generations until stopped or ``max_generations`` complete.

        Returns the number of generations finished by this call.
        """
        with self._lock:
            if self._stop_requested.is_set():
                self._stop_requested.clear()
                logger.debug("stop requested before run started; not running")
                return 0
            self._running.set()
        controller = self.controller
        finished = 0
        try:
            while self.running and (max_generations is None or finished < max_generations):
                if controller.phase in (Phase.IDLE, Phase.SEEDING):
                    controller.seed()
                while not controller.generation_complete:
                    controller.advance(self.ticks_per_batch)
                    if self.on_batch is not None:
                        self.on_batch(controller.snapshot())
                    if not self.running:
                        controller.stop()
                        return finished
                controller.finish_generation()
                finished += 1
                if self.on_generation is not None:
                    self.on_generation(controller.snapshot())
        finally:
            with self._lock:
                self._running.clear()
                self._stop_requested.clear()
        logger.debug("scheduler finished %d generations", finished)
        return finished
