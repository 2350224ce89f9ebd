"""Parquet persistence for the per-generation fitness log."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from turmite_islands.config.constants import FLUSH_THRESHOLD
from turmite_islands.evolution.strategies import ReplacementOutcome
from turmite_islands.io.schemas import GENERATION_LOG_SCHEMA, GENERATION_LOG_SCHEMA_VERSION
from turmite_islands.metrics.fitness import IslandFitness


def flush_generation_columns(
    columns: dict[str, list[int | float | str]],
    log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated generation rows to Parquet and clear in-memory buffers."""
    if not columns["generation"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=GENERATION_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(log_path, GENERATION_LOG_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


class GenerationLogWriter:
    """Buffered appender for ``generation_log.parquet``.

    Use as a context manager so the underlying writer is always closed.
    """

    def __init__(self, log_path: Path, flush_threshold: int = FLUSH_THRESHOLD) -> None:
        self.log_path = Path(log_path)
        self.flush_threshold = flush_threshold
        self._writer: pq.ParquetWriter | None = None
        self._columns: dict[str, list[int | float | str]] = {
            field.name: [] for field in GENERATION_LOG_SCHEMA
        }

    def __enter__(self) -> GenerationLogWriter:
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def append(
        self,
        generation: int,
        fitness: Sequence[IslandFitness],
        outcomes: Sequence[ReplacementOutcome],
    ) -> None:
        for island, (island_fitness, outcome) in enumerate(zip(fitness, outcomes, strict=True)):
            self._columns["schema_version"].append(GENERATION_LOG_SCHEMA_VERSION)
            self._columns["generation"].append(generation)
            self._columns["island"].append(island)
            for key, value in island_fitness.to_row().items():
                self._columns[key].append(value)
            self._columns["outcome"].append(outcome.value)
        if len(self._columns["generation"]) >= self.flush_threshold:
            self.flush()

    def flush(self) -> None:
        self._writer = flush_generation_columns(self._columns, self.log_path, self._writer)

    def close(self) -> None:
        self.flush()
        if self._writer is not None:
            self._writer.close()
            self._writer = None
