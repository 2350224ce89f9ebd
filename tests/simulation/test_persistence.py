"""Tests for the Parquet generation log writer."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq

from turmite_islands.evolution.strategies import ReplacementOutcome
from turmite_islands.io.schemas import GENERATION_LOG_SCHEMA, GENERATION_LOG_SCHEMA_VERSION
from turmite_islands.metrics.fitness import IslandFitness
from turmite_islands.simulation.persistence import GenerationLogWriter


def test_rows_written_with_schema(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "generation_log.parquet"
    fitness = [IslandFitness(30, 10, 24), IslandFitness(0, 0, 64)]
    outcomes = [ReplacementOutcome.CARRIED, ReplacementOutcome.BRED]
    with GenerationLogWriter(log_path) as writer:
        writer.append(0, fitness, outcomes)
        writer.append(1, fitness, outcomes)

    table = pq.read_table(log_path)
    assert table.schema.equals(GENERATION_LOG_SCHEMA)
    assert table.num_rows == 4
    rows = table.to_pylist()
    assert [r["generation"] for r in rows] == [0, 0, 1, 1]
    assert [r["island"] for r in rows] == [0, 1, 0, 1]
    assert rows[0]["fraction_a"] == 0.75
    assert rows[0]["dominance"] == 0.5
    assert rows[1]["outcome"] == "bred"
    assert {r["schema_version"] for r in rows} == {GENERATION_LOG_SCHEMA_VERSION}


def test_small_flush_threshold_appends_row_groups(tmp_path: Path) -> None:
    log_path = tmp_path / "log.parquet"
    with GenerationLogWriter(log_path, flush_threshold=1) as writer:
        for generation in range(3):
            writer.append(generation, [IslandFitness(1, 2, 3)], [ReplacementOutcome.CARRIED])

    parquet_file = pq.ParquetFile(log_path)
    assert parquet_file.metadata.num_rows == 3
    assert parquet_file.metadata.num_row_groups == 3


def test_no_rows_no_file(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "generation_log.parquet"
    with GenerationLogWriter(log_path):
        pass
    assert not log_path.exists()
