"""Parquet schema definitions for run artifacts.

Only fitness history is persisted; evolved rule tables are never written.
"""

from __future__ import annotations

import pyarrow as pa

GENERATION_LOG_SCHEMA_VERSION = 1

GENERATION_LOG_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("generation", pa.int64()),
        ("island", pa.int64()),
        ("team_a_tiles", pa.int64()),
        ("team_b_tiles", pa.int64()),
        ("background_tiles", pa.int64()),
        ("fraction_a", pa.float64()),
        ("fraction_b", pa.float64()),
        ("dominance", pa.float64()),
        ("outcome", pa.string()),
    ]
)
