"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def generation_log_path(out_dir: Path) -> Path:
    """Return path to the per-generation fitness Parquet file."""
    return logs_dir(out_dir) / "generation_log.parquet"


def frames_dir(out_dir: Path) -> Path:
    """Return path to the directory holding rendered generation frames."""
    return out_dir / "frames"


def frame_path(out_dir: Path, generation: int) -> Path:
    return frames_dir(out_dir) / f"generation_{generation:05d}.png"
