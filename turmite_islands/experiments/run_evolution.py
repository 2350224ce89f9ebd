"""CLI entrypoint for island evolution runs.

This module owns CLI argument parsing and run dispatch. All domain logic
lives in the extracted modules:

- ``turmite_islands.config``                  – configuration dataclasses
- ``turmite_islands.simulation.controller``   – island state machine
- ``turmite_islands.simulation.scheduler``    – batched generation loop
- ``turmite_islands.simulation.persistence``  – Parquet generation log
- ``turmite_islands.viz``                     – per-generation frames
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from turmite_islands.config.constants import (
    AGENTS_PER_ISLAND,
    GRID_SIZE,
    MUTATION_RATE,
    NUM_ISLANDS,
    STAGNATION_THRESHOLD,
    TICKS_PER_BATCH,
    TICKS_PER_GENERATION,
    TOURNAMENT_SIZE,
)
from turmite_islands.config.types import (
    EvolutionConfig,
    FitnessPolicy,
    PlacementMode,
    SelectionPolicy,
)
from turmite_islands.domain.snapshot import GenerationSnapshot
from turmite_islands.io.paths import frame_path, generation_log_path
from turmite_islands.simulation.controller import EvolutionController
from turmite_islands.simulation.persistence import GenerationLogWriter
from turmite_islands.simulation.scheduler import GenerationScheduler
from turmite_islands.viz.theme import get_theme

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_selection_policy(raw: str) -> SelectionPolicy:
    try:
        return SelectionPolicy(raw)
    except ValueError as exc:
        valid = ", ".join(policy.value for policy in SelectionPolicy)
        raise ValueError(f"selection-policy must be one of {valid}") from exc


def _parse_fitness_policy(raw: str) -> FitnessPolicy:
    try:
        return FitnessPolicy(raw)
    except ValueError as exc:
        valid = ", ".join(policy.value for policy in FitnessPolicy)
        raise ValueError(f"fitness-policy must be one of {valid}") from exc


def _parse_placement(raw: str | None) -> PlacementMode | None:
    """Parse placement mode; ``auto`` defers to the selection policy."""
    if raw is None or raw == "auto":
        return None
    try:
        return PlacementMode(raw)
    except ValueError as exc:
        valid = ", ".join(["auto"] + [mode.value for mode in PlacementMode])
        raise ValueError(f"placement must be one of {valid}") from exc


_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


def _parse_log_level(raw: str) -> int:
    """Map a level name such as ``debug`` or ``WARNING`` to its numeric level."""
    level = getattr(logging, raw.strip().upper(), None)
    if not isinstance(level, int) or isinstance(level, bool):
        valid = ", ".join(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
        raise ValueError(f"log-level must be one of {valid}, got {raw!r}")
    return level


def _coerce_bool(raw: object, key: str) -> bool:
    """Accept real booleans and the usual on/off spellings, nothing else."""
    if isinstance(raw, bool):
        return raw
    text = raw.strip().lower() if isinstance(raw, str) else None
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError(f"{key}: expected a boolean, got {raw!r}")


def _coerce_int(raw: object, key: str) -> int:
    """Integers, integral floats and numeric strings; booleans are rejected."""
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, (int, str)) and not isinstance(raw, bool):
        try:
            return int(raw)
        except ValueError:
            pass
    raise ValueError(f"{key}: expected an integer, got {raw!r}")


def _coerce_float(raw: object, key: str) -> float:
    if isinstance(raw, (int, float, str)) and not isinstance(raw, bool):
        try:
            return float(raw)
        except ValueError:
            pass
    raise ValueError(f"{key}: expected a number, got {raw!r}")


def _coerce_str(raw: object, key: str) -> str:
    if isinstance(raw, (str, Path)):
        return str(raw)
    raise ValueError(f"{key}: expected a string, got {raw!r}")


def _resolve(
    args: argparse.Namespace,
    file_cfg: dict[str, object],
    key: str,
    default: T,
    coerce: Callable[[object, str], T],
) -> T:
    """Value for ``key``: command line first, then the config file, then ``default``.

    Argument destinations share their names with config-file keys.
    """
    raw = getattr(args, key, None)
    if raw is None:
        raw = file_cfg.get(key, default)
    return coerce(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Evolve competing turmite rule tables")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--generations", type=int, default=None)
    parser.add_argument("--num-islands", type=int, default=None)
    parser.add_argument("--agents-per-island", type=int, default=None)
    parser.add_argument("--grid-size", type=int, default=None)
    parser.add_argument("--ticks-per-generation", type=int, default=None)
    parser.add_argument("--ticks-per-batch", type=int, default=None)
    parser.add_argument("--mutation-rate", type=float, default=None)
    parser.add_argument("--stagnation-threshold", type=float, default=None)
    parser.add_argument("--tournament-size", type=int, default=None)
    parser.add_argument(
        "--selection-policy",
        type=str,
        choices=[policy.value for policy in SelectionPolicy],
        default=None,
    )
    parser.add_argument(
        "--fitness-policy",
        type=str,
        choices=[policy.value for policy in FitnessPolicy],
        default=None,
    )
    parser.add_argument(
        "--placement",
        type=str,
        choices=["auto"] + [mode.value for mode in PlacementMode],
        default=None,
    )
    parser.add_argument("--shuffle-islands", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--preset-start", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--render",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write one PNG frame per generation under <out-dir>/frames",
    )
    parser.add_argument("--theme", type=str, default=None)
    parser.add_argument("--log-level", type=str, default=None)
    return parser


def _config_from_args(args: argparse.Namespace, file_cfg: dict[str, object]) -> EvolutionConfig:
    """Resolve every run parameter into a validated ``EvolutionConfig``."""

    def resolve(key: str, default: T, coerce: Callable[[object, str], T]) -> T:
        return _resolve(args, file_cfg, key, default, coerce)

    return EvolutionConfig(
        num_islands=resolve("num_islands", NUM_ISLANDS, _coerce_int),
        agents_per_island=resolve("agents_per_island", AGENTS_PER_ISLAND, _coerce_int),
        grid_size=resolve("grid_size", GRID_SIZE, _coerce_int),
        ticks_per_generation=resolve("ticks_per_generation", TICKS_PER_GENERATION, _coerce_int),
        ticks_per_batch=resolve("ticks_per_batch", TICKS_PER_BATCH, _coerce_int),
        mutation_rate=resolve("mutation_rate", MUTATION_RATE, _coerce_float),
        stagnation_threshold=resolve("stagnation_threshold", STAGNATION_THRESHOLD, _coerce_float),
        tournament_size=resolve("tournament_size", TOURNAMENT_SIZE, _coerce_int),
        selection_policy=_parse_selection_policy(
            resolve("selection_policy", SelectionPolicy.DOMINANCE.value, _coerce_str)
        ),
        fitness_policy=_parse_fitness_policy(
            resolve("fitness_policy", FitnessPolicy.RAW.value, _coerce_str)
        ),
        placement=_parse_placement(resolve("placement", "auto", _coerce_str)),
        shuffle_islands=resolve("shuffle_islands", True, _coerce_bool),
        preset_start=resolve("preset_start", False, _coerce_bool),
        seed=resolve("seed", 0, _coerce_int),
    )


def run_evolution(
    config: EvolutionConfig,
    generations: int,
    out_dir: Path,
    render: bool = False,
    theme_name: str = "default",
) -> dict[str, object]:
    """Run ``generations`` generations, logging fitness to Parquet.

    Returns a JSON-serializable summary of the run.
    """
    if generations < 1:
        raise ValueError("generations must be >= 1")
    out_dir = Path(out_dir)
    controller = EvolutionController(config)

    theme = None
    if render:
        import matplotlib

        matplotlib.use("Agg")
        from turmite_islands.viz.render import render_snapshot

        theme = get_theme(theme_name)

    best_dominance: list[float] = []
    with GenerationLogWriter(generation_log_path(out_dir)) as log_writer:

        def on_generation(snapshot: GenerationSnapshot) -> None:
            finished = snapshot.generation - 1
            log_writer.append(finished, controller.last_fitness, controller.last_outcomes)
            best_dominance.append(max(f.dominance for f in controller.last_fitness))
            if theme is not None:
                render_snapshot(snapshot, frame_path(out_dir, finished), theme)

        scheduler = GenerationScheduler(controller, on_generation=on_generation)
        finished = scheduler.run(max_generations=generations)

    logger.info("finished %d generations; log at %s", finished, generation_log_path(out_dir))
    return {
        "generations": finished,
        "selection_policy": config.selection_policy.value,
        "num_islands": config.num_islands,
        "agents_per_island": config.agents_per_island,
        "grid_size": config.grid_size,
        "ticks_per_generation": config.ticks_per_generation,
        "seed": config.seed,
        "best_dominance": best_dominance,
        "final_fitness": [f.to_row() for f in controller.last_fitness],
        "generation_log": str(generation_log_path(out_dir)),
    }


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for evolution runs.

    Supports ``--config path/to/config.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        log_level = _parse_log_level(_resolve(args, file_cfg, "log_level", "INFO", _coerce_str))
        config = _config_from_args(args, file_cfg)
        generations = _resolve(args, file_cfg, "generations", 10, _coerce_int)
        out_dir = Path(_resolve(args, file_cfg, "out_dir", "data", _coerce_str))
        render = _resolve(args, file_cfg, "render", False, _coerce_bool)
        theme_name = _resolve(args, file_cfg, "theme", "default", _coerce_str)
        get_theme(theme_name)
    except ValueError as exc:
        parser.error(str(exc))
    if generations < 1:
        parser.error("generations must be >= 1")

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    summary = run_evolution(
        config, generations=generations, out_dir=out_dir, render=render, theme_name=theme_name
    )
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
