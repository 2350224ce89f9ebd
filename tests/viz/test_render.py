"""Tests for snapshot rendering and theme lookup."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from turmite_islands.config.types import EvolutionConfig  # noqa: E402
from turmite_islands.domain.snapshot import GenerationSnapshot  # noqa: E402
from turmite_islands.simulation.controller import EvolutionController  # noqa: E402
from turmite_islands.viz.render import _panel_shape, render_snapshot  # noqa: E402
from turmite_islands.viz.theme import DARK_THEME, DEFAULT_THEME, get_theme  # noqa: E402


def _snapshot(num_islands: int) -> GenerationSnapshot:
    config = EvolutionConfig(
        num_islands=num_islands, agents_per_island=4, grid_size=8, ticks_per_generation=10
    )
    controller = EvolutionController(config)
    controller.seed()
    controller.advance(10)
    return controller.snapshot()


def test_render_writes_png(tmp_path: Path) -> None:
    output = tmp_path / "frames" / "generation_00000.png"
    result = render_snapshot(_snapshot(3), output)
    assert result == output
    assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_with_dark_theme(tmp_path: Path) -> None:
    output = tmp_path / "dark.png"
    render_snapshot(_snapshot(1), output, DARK_THEME)
    assert output.stat().st_size > 0


def test_render_empty_snapshot_raises(tmp_path: Path) -> None:
    empty = GenerationSnapshot(generation=0, tick=0, phase="idle", islands=())
    with pytest.raises(ValueError):
        render_snapshot(empty, tmp_path / "empty.png")


@pytest.mark.parametrize(
    ("n_islands", "expected"),
    [(1, (1, 1)), (3, (2, 2)), (8, (3, 3)), (9, (3, 3)), (10, (3, 4))],
)
def test_panel_shape(n_islands: int, expected: tuple[int, int]) -> None:
    assert _panel_shape(n_islands) == expected


def test_get_theme_case_insensitive() -> None:
    assert get_theme("Default") is DEFAULT_THEME
    assert get_theme("DARK") is DARK_THEME


def test_get_theme_unknown_raises() -> None:
    with pytest.raises(ValueError, match="Unknown theme"):
        get_theme("neon")
