"""Matplotlib rendering of generation snapshots, one panel per island."""

from __future__ import annotations

import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap

from turmite_islands.config.constants import NUM_COLORS
from turmite_islands.domain.snapshot import GenerationSnapshot, IslandSnapshot
from turmite_islands.viz.theme import DEFAULT_THEME, Theme


def _cell_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap over the cell palette."""
    cmap = ListedColormap(list(theme.cell_colors[:NUM_COLORS]))
    norm = BoundaryNorm([c - 0.5 for c in range(NUM_COLORS + 1)], cmap.N)
    return cmap, norm


def _panel_shape(n_islands: int) -> tuple[int, int]:
    """Near-square (rows, cols) layout for ``n_islands`` panels."""
    cols = math.ceil(math.sqrt(n_islands))
    rows = math.ceil(n_islands / cols)
    return rows, cols


def draw_island(ax: plt.Axes, island: IslandSnapshot, theme: Theme = DEFAULT_THEME) -> None:
    """Draw one island's cells, agents, and team fractions on ``ax``."""
    cmap, norm = _cell_cmap(theme)
    ax.imshow(island.cells, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    for team in sorted({agent.team for agent in island.agents}):
        xs = np.array([a.x for a in island.agents if a.team == team])
        ys = np.array([a.y for a in island.agents if a.team == team])
        ax.scatter(xs, ys, s=6, marker="s", color=theme.agent_colors[team], linewidths=0)
    fitness = island.fitness
    ax.set_title(
        f"Island {island.island}: {fitness.fraction_a:.2f} / {fitness.fraction_b:.2f}",
        fontsize=8,
        color=theme.title_color,
    )
    ax.set_xticks([])
    ax.set_yticks([])


def render_snapshot(
    snapshot: GenerationSnapshot, output_path: Path, theme: Theme = DEFAULT_THEME
) -> Path:
    """Render every island of ``snapshot`` into a single PNG at ``output_path``."""
    if not snapshot.islands:
        raise ValueError("snapshot has no islands to render")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    rows, cols = _panel_shape(len(snapshot.islands))
    fig, axes = plt.subplots(
        rows,
        cols,
        figsize=(2.5 * cols, 2.7 * rows),
        squeeze=False,
        facecolor=theme.figure_facecolor,
    )
    flat_axes = axes.ravel()
    for ax, island in zip(flat_axes, snapshot.islands):
        draw_island(ax, island, theme)
    for ax in flat_axes[len(snapshot.islands) :]:
        ax.axis("off")
    fig.suptitle(f"Generation {snapshot.generation}", color=theme.title_color)
    fig.tight_layout()
    fig.savefig(output_path, dpi=100, facecolor=theme.figure_facecolor)
    plt.close(fig)
    return output_path
