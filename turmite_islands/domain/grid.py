"""Square toroidal color grid with an incrementally maintained histogram.

Wrapping is the caller's job: ``get``/``set`` expect coordinates already in
``[0, size)``. Cells are held as nested lists for fast scalar access in the
tick loop; numpy arrays are produced on demand for rendering and checks.
"""

from __future__ import annotations

import numpy as np

from turmite_islands.config.constants import BACKGROUND_COLOR, NUM_COLORS


class Grid:
    """``size x size`` grid of palette colors indexed as ``cells[y][x]``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be >= 1")
        self.size = size
        self._cells: list[list[int]] = []
        self._counts: list[int] = [0] * NUM_COLORS
        self.reset()

    @property
    def area(self) -> int:
        return self.size * self.size

    def reset(self) -> None:
        """Clear every cell to background."""
        self._cells = [[BACKGROUND_COLOR] * self.size for _ in range(self.size)]
        self._counts = [0] * NUM_COLORS
        self._counts[BACKGROUND_COLOR] = self.area

    def get(self, x: int, y: int) -> int:
        return self._cells[y][x]

    def set(self, x: int, y: int, color: int) -> None:
        row = self._cells[y]
        old = row[x]
        if old == color:
            return
        row[x] = color
        self._counts[old] -= 1
        self._counts[color] += 1

    @property
    def histogram(self) -> tuple[int, ...]:
        """Cell count per palette color."""
        return tuple(self._counts)

    def count(self, color: int) -> int:
        return self._counts[color]

    def to_array(self) -> np.ndarray:
        """Return an ``(H, W)`` int8 copy of the cells."""
        return np.array(self._cells, dtype=np.int8)

    def recount(self) -> tuple[int, ...]:
        """Histogram recomputed from scratch; equals ``histogram`` at all times."""
        counts = np.bincount(self.to_array().ravel(), minlength=NUM_COLORS)
        return tuple(int(c) for c in counts)
