"""Turmite agents and the per-tick rule application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from turmite_islands.config.constants import NUM_HEADINGS
from turmite_islands.domain.grid import Grid
from turmite_islands.domain.rules import RuleTable, lookup


class Heading(IntEnum):
    """Compass headings in clockwise order; a +1 turn is a right turn."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class Team(IntEnum):
    """Team identity; the value doubles as the team's territory color."""

    A = 1
    B = 2


# (dx, dy) per heading; y grows downward.
HEADING_DELTAS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass
class Agent:
    """One mobile turmite. Position and heading change every tick."""

    x: int
    y: int
    heading: int
    team: Team
    rules: RuleTable
    state: int = 0

    def step(self, grid: Grid) -> bool:
        """Apply one tick of the turmite rule on ``grid``.

        Returns ``False`` when the rule table has no entry for the observed
        (color, state) pair; the agent then leaves the grid untouched and only
        re-wraps its coordinates.
        """
        size = grid.size
        rule = lookup(self.rules, grid.get(self.x, self.y), self.state)
        if rule is None:
            self.x %= size
            self.y %= size
            return False

        self.heading = (self.heading + rule.turn) % NUM_HEADINGS
        grid.set(self.x, self.y, rule.new_color)
        self.state = rule.new_state

        dx, dy = HEADING_DELTAS[self.heading]
        self.x = (self.x + dx) % size
        self.y = (self.y + dy) % size
        return True
