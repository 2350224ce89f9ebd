"""Turmite rule alphabet and fixed-size rule tables.

A rule table is a tuple of rows indexed by the observed cell color; each row
is a tuple indexed by the agent's internal state. Entries may be ``None`` and
rows may be short: crossover can produce tables that under-specify rarely
seen cells, and lookups treat those gaps as misses rather than errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import TypeAlias

from turmite_islands.config.constants import BACKGROUND_COLOR, NUM_COLORS, NUM_STATES, TURN_CHOICES


@dataclass(frozen=True)
class Rule:
    """Action for one (cell color, internal state) observation."""

    turn: int
    new_color: int
    new_state: int = 0

    def __post_init__(self) -> None:
        if self.turn not in TURN_CHOICES:
            raise ValueError("turn must be -1 or +1")
        if not 0 <= self.new_color < NUM_COLORS:
            raise ValueError(f"new_color must be in [0, {NUM_COLORS})")
        if self.new_state < 0:
            raise ValueError("new_state must be >= 0")


RuleRow: TypeAlias = tuple[Rule | None, ...]
RuleTable: TypeAlias = tuple[RuleRow, ...]
"""``table[color][state] -> Rule | None``."""


def lookup(table: RuleTable, color: int, state: int) -> Rule | None:
    """Return the rule for (color, state) or ``None`` when the table has no entry."""
    if color >= len(table):
        return None
    row = table[color]
    if state >= len(row):
        return None
    return row[state]


def random_rule(rng: Random) -> Rule:
    """Draw one rule uniformly from the alphabet, internal state fixed at 0."""
    return Rule(turn=rng.choice(TURN_CHOICES), new_color=rng.randrange(NUM_COLORS), new_state=0)


def generate_rule_table(rng: Random) -> RuleTable:
    """Generate a complete random rule table covering every color and state."""
    return tuple(
        tuple(random_rule(rng) for _ in range(NUM_STATES)) for _ in range(NUM_COLORS)
    )


def langton_preset(team_color: int) -> RuleTable:
    """Hand-written territorial rule table for one team.

    On background the agent turns right and paints its own color; on any
    painted cell it turns left and erases it.
    """
    if not 0 < team_color < NUM_COLORS:
        raise ValueError("team_color must be a non-background palette color")
    table: list[RuleRow] = []
    for color in range(NUM_COLORS):
        if color == BACKGROUND_COLOR:
            rule = Rule(turn=1, new_color=team_color, new_state=0)
        else:
            rule = Rule(turn=-1, new_color=BACKGROUND_COLOR, new_state=0)
        table.append((rule,))
    return tuple(table)

