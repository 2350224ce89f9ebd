"""Territory fitness derived from a grid's color histogram.

Two interchangeable team-score policies are supported: raw tile counts, and
dominance fractions normalized over painted (non-background) tiles. An
island's dominance score ``|fraction_a - fraction_b|`` measures how
lopsided its split was, independent of which team won.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from turmite_islands.config.constants import BACKGROUND_COLOR
from turmite_islands.config.types import FitnessPolicy
from turmite_islands.domain.agent import Team


def dominance_fractions(team_a_tiles: int, team_b_tiles: int) -> tuple[float, float]:
    """Return each team's share of painted tiles, ``(0.0, 0.0)`` if none are painted."""
    total = team_a_tiles + team_b_tiles
    if total == 0:
        return 0.0, 0.0
    return team_a_tiles / total, team_b_tiles / total


@dataclass(frozen=True)
class IslandFitness:
    """Territory outcome of one island at the end of a generation."""

    team_a_tiles: int = 0
    team_b_tiles: int = 0
    background_tiles: int = 0

    @classmethod
    def from_histogram(cls, histogram: Sequence[int]) -> IslandFitness:
        return cls(
            team_a_tiles=int(histogram[Team.A]),
            team_b_tiles=int(histogram[Team.B]),
            background_tiles=int(histogram[BACKGROUND_COLOR]),
        )

    @property
    def fraction_a(self) -> float:
        return dominance_fractions(self.team_a_tiles, self.team_b_tiles)[0]

    @property
    def fraction_b(self) -> float:
        return dominance_fractions(self.team_a_tiles, self.team_b_tiles)[1]

    @property
    def dominance(self) -> float:
        fraction_a, fraction_b = dominance_fractions(self.team_a_tiles, self.team_b_tiles)
        return abs(fraction_a - fraction_b)

    def tiles(self, team: Team) -> int:
        return self.team_a_tiles if team == Team.A else self.team_b_tiles

    def score(self, team: Team, policy: FitnessPolicy) -> float:
        """Team score under the given policy."""
        if policy == FitnessPolicy.RAW:
            return float(self.tiles(team))
        return self.fraction_a if team == Team.A else self.fraction_b

    def to_row(self) -> dict[str, int | float]:
        return {
            "team_a_tiles": self.team_a_tiles,
            "team_b_tiles": self.team_b_tiles,
            "background_tiles": self.background_tiles,
            "fraction_a": self.fraction_a,
            "fraction_b": self.fraction_b,
            "dominance": self.dominance,
        }


def dominance_scores(fitness: Sequence[IslandFitness]) -> list[float]:
    return [f.dominance for f in fitness]
