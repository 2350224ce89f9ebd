"""Per-island populations of rule tables, one per agent slot."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random

from turmite_islands.domain.agent import Team
from turmite_islands.domain.rules import RuleTable, generate_rule_table, langton_preset

TeamGenome = tuple[RuleTable, ...]
"""Rule tables of one team's agent slots, in slot order."""


@dataclass(frozen=True)
class Population:
    """Ordered rule tables; slots ``[0, team_size)`` are team A, the rest team B."""

    rule_tables: tuple[RuleTable, ...]
    team_size: int

    def __post_init__(self) -> None:
        if not 0 <= self.team_size <= len(self.rule_tables):
            raise ValueError("team_size must be within [0, len(rule_tables)]")

    def __len__(self) -> int:
        return len(self.rule_tables)

    def team(self, team: Team) -> TeamGenome:
        if team == Team.A:
            return self.rule_tables[: self.team_size]
        return self.rule_tables[self.team_size :]

    def with_team(self, team: Team, genome: TeamGenome) -> Population:
        """Return a copy with one team's slots replaced."""
        if len(genome) != len(self.team(team)):
            raise ValueError("replacement genome must keep the team's slot count")
        if team == Team.A:
            tables = tuple(genome) + self.team(Team.B)
        else:
            tables = self.team(Team.A) + tuple(genome)
        return Population(rule_tables=tables, team_size=self.team_size)


def random_population(agents: int, rng: Random) -> Population:
    """Population of fully random rule tables."""
    return Population(
        rule_tables=tuple(generate_rule_table(rng) for _ in range(agents)),
        team_size=agents // 2,
    )


def preset_population(agents: int) -> Population:
    """Population where every agent runs its team's Langton preset."""
    team_size = agents // 2
    tables = tuple(
        langton_preset(int(Team.A) if slot < team_size else int(Team.B)) for slot in range(agents)
    )
    return Population(rule_tables=tables, team_size=team_size)
