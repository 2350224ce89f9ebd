"""Domain layer: rule tables, agents, and the toroidal grid.

``SimulationInstance`` and the snapshot types depend on the metrics layer
and are imported from their own modules (``domain.instance``,
``domain.snapshot``).
"""

from turmite_islands.domain.agent import HEADING_DELTAS, Agent, Heading, Team
from turmite_islands.domain.grid import Grid
from turmite_islands.domain.rules import (
    Rule,
    RuleTable,
    generate_rule_table,
    langton_preset,
    lookup,
    random_rule,
)

__all__ = [
    "Agent",
    "Grid",
    "HEADING_DELTAS",
    "Heading",
    "Rule",
    "RuleTable",
    "Team",
    "generate_rule_table",
    "langton_preset",
    "lookup",
    "random_rule",
]
