"""Evolution layer: populations, genetic operators, and selection strategies."""

from turmite_islands.evolution.operators import (
    crossover_rule_tables,
    crossover_team,
    mutate_rule,
    mutate_rule_table,
    mutate_team,
    tournament_select,
)
from turmite_islands.evolution.population import (
    Population,
    TeamGenome,
    preset_population,
    random_population,
)
from turmite_islands.evolution.strategies import (
    BreedingResult,
    DominanceReplacement,
    EvolutionStrategy,
    ReplacementOutcome,
    TournamentSelection,
    build_strategy,
)

__all__ = [
    "BreedingResult",
    "DominanceReplacement",
    "EvolutionStrategy",
    "Population",
    "ReplacementOutcome",
    "TeamGenome",
    "TournamentSelection",
    "build_strategy",
    "crossover_rule_tables",
    "crossover_team",
    "mutate_rule",
    "mutate_rule_table",
    "mutate_team",
    "preset_population",
    "random_population",
    "tournament_select",
]
