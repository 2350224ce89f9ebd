from turmite_islands.config.constants import (
    AGENTS_PER_ISLAND,
    BACKGROUND_COLOR,
    FLUSH_THRESHOLD,
    GRID_SIZE,
    MUTATION_RATE,
    NUM_COLORS,
    NUM_HEADINGS,
    NUM_ISLANDS,
    NUM_STATES,
    STAGNATION_THRESHOLD,
    TICKS_PER_BATCH,
    TICKS_PER_GENERATION,
    TOURNAMENT_SIZE,
    TURN_CHOICES,
)


def test_grid_size_is_positive_int() -> None:
    assert isinstance(GRID_SIZE, int) and GRID_SIZE > 1


def test_agents_split_evenly_into_teams() -> None:
    assert isinstance(AGENTS_PER_ISLAND, int) and AGENTS_PER_ISLAND >= 2
    assert AGENTS_PER_ISLAND % 2 == 0
    assert AGENTS_PER_ISLAND < GRID_SIZE * GRID_SIZE


def test_num_islands_is_positive() -> None:
    assert isinstance(NUM_ISLANDS, int) and NUM_ISLANDS > 0


def test_batch_smaller_than_generation() -> None:
    assert 0 < TICKS_PER_BATCH <= TICKS_PER_GENERATION


def test_rates_are_probabilities() -> None:
    assert 0.0 <= MUTATION_RATE <= 1.0
    assert 0.0 <= STAGNATION_THRESHOLD <= 1.0


def test_tournament_size_is_positive() -> None:
    assert isinstance(TOURNAMENT_SIZE, int) and TOURNAMENT_SIZE >= 1


def test_palette_is_background_plus_two_teams() -> None:
    assert NUM_COLORS == 3
    assert BACKGROUND_COLOR == 0


def test_rule_alphabet() -> None:
    assert TURN_CHOICES == (-1, 1)
    assert NUM_HEADINGS == 4
    assert NUM_STATES >= 1


def test_flush_threshold_is_large() -> None:
    assert isinstance(FLUSH_THRESHOLD, int) and FLUSH_THRESHOLD >= 1024
