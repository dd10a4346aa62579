import random

from memory_match.events.bus import EventBus
from memory_match.systems.board_generator import generate_board
from memory_match.systems.match_engine import (
    MatchOutcome,
    count_matched_sets,
    count_total_sets,
    is_game_won,
    progress,
    resolve,
    symbols_match,
)
from memory_match.systems.selection import clear_selection, select_dot
from memory_match.utils.game_state import get_selection
from memory_match.world import create_world
from tests.helpers import config, dot, matching_sets, mismatched_selection, snapshot_flags


def _world(match_count, dots_per_card, number_of_cards, seed=11):
    bus = EventBus()
    world = create_world(bus, rng=random.Random(seed))
    generate_board(world, config(match_count, dots_per_card, number_of_cards))
    get_selection(world).capacity = match_count
    return world


def test_symbols_match_rules():
    assert symbols_match(["a"])
    assert symbols_match(["a", "a", "a"])
    assert not symbols_match(["a", "a", "b"])
    assert not symbols_match([])


def test_matching_selection_marks_exactly_selected_dots():
    world = _world(2, 9, 2)
    pair = matching_sets(world, 2)[0]
    for entity in pair:
        select_dot(world, entity)
    before = snapshot_flags(world)

    assert resolve(world) == MatchOutcome.MATCHED

    after = snapshot_flags(world)
    for entity, flags in after.items():
        if entity in pair:
            symbol, revealed, matched, selected = flags
            assert revealed and matched and not selected
        else:
            assert flags == before[entity]


def test_mismatched_selection_hides_exactly_selected_dots():
    world = _world(3, 9, 3)
    picks = mismatched_selection(world, 3)
    for entity in picks:
        select_dot(world, entity)
    before = snapshot_flags(world)

    assert resolve(world) == MatchOutcome.NOT_MATCHED

    after = snapshot_flags(world)
    for entity, flags in after.items():
        if entity in picks:
            symbol, revealed, matched, selected = flags
            assert not revealed and not matched and not selected
        else:
            assert flags == before[entity]


def test_partial_agreement_is_not_a_match():
    world = _world(3, 9, 3)
    first_set = matching_sets(world, 3)[0]
    other = mismatched_selection(world, 2)
    stranger = next(entity for entity in other if dot(world, entity).symbol != dot(world, first_set[0]).symbol)
    for entity in (first_set[0], first_set[1], stranger):
        select_dot(world, entity)
    assert resolve(world) == MatchOutcome.NOT_MATCHED
    assert not any(dot(world, entity).matched for entity in first_set)


def test_empty_selection_resolves_without_effect():
    world = _world(2, 9, 2)
    before = snapshot_flags(world)
    assert resolve(world) == MatchOutcome.NOT_MATCHED
    assert snapshot_flags(world) == before


def test_set_counts_and_progress():
    world = _world(2, 9, 2)
    assert count_total_sets(world) == 9
    assert progress(world) == (0, 9)
    pair = matching_sets(world, 2)[0]
    for entity in pair:
        select_dot(world, entity)
    resolve(world)
    clear_selection(world)
    assert count_matched_sets(world) == 1
    assert progress(world) == (1, 9)


def test_win_only_after_last_pair():
    world = _world(2, 9, 2)
    sets = matching_sets(world, 2)
    assert len(sets) == 9
    for index, pair in enumerate(sets):
        assert not is_game_won(world)
        for entity in pair:
            assert select_dot(world, entity)
        assert resolve(world) == MatchOutcome.MATCHED
        clear_selection(world)
        assert is_game_won(world) == (index == len(sets) - 1)


def test_win_with_dropped_remainder():
    # 3 cards x 5 dots with sets of 4: 3 sets, 3 dots never generated.
    world = _world(4, 5, 3)
    sets = matching_sets(world, 4)
    assert count_total_sets(world) == 3
    for group in sets:
        for entity in group:
            select_dot(world, entity)
        resolve(world)
        clear_selection(world)
    assert is_game_won(world)


def test_no_board_is_never_won():
    world = create_world(EventBus())
    assert not is_game_won(world)
    assert progress(world) == (0, 0)
