from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

from esper import World

from memory_match.components.dot import Dot
from memory_match.systems.board_generator import iter_dots
from memory_match.systems.selection import selected_dots
from memory_match.utils.game_state import get_board


class MatchOutcome(Enum):
    MATCHED = "matched"
    NOT_MATCHED = "not_matched"


def symbols_match(symbols: Iterable[str]) -> bool:
    """True when every symbol equals the first one (a single symbol always matches)."""
    symbols = list(symbols)
    if not symbols:
        return False
    first = symbols[0]
    return all(symbol == first for symbol in symbols)


def resolve(world: World) -> MatchOutcome:
    """Evaluate the current selection and update the selected dots' flags.

    Matched dots stay revealed for good; mismatched dots are hidden again.
    The selection itself is left for the caller to clear.
    """
    dots = selected_dots(world)
    if not dots:
        return MatchOutcome.NOT_MATCHED
    if symbols_match(dot.symbol for dot in dots):
        for dot in dots:
            dot.matched = True
            dot.selected = False
        return MatchOutcome.MATCHED
    for dot in dots:
        dot.revealed = False
        dot.selected = False
    return MatchOutcome.NOT_MATCHED


def count_matched_sets(world: World) -> int:
    board = get_board(world)
    if board is None:
        return 0
    matched = sum(1 for _, dot in iter_dots(world) if dot.matched)
    return matched // board.config.match_count


def count_total_sets(world: World) -> int:
    board = get_board(world)
    if board is None:
        return 0
    return board.config.total_sets


def progress(world: World) -> Tuple[int, int]:
    """Return ``(matched_sets, total_sets)`` for the current board."""
    return count_matched_sets(world), count_total_sets(world)


def is_game_won(world: World) -> bool:
    if get_board(world) is None:
        return False
    matched_sets, total_sets = progress(world)
    return matched_sets == total_sets


def dot_symbol(world: World, dot_entity: int) -> str:
    return world.component_for_entity(dot_entity, Dot).symbol
