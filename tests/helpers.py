from __future__ import annotations

from collections import defaultdict
from typing import Dict, List

from esper import World

from memory_match.components.board_config import BoardConfig
from memory_match.components.dot import Dot
from memory_match.systems.board_generator import iter_dots


def dots_by_symbol(world: World) -> Dict[str, List[int]]:
    """Group the current board's dot entities by symbol, in board order."""
    grouped: Dict[str, List[int]] = defaultdict(list)
    for entity, dot in iter_dots(world):
        grouped[dot.symbol].append(entity)
    return dict(grouped)


def matching_sets(world: World, match_count: int) -> List[List[int]]:
    """Split each symbol's dots into groups of ``match_count``."""
    sets: List[List[int]] = []
    for entities in dots_by_symbol(world).values():
        for start in range(0, len(entities), match_count):
            sets.append(entities[start:start + match_count])
    return sets


def mismatched_selection(world: World, size: int) -> List[int]:
    """Return ``size`` dots carrying pairwise distinct symbols."""
    picked: List[int] = []
    for entities in dots_by_symbol(world).values():
        picked.append(entities[0])
        if len(picked) == size:
            return picked
    raise AssertionError("Board does not hold enough distinct symbols")


def dot(world: World, entity: int) -> Dot:
    return world.component_for_entity(entity, Dot)


def snapshot_flags(world: World) -> Dict[int, tuple]:
    return {
        entity: (d.symbol, d.revealed, d.matched, d.selected)
        for entity, d in iter_dots(world)
    }


def config(match_count: int, dots_per_card: int, number_of_cards: int) -> BoardConfig:
    return BoardConfig(match_count=match_count, dots_per_card=dots_per_card, number_of_cards=number_of_cards)
