from __future__ import annotations

import logging
import random
from typing import List, Sequence

from esper import World

from memory_match.components.board import Board
from memory_match.components.board_config import BoardConfig
from memory_match.components.card import Card
from memory_match.components.dot import Dot
from memory_match.components.symbol_pool import SymbolPool
from memory_match.utils.game_state import get_symbol_pool

logger = logging.getLogger(__name__)


def build_symbol_layout(
    config: BoardConfig,
    symbols: Sequence[str],
    rng: random.Random,
) -> List[List[str]]:
    """Return the shuffled symbols of each card, in card order.

    Builds ``total_dots // match_count`` complete sets, drawing set ``i``'s
    symbol from ``symbols[i % len(symbols)]``. Remainder dots are dropped, so
    trailing cards can be short (or empty); cards are never padded.
    """
    if not symbols:
        raise ValueError("Symbol pool is empty")
    if config.match_count < 1 or config.dots_per_card < 1 or config.number_of_cards < 1:
        raise ValueError(f"Cannot lay out board for {config!r}")
    pool = SymbolPool(symbols=tuple(symbols))
    sets_needed = config.total_dots // config.match_count
    flat: List[str] = []
    for set_index in range(sets_needed):
        flat.extend([pool.symbol_for_set(set_index)] * config.match_count)
    rng.shuffle(flat)
    per_card = config.dots_per_card
    return [flat[index * per_card:(index + 1) * per_card] for index in range(config.number_of_cards)]


def clear_board(world: World) -> None:
    """Delete the current board along with all of its card and dot entities."""
    for board_entity, board in list(world.get_component(Board)):
        for card_entity in board.card_entities:
            if not world.entity_exists(card_entity):
                continue
            card = world.try_component(card_entity, Card)
            if card is not None:
                for dot_entity in card.dot_entities:
                    if world.entity_exists(dot_entity):
                        world.delete_entity(dot_entity, immediate=True)
            world.delete_entity(card_entity, immediate=True)
        world.delete_entity(board_entity, immediate=True)


def generate_board(
    world: World,
    config: BoardConfig,
    *,
    symbols: Sequence[str] | None = None,
    rng: random.Random | None = None,
) -> int:
    """Replace any existing board with a freshly shuffled one and return its entity."""
    if symbols is None:
        symbols = get_symbol_pool(world).symbols
    if rng is None:
        rng = getattr(world, "random", None) or random.Random()
    layout = build_symbol_layout(config, symbols, rng)
    clear_board(world)

    card_entities: List[int] = []
    for card_index, card_symbols in enumerate(layout):
        card_entity = world.create_entity()
        card = Card(index=card_index)
        for slot, symbol in enumerate(card_symbols):
            dot_entity = world.create_entity(Dot(symbol=symbol, card_entity=card_entity, slot=slot))
            card.dot_entities.append(dot_entity)
        world.add_component(card_entity, card)
        card_entities.append(card_entity)

    snapshot = BoardConfig(
        match_count=config.match_count,
        dots_per_card=config.dots_per_card,
        number_of_cards=config.number_of_cards,
    )
    board_entity = world.create_entity(Board(config=snapshot, card_entities=card_entities))
    logger.debug(
        "Generated board: %d cards, %d dots, %d sets",
        len(card_entities),
        sum(len(symbols_) for symbols_ in layout),
        config.total_sets,
    )
    return board_entity


def iter_dots(world: World):
    """Yield ``(dot_entity, Dot)`` pairs in board order."""
    for _, board in world.get_component(Board):
        for card_entity in board.card_entities:
            card = world.component_for_entity(card_entity, Card)
            for dot_entity in card.dot_entities:
                yield dot_entity, world.component_for_entity(dot_entity, Dot)
        return
