import random
from typing import Sequence

from esper import World
from .events.bus import EventBus
from memory_match.components.game_state import GameState, GamePhase
from memory_match.components.selection import Selection
from memory_match.components.symbol_pool import SymbolPool
from memory_match.constants import DEFAULT_SYMBOLS


def create_world(
    event_bus: EventBus,
    *,
    symbols: Sequence[str] | None = None,
    rng: random.Random | None = None,
) -> World:
    """Create a world holding the singleton game resources.

    ``symbols`` is the ordered symbol pool supplied by the presentation layer;
    ``rng`` makes board layouts reproducible.
    """
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "event_bus", event_bus)

    pool = tuple(symbols) if symbols is not None else DEFAULT_SYMBOLS
    if not pool:
        raise ValueError("Symbol pool must contain at least one symbol")

    world.create_entity(
        GameState(phase=GamePhase.IDLE),
        Selection(),
        SymbolPool(symbols=pool),
    )
    return world
