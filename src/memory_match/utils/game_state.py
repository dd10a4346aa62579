from __future__ import annotations

from esper import World

from memory_match.components.board import Board
from memory_match.components.game_state import GamePhase, GameState
from memory_match.components.selection import Selection
from memory_match.components.symbol_pool import SymbolPool
from memory_match.events.bus import EVENT_GAME_PHASE_CHANGED, EventBus


def get_game_state(world: World) -> GameState:
    """Return the shared GameState component, creating it if absent."""
    for _, state in world.get_component(GameState):
        return state
    state = GameState()
    world.create_entity(state)
    return state


def get_selection(world: World) -> Selection:
    for _, selection in world.get_component(Selection):
        return selection
    selection = Selection()
    world.create_entity(selection)
    return selection


def get_symbol_pool(world: World) -> SymbolPool:
    for _, pool in world.get_component(SymbolPool):
        return pool
    raise RuntimeError("SymbolPool not found; build the world with create_world")


def get_board(world: World) -> Board | None:
    for _, board in world.get_component(Board):
        return board
    return None


def set_game_phase(world: World, event_bus: EventBus | None, phase: GamePhase) -> None:
    """Update the game phase and emit a change event when it differs."""
    state = get_game_state(world)
    previous_phase = state.phase
    if previous_phase == phase:
        return
    state.phase = phase
    if event_bus is not None:
        event_bus.emit(
            EVENT_GAME_PHASE_CHANGED,
            previous_phase=previous_phase,
            new_phase=phase,
        )
