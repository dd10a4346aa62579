from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from esper import World

from memory_match.components.board_config import BoardConfig
from memory_match.components.game_state import GamePhase, GameState
from memory_match.components.pending_resolution import PendingResolution
from memory_match.constants import RESOLUTION_DELAY
from memory_match.errors import InvalidConfiguration
from memory_match.events.bus import (
    EventBus,
    EVENT_BOARD_GENERATED,
    EVENT_DOT_REVEALED,
    EVENT_DOT_TAP,
    EVENT_DOT_TAP_IGNORED,
    EVENT_GAME_RESET,
    EVENT_GAME_STARTED,
    EVENT_GAME_WON,
    EVENT_NEW_GAME_REQUEST,
    EVENT_RESOLUTION_DISCARDED,
    EVENT_RESOLUTION_SCHEDULED,
    EVENT_SELECTION_RESOLVED,
    EVENT_TICK,
)
from memory_match.systems.board_generator import clear_board, generate_board
from memory_match.systems.match_engine import (
    MatchOutcome,
    count_total_sets,
    dot_symbol,
    is_game_won,
    resolve,
)
from memory_match.systems.selection import (
    clear_selection,
    select_dot,
    selection_is_full,
    selection_refusal,
)
from memory_match.utils.game_state import (
    get_board,
    get_game_state,
    get_selection,
    set_game_phase,
)

logger = logging.getLogger(__name__)

REASON_PHASE = "phase"


class GameControllerSystem:
    """Drives one game from new board to win.

    Phases run IDLE -> READY -> AWAITING_RESOLUTION -> READY/WON. A full
    selection is resolved after ``resolution_delay`` seconds of ticks; the
    deferred resolution is a PendingResolution entity tagged with the game
    generation, so a new game drops any resolution still in flight.
    """

    def __init__(self, world: World, event_bus: EventBus, resolution_delay: float = RESOLUTION_DELAY):
        self.world = world
        self.event_bus = event_bus
        self.resolution_delay = max(0.0, float(resolution_delay))
        self.config: Optional[BoardConfig] = None
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        self.event_bus.subscribe(EVENT_DOT_TAP, self.on_dot_tap)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def state(self) -> GameState:
        return get_game_state(self.world)

    # ------------------------------------------------------------------
    # Bus handlers
    # ------------------------------------------------------------------
    def on_new_game_request(self, sender, **kwargs):
        self.new_game(kwargs.get('config'))

    def on_dot_tap(self, sender, **kwargs):
        dot = kwargs.get('dot')
        if dot is None:
            return
        self.tap_dot(dot)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        self.tick(dt)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def new_game(self, config: BoardConfig | None = None) -> GameState:
        """Start a fresh game. Raises InvalidConfiguration instead of clamping."""
        if config is None:
            config = self.config or BoardConfig()
        if not config.is_valid():
            raise InvalidConfiguration(config)
        self._cancel_pending("new_game")
        state = self.state
        state.generation += 1
        state.moves = 0
        board_entity = generate_board(self.world, config)
        selection = get_selection(self.world)
        selection.dot_entities.clear()
        selection.capacity = config.match_count
        self.config = replace(config)
        set_game_phase(self.world, self.event_bus, GamePhase.READY)
        board = get_board(self.world)
        self.event_bus.emit(
            EVENT_BOARD_GENERATED,
            board_entity=board_entity,
            cards=list(board.card_entities) if board else [],
            config=config,
        )
        self.event_bus.emit(EVENT_GAME_STARTED, config=config, generation=state.generation)
        logger.debug("New game %d started with %r", state.generation, config)
        return state

    def reset(self) -> None:
        """Discard the current game and return to IDLE."""
        self._cancel_pending("reset")
        clear_board(self.world)
        clear_selection(self.world)
        state = self.state
        state.moves = 0
        state.generation += 1
        set_game_phase(self.world, self.event_bus, GamePhase.IDLE)
        self.event_bus.emit(EVENT_GAME_RESET)

    def tap_dot(self, dot_entity: int) -> None:
        """Reveal a dot if the game is READY; illegal taps are reported and ignored."""
        state = self.state
        if state.phase != GamePhase.READY:
            self.event_bus.emit(EVENT_DOT_TAP_IGNORED, dot=dot_entity, reason=REASON_PHASE)
            return
        reason = selection_refusal(self.world, dot_entity)
        if reason is not None:
            self.event_bus.emit(EVENT_DOT_TAP_IGNORED, dot=dot_entity, reason=reason)
            return
        select_dot(self.world, dot_entity)
        selection = list(get_selection(self.world).dot_entities)
        self.event_bus.emit(
            EVENT_DOT_REVEALED,
            dot=dot_entity,
            symbol=dot_symbol(self.world, dot_entity),
            selection=selection,
        )
        if selection_is_full(self.world):
            state.moves += 1
            set_game_phase(self.world, self.event_bus, GamePhase.AWAITING_RESOLUTION)
            self._schedule_resolution(selection)

    # ------------------------------------------------------------------
    # Deferred resolution
    # ------------------------------------------------------------------
    def tick(self, dt: float) -> None:
        pending = list(self.world.get_component(PendingResolution))
        if not pending:
            return
        for ent, resolution in pending:
            resolution.remaining -= dt
            if resolution.remaining <= 0.0:
                self._fire(ent, resolution)

    def has_pending_resolution(self) -> bool:
        return bool(self.world.get_component(PendingResolution))

    def resolve_now(self) -> MatchOutcome | None:
        """Apply any pending resolution immediately, skipping the visual delay."""
        outcome = None
        for ent, resolution in list(self.world.get_component(PendingResolution)):
            outcome = self._fire(ent, resolution)
        return outcome

    def _schedule_resolution(self, selection: list[int]) -> None:
        state = self.state
        self.world.create_entity(PendingResolution(remaining=self.resolution_delay, generation=state.generation))
        self.event_bus.emit(
            EVENT_RESOLUTION_SCHEDULED,
            dots=selection,
            delay=self.resolution_delay,
            generation=state.generation,
            moves=state.moves,
        )
        if self.resolution_delay <= 0.0:
            self.resolve_now()

    def _cancel_pending(self, reason: str) -> None:
        for ent, resolution in list(self.world.get_component(PendingResolution)):
            self.world.delete_entity(ent, immediate=True)
            logger.debug("Discarded pending resolution for game %d (%s)", resolution.generation, reason)
            self.event_bus.emit(EVENT_RESOLUTION_DISCARDED, generation=resolution.generation, reason=reason)

    def _fire(self, ent: int, resolution: PendingResolution) -> MatchOutcome | None:
        self.world.delete_entity(ent, immediate=True)
        state = self.state
        if resolution.generation != state.generation or state.phase != GamePhase.AWAITING_RESOLUTION:
            logger.debug("Dropped stale resolution for game %d", resolution.generation)
            self.event_bus.emit(EVENT_RESOLUTION_DISCARDED, generation=resolution.generation, reason="stale")
            return None
        dots = list(get_selection(self.world).dot_entities)
        symbol = dot_symbol(self.world, dots[0]) if dots else None
        outcome = resolve(self.world)
        clear_selection(self.world)
        won = outcome == MatchOutcome.MATCHED and is_game_won(self.world)
        # Phase settles before observers hear about the resolution.
        set_game_phase(self.world, self.event_bus, GamePhase.WON if won else GamePhase.READY)
        self.event_bus.emit(
            EVENT_SELECTION_RESOLVED,
            outcome=outcome,
            dots=dots,
            symbol=symbol if outcome == MatchOutcome.MATCHED else None,
            moves=state.moves,
        )
        if won:
            logger.debug("Game %d won in %d moves", state.generation, state.moves)
            self.event_bus.emit(EVENT_GAME_WON, moves=state.moves, total_sets=count_total_sets(self.world))
        return outcome
