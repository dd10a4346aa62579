from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                    # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                      # payload: x, y, button
EVENT_NEW_GAME_REQUEST = "new_game_request"            # payload: config=BoardConfig|None
EVENT_DOT_TAP = "dot_tap"                              # payload: dot=int


# ============================================================================
# BOARD & SELECTION
# ============================================================================
EVENT_BOARD_GENERATED = "board_generated"              # payload: board_entity=int, cards=list[int], config=BoardConfig
EVENT_DOT_REVEALED = "dot_revealed"                    # payload: dot=int, symbol=str, selection=list[int]
EVENT_DOT_TAP_IGNORED = "dot_tap_ignored"              # payload: dot=int, reason=str


# ============================================================================
# RESOLUTION
# ============================================================================
EVENT_RESOLUTION_SCHEDULED = "resolution_scheduled"    # payload: dots=list[int], delay=float, generation=int, moves=int
EVENT_RESOLUTION_DISCARDED = "resolution_discarded"    # payload: generation=int, reason=str
EVENT_SELECTION_RESOLVED = "selection_resolved"        # payload: outcome=MatchOutcome, dots=list[int], symbol=str|None, moves=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_STARTED = "game_started"                    # payload: config=BoardConfig, generation=int
EVENT_GAME_PHASE_CHANGED = "game_phase_changed"        # payload: previous_phase=GamePhase, new_phase=GamePhase
EVENT_GAME_WON = "game_won"                            # payload: moves=int, total_sets=int
EVENT_GAME_RESET = "game_reset"                        # payload: None
