"""Game state resource describing the current lifecycle phase."""
from dataclasses import dataclass
from enum import Enum, auto


class GamePhase(Enum):
    """Lifecycle phases that gate which player actions are accepted."""
    IDLE = auto()
    READY = auto()
    AWAITING_RESOLUTION = auto()
    WON = auto()


@dataclass
class GameState:
    """Singleton component storing phase, move counter and game epoch."""
    phase: GamePhase = GamePhase.IDLE
    moves: int = 0
    # Bumped on every new game so stale deferred resolutions can be detected.
    generation: int = 0

    @property
    def won(self) -> bool:
        return self.phase == GamePhase.WON
