from dataclasses import dataclass, field
from typing import List

from memory_match.components.board_config import BoardConfig


@dataclass(slots=True)
class Board:
    """Singleton holding the cards of the current game.

    ``config`` is a snapshot taken when the board was generated.
    """
    config: BoardConfig
    card_entities: List[int] = field(default_factory=list)
