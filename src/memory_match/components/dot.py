from dataclasses import dataclass


@dataclass(slots=True)
class Dot:
    """One hidden cell on a card. The owning entity id is the dot's id."""

    symbol: str
    card_entity: int
    slot: int
    revealed: bool = False
    matched: bool = False
    selected: bool = False
