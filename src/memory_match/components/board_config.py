from __future__ import annotations

import math
from dataclasses import dataclass, replace

from memory_match.constants import (
    DEFAULT_DOTS_PER_CARD,
    DEFAULT_MATCH_COUNT,
    DEFAULT_NUMBER_OF_CARDS,
    MAXIMUM_CARDS,
)


@dataclass(slots=True)
class BoardConfig:
    """Player-chosen board parameters and the geometry derived from them.

    Values outside the valid range are representable; ``is_valid`` reports them
    and the game controller refuses to start a game with them.
    """

    match_count: int = DEFAULT_MATCH_COUNT
    dots_per_card: int = DEFAULT_DOTS_PER_CARD
    number_of_cards: int = DEFAULT_NUMBER_OF_CARDS

    @property
    def minimum_cards(self) -> int:
        # With fewer dots per card than the set size, every card holds at most one dot of the set.
        if self.match_count > self.dots_per_card:
            return self.match_count
        return max(2, math.ceil(self.match_count * 2 / max(1, self.dots_per_card)))

    @property
    def maximum_cards(self) -> int:
        return max(self.minimum_cards, MAXIMUM_CARDS)

    @property
    def card_range(self) -> range:
        """Inclusive span of allowed card counts as a ``range``."""
        return range(self.minimum_cards, self.maximum_cards + 1)

    @property
    def total_dots(self) -> int:
        return self.number_of_cards * self.dots_per_card

    @property
    def total_sets(self) -> int:
        if self.match_count <= 0:
            return 0
        return self.total_dots // self.match_count

    @property
    def images_needed(self) -> int:
        return self.match_count * self.minimum_cards

    def is_valid(self) -> bool:
        if self.match_count < 2 or self.dots_per_card < 1:
            return False
        return self.minimum_cards <= self.number_of_cards <= self.maximum_cards

    def validate_and_adjust(self) -> None:
        """Clamp ``number_of_cards`` into ``card_range``."""
        lower = self.minimum_cards
        upper = self.maximum_cards
        if self.number_of_cards < lower:
            self.number_of_cards = lower
        elif self.number_of_cards > upper:
            self.number_of_cards = upper

    def with_match_count(self, match_count: int) -> BoardConfig:
        edited = replace(self, match_count=match_count)
        edited.validate_and_adjust()
        return edited

    def with_dots_per_card(self, dots_per_card: int) -> BoardConfig:
        edited = replace(self, dots_per_card=dots_per_card)
        edited.validate_and_adjust()
        return edited

    def with_number_of_cards(self, number_of_cards: int) -> BoardConfig:
        return replace(self, number_of_cards=number_of_cards)


def configure(match_count: int, dots_per_card: int, number_of_cards: int) -> BoardConfig:
    """Build a config from raw settings without adjusting it."""
    return BoardConfig(
        match_count=match_count,
        dots_per_card=dots_per_card,
        number_of_cards=number_of_cards,
    )
