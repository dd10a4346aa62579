import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from memory_match.constants import (
    BOARD_MAX_WIDTH_PCT,
    CARD_GAP,
    CARD_PADDING,
    DOT_GAP,
    FOOTER_HEIGHT,
    HEADER_HEIGHT,
    MIN_DOT_SIZE,
)


def card_columns(number_of_cards: int) -> int:
    if number_of_cards <= 4:
        return max(1, number_of_cards)
    if number_of_cards <= 8:
        return 2
    if number_of_cards <= 16:
        return 3
    return 4


def dot_columns(dots_per_card: int) -> int:
    if dots_per_card <= 4:
        return 2
    if dots_per_card <= 9:
        return 3
    return 4


@dataclass(slots=True)
class CardLayout:
    dot_size: int
    card_width: float
    card_height: float
    dot_cols: int
    # (left, top) of each card in board order.
    origins: List[Tuple[float, float]]

    def dot_center(self, card_index: int, slot: int) -> Tuple[float, float]:
        left, top = self.origins[card_index]
        row, col = divmod(slot, self.dot_cols)
        step = self.dot_size + DOT_GAP
        x = left + CARD_PADDING + col * step + self.dot_size / 2
        y = top - CARD_PADDING - row * step - self.dot_size / 2
        return x, y


def compute_card_layout(window_width: int, window_height: int, number_of_cards: int, dots_per_card: int) -> CardLayout:
    """Size and place cards so the board fits between header and footer.

    Shared by rendering and click hit testing so both agree on positions.
    """
    cols = card_columns(number_of_cards)
    rows = math.ceil(max(1, number_of_cards) / cols)
    d_cols = dot_columns(dots_per_card)
    d_rows = math.ceil(max(1, dots_per_card) / d_cols)

    avail_w = window_width * BOARD_MAX_WIDTH_PCT
    avail_h = window_height - HEADER_HEIGHT - FOOTER_HEIGHT
    card_w_max = (avail_w - (cols - 1) * CARD_GAP) / cols
    card_h_max = (avail_h - (rows - 1) * CARD_GAP) / rows
    dot_by_w = (card_w_max - 2 * CARD_PADDING - (d_cols - 1) * DOT_GAP) / d_cols
    dot_by_h = (card_h_max - 2 * CARD_PADDING - (d_rows - 1) * DOT_GAP) / d_rows
    dot_size = int(min(dot_by_w, dot_by_h))
    if dot_size < MIN_DOT_SIZE:
        dot_size = MIN_DOT_SIZE

    card_w = 2 * CARD_PADDING + d_cols * dot_size + (d_cols - 1) * DOT_GAP
    card_h = 2 * CARD_PADDING + d_rows * dot_size + (d_rows - 1) * DOT_GAP
    total_w = cols * card_w + (cols - 1) * CARD_GAP
    start_x = (window_width - total_w) / 2
    board_top = window_height - HEADER_HEIGHT

    origins = []
    for index in range(number_of_cards):
        row, col = divmod(index, cols)
        left = start_x + col * (card_w + CARD_GAP)
        top = board_top - row * (card_h + CARD_GAP)
        origins.append((left, top))
    return CardLayout(dot_size=dot_size, card_width=card_w, card_height=card_h, dot_cols=d_cols, origins=origins)


def dot_at_point(layout: CardLayout, card_sizes: List[int], x: float, y: float) -> Optional[Tuple[int, int]]:
    """Return ``(card_index, slot)`` of the dot under the point, if any.

    ``card_sizes`` holds the actual dot count of each card; short cards have
    no dots in their trailing slots.
    """
    radius = layout.dot_size / 2
    for card_index, (left, top) in enumerate(layout.origins):
        if not (left <= x <= left + layout.card_width and top - layout.card_height <= y <= top):
            continue
        size = card_sizes[card_index] if card_index < len(card_sizes) else 0
        for slot in range(size):
            cx, cy = layout.dot_center(card_index, slot)
            if (x - cx) ** 2 + (y - cy) ** 2 <= radius * radius:
                return card_index, slot
        return None
    return None
