DEFAULT_MATCH_COUNT = 2
DEFAULT_DOTS_PER_CARD = 9
DEFAULT_NUMBER_OF_CARDS = 2

# Practical ceiling on cards per board; never below the derived minimum.
MAXIMUM_CARDS = 48

# Bounds offered by the settings surface. The engine accepts any match_count >= 2
# and dots_per_card >= 1; these only limit what the player can dial in.
MATCH_COUNT_RANGE = range(2, 6)
DOTS_PER_CARD_RANGE = range(2, 10)

# Seconds a full selection stays face up before it is resolved.
RESOLUTION_DELAY = 0.8

DEFAULT_SYMBOLS = (
    "star.fill", "heart.fill", "moon.fill", "sun.max.fill",
    "leaf.fill", "flame.fill", "drop.fill", "bolt.fill", "gift.fill",
    "diamond.fill", "triangle.fill", "square.fill", "circle.fill",
    "hexagon.fill", "pentagon.fill", "rhombus.fill", "oval.fill",
    "plus.circle.fill", "minus.circle.fill", "multiply.circle.fill",
    "divide.circle.fill", "equal.circle.fill", "checkmark.circle.fill",
    "xmark.circle.fill", "questionmark.circle.fill", "exclamationmark.circle.fill",
)

# Demo window layout
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 700
HEADER_HEIGHT = 90
FOOTER_HEIGHT = 60
CARD_GAP = 20
DOT_GAP = 8
CARD_PADDING = 14
# Board may not exceed this fraction of the window width.
BOARD_MAX_WIDTH_PCT = 0.92
MIN_DOT_SIZE = 12
