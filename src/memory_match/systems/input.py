from memory_match.components.card import Card
from memory_match.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_DOT_TAP
from memory_match.ui.layout import compute_card_layout, dot_at_point
from memory_match.utils.game_state import get_board


class InputSystem:
    """Translates left clicks on the window into dot taps."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Left button (1) only.
        if button != 1:
            return
        dot_entity = self.dot_at(x, y)
        if dot_entity is not None:
            self.event_bus.emit(EVENT_DOT_TAP, dot=dot_entity)

    def dot_at(self, x: float, y: float):
        board = get_board(self.world)
        if board is None:
            return None
        cards = [self.world.component_for_entity(ent, Card) for ent in board.card_entities]
        layout = compute_card_layout(
            self.window.width,
            self.window.height,
            board.config.number_of_cards,
            board.config.dots_per_card,
        )
        hit = dot_at_point(layout, [len(card.dot_entities) for card in cards], x, y)
        if hit is None:
            return None
        card_index, slot = hit
        return cards[card_index].dot_entities[slot]
