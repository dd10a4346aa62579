"""Entry point for the Memory Match prototype.

Sets up the ECS world, event bus, game controller and an Arcade window.
Press N for a new game; digits 2-5 set how many symbols make a set and
Shift+2-9 sets how many dots sit on each card.
"""
import logging

import arcade
from arcade import Window, run, set_background_color, color

from memory_match.components.board_config import BoardConfig
from memory_match.components.card import Card
from memory_match.components.dot import Dot
from memory_match.constants import DOTS_PER_CARD_RANGE, MATCH_COUNT_RANGE, WINDOW_HEIGHT, WINDOW_WIDTH
from memory_match.events.bus import EVENT_GAME_WON, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from memory_match.systems.game_controller import GameControllerSystem
from memory_match.systems.input import InputSystem
from memory_match.systems.match_engine import progress
from memory_match.ui.layout import compute_card_layout
from memory_match.utils.game_state import get_board, get_game_state
from memory_match.world import create_world

HIDDEN_COLOR = (92, 84, 180)
REVEALED_COLOR = (240, 240, 240)
MATCHED_TEXT = (40, 160, 70)
SELECTED_RING = (240, 200, 40)
CARD_COLOR = (225, 228, 240)


class MemoryMatchWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Memory Match")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        self.controller = GameControllerSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.config = BoardConfig()
        self.status = ""
        self.event_bus.subscribe(EVENT_GAME_WON, self.on_game_won)
        set_background_color(color.DARK_SLATE_BLUE)
        self.controller.new_game(self.config)

    def on_game_won(self, sender, **kwargs):
        self.status = f"You matched all sets in {kwargs.get('moves')} moves! Press N to play again."

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.N:
            self.status = ""
            self.controller.new_game(self.config)
            return
        digit = symbol - arcade.key.KEY_0
        if modifiers & arcade.key.MOD_SHIFT:
            if digit in DOTS_PER_CARD_RANGE:
                self.config = self.config.with_dots_per_card(digit)
                self.status = f"{digit} dots per card: press N to start"
            return
        if digit in MATCH_COUNT_RANGE:
            self.config = self.config.with_match_count(digit)
            self.status = f"Match {digit}: press N to start"

    def on_draw(self):
        self.clear()
        state = get_game_state(self.world)
        matched_sets, total_sets = progress(self.world)
        arcade.draw_text(
            f"Moves: {state.moves}    Progress: {matched_sets}/{total_sets} sets",
            20, self.height - 40, color.WHITE, 18,
        )
        if self.status:
            arcade.draw_text(self.status, 20, 20, color.WHITE, 14)
        board = get_board(self.world)
        if board is None:
            return
        layout = compute_card_layout(
            self.width, self.height, board.config.number_of_cards, board.config.dots_per_card
        )
        radius = layout.dot_size / 2
        for card_index, card_entity in enumerate(board.card_entities):
            left, top = layout.origins[card_index]
            arcade.draw_lbwh_rectangle_filled(
                left, top - layout.card_height, layout.card_width, layout.card_height, CARD_COLOR
            )
            card = self.world.component_for_entity(card_entity, Card)
            for slot, dot_entity in enumerate(card.dot_entities):
                dot = self.world.component_for_entity(dot_entity, Dot)
                cx, cy = layout.dot_center(card_index, slot)
                arcade.draw_circle_filled(cx, cy, radius, REVEALED_COLOR if dot.revealed else HIDDEN_COLOR)
                if dot.selected:
                    arcade.draw_circle_outline(cx, cy, radius, SELECTED_RING, 2)
                if dot.revealed:
                    # Symbol ids are opaque; show the leading word as a label.
                    label = dot.symbol.split(".")[0]
                    arcade.draw_text(
                        label, cx, cy, MATCHED_TEXT if dot.matched else color.BLUE,
                        max(8, int(radius / 2)), anchor_x="center", anchor_y="center",
                    )


def main():
    logging.basicConfig(level=logging.INFO)
    MemoryMatchWindow()
    run()

if __name__ == "__main__":
    main()
