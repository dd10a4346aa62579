import random

from memory_match.components.card import Card
from memory_match.components.dot import Dot
from memory_match.events.bus import EventBus, EVENT_DOT_TAP, EVENT_MOUSE_PRESS
from memory_match.systems.game_controller import GameControllerSystem
from memory_match.systems.input import InputSystem
from memory_match.ui.layout import compute_card_layout
from memory_match.utils.game_state import get_board
from memory_match.world import create_world
from tests.helpers import config


class DummyWindow:
    def __init__(self, width=900, height=700):
        self.width = width
        self.height = height


def _setup():
    bus = EventBus()
    world = create_world(bus, rng=random.Random(2))
    controller = GameControllerSystem(world, bus)
    window = DummyWindow()
    InputSystem(bus, window, world)
    return bus, world, controller, window


def test_click_on_dot_taps_it():
    bus, world, controller, window = _setup()
    controller.new_game(config(2, 9, 2))
    taps = []
    bus.subscribe(EVENT_DOT_TAP, lambda s, **k: taps.append(k["dot"]))
    layout = compute_card_layout(window.width, window.height, 2, 9)
    x, y = layout.dot_center(1, 3)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    card = world.component_for_entity(get_board(world).card_entities[1], Card)
    assert taps == [card.dot_entities[3]]
    # The controller received the tap too.
    assert world.component_for_entity(card.dot_entities[3], Dot).revealed


def test_non_left_clicks_and_misses_are_ignored():
    bus, world, controller, window = _setup()
    controller.new_game(config(2, 9, 2))
    taps = []
    bus.subscribe(EVENT_DOT_TAP, lambda s, **k: taps.append(k["dot"]))
    layout = compute_card_layout(window.width, window.height, 2, 9)
    x, y = layout.dot_center(0, 0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    bus.emit(EVENT_MOUSE_PRESS, x=1, y=1, button=1)
    bus.emit(EVENT_MOUSE_PRESS, button=1)
    assert taps == []


def test_clicks_before_first_game_do_nothing():
    bus, world, controller, window = _setup()
    taps = []
    bus.subscribe(EVENT_DOT_TAP, lambda s, **k: taps.append(k["dot"]))
    bus.emit(EVENT_MOUSE_PRESS, x=110, y=536, button=1)
    assert taps == []
