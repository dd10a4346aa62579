"""Surface consumed by presentation layers.

A front end builds the engine with ``build_game``, starts games with
``controller.new_game(configure(...))``, forwards taps to
``controller.tap_dot`` and ticks as ``EVENT_TICK``, and observes play through
the ``on_*`` hooks. Hook callbacks follow blinker's ``(sender, **payload)``
receiver signature.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Sequence

from esper import World

from memory_match.components.board_config import BoardConfig, configure
from memory_match.constants import RESOLUTION_DELAY
from memory_match.errors import InvalidConfiguration
from memory_match.events.bus import (
    EventBus,
    EVENT_GAME_WON,
    EVENT_RESOLUTION_SCHEDULED,
    EVENT_SELECTION_RESOLVED,
)
from memory_match.systems.game_controller import GameControllerSystem
from memory_match.world import create_world

__all__ = [
    "BoardConfig",
    "GameSession",
    "InvalidConfiguration",
    "build_game",
    "configure",
    "on_resolution_scheduled",
    "on_resolved",
    "on_win",
]


@dataclass
class GameSession:
    event_bus: EventBus
    world: World
    controller: GameControllerSystem


def build_game(
    *,
    symbols: Sequence[str] | None = None,
    rng: random.Random | None = None,
    resolution_delay: float = RESOLUTION_DELAY,
    event_bus: EventBus | None = None,
) -> GameSession:
    bus = event_bus or EventBus()
    world = create_world(bus, symbols=symbols, rng=rng)
    controller = GameControllerSystem(world, bus, resolution_delay=resolution_delay)
    return GameSession(event_bus=bus, world=world, controller=controller)


def on_resolution_scheduled(event_bus: EventBus, callback: Callable) -> None:
    event_bus.subscribe(EVENT_RESOLUTION_SCHEDULED, callback)


def on_resolved(event_bus: EventBus, callback: Callable) -> None:
    event_bus.subscribe(EVENT_SELECTION_RESOLVED, callback)


def on_win(event_bus: EventBus, callback: Callable) -> None:
    event_bus.subscribe(EVENT_GAME_WON, callback)
