from __future__ import annotations

from typing import List

from esper import World

from memory_match.components.dot import Dot
from memory_match.utils.game_state import get_selection

REASON_UNKNOWN_DOT = "unknown_dot"
REASON_MATCHED = "matched"
REASON_REVEALED = "revealed"
REASON_SELECTION_FULL = "selection_full"


def selection_refusal(world: World, dot_entity: int) -> str | None:
    """Return why ``dot_entity`` cannot join the selection, or None if it can."""
    dot = world.try_component(dot_entity, Dot) if world.entity_exists(dot_entity) else None
    if dot is None:
        return REASON_UNKNOWN_DOT
    if dot.matched:
        return REASON_MATCHED
    if dot.revealed:
        return REASON_REVEALED
    if selection_is_full(world):
        return REASON_SELECTION_FULL
    return None


def select_dot(world: World, dot_entity: int) -> bool:
    """Reveal and select a dot. Illegal selections are a silent no-op returning False."""
    if selection_refusal(world, dot_entity) is not None:
        return False
    dot = world.component_for_entity(dot_entity, Dot)
    dot.revealed = True
    dot.selected = True
    get_selection(world).dot_entities.append(dot_entity)
    return True


def selection_is_full(world: World) -> bool:
    selection = get_selection(world)
    return len(selection.dot_entities) >= selection.capacity


def clear_selection(world: World) -> List[int]:
    """Empty the selection and return the dots it held."""
    selection = get_selection(world)
    cleared = list(selection.dot_entities)
    selection.dot_entities.clear()
    return cleared


def selected_dots(world: World) -> List[Dot]:
    return [world.component_for_entity(ent, Dot) for ent in get_selection(world).dot_entities]
