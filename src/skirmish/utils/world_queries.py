from __future__ import annotations

from typing import Iterable

from esper import World

from skirmish.components.character import Character
from skirmish.components.combat_stats import CombatStats
from skirmish.components.game_state import GameState
from skirmish.components.grid import Grid
from skirmish.components.grid_position import GridPosition
from skirmish.components.player_controlled import PlayerControlled
from skirmish.components.roster import Roster


def get_grid(world: World) -> Grid:
    for _, grid in world.get_component(Grid):
        return grid
    raise RuntimeError("World has no Grid component")


def get_roster(world: World) -> Roster:
    for _, roster in world.get_component(Roster):
        return roster
    raise RuntimeError("World has no Roster component")


def get_or_create_game_state(world: World) -> GameState:
    """Return the shared GameState component, creating it if absent."""
    existing = list(world.get_component(GameState))
    if existing:
        return existing[0][1]
    state = GameState()
    world.create_entity(state)
    return state


def is_player(world: World, entity: int) -> bool:
    return world.has_component(entity, PlayerControlled)


def character_name(world: World, entity: int) -> str:
    try:
        return world.component_for_entity(entity, Character).name
    except KeyError:
        return f"#{entity}"


def roster_characters(world: World) -> Iterable[tuple[int, GridPosition, CombatStats]]:
    """Yield (entity, position, stats) for every roster member in roster order."""
    for entity in list(get_roster(world).entities):
        try:
            position = world.component_for_entity(entity, GridPosition)
            stats = world.component_for_entity(entity, CombatStats)
        except KeyError:
            continue
        yield entity, position, stats
