from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable

from esper import World

from skirmish.components.character import Character
from skirmish.components.combat_stats import CombatStats
from skirmish.components.grid import Grid
from skirmish.components.grid_position import GridPosition
from skirmish.components.player_controlled import PlayerControlled
from skirmish.components.random_agent import RandomAgent
from skirmish.components.roster import Roster
from skirmish.config import EnemyStatRanges, GameConfig
from skirmish.errors import ConfigError, ErrorKind

logger = logging.getLogger("skirmish.factories.roster")

Cell = tuple[int, int]


@dataclass(frozen=True, slots=True)
class PlayerProfile:
    """Player-entered character sheet."""
    name: str
    health: int
    armor: int
    damage: int


def random_free_cell(grid: Grid, occupied: Iterable[Cell], rng: random.Random) -> Cell:
    """Rejection-sample a uniformly random cell not in ``occupied``.

    Callers check capacity first; a full grid raises instead of spinning.
    """
    taken = set(occupied)
    if len(taken) >= grid.cell_count:
        raise ConfigError("No free cell left on the map.", kind=ErrorKind.TOO_MANY_ENEMIES)
    while True:
        cell = (rng.randrange(grid.width), rng.randrange(grid.height))
        if cell not in taken:
            return cell


def create_player(
    world: World,
    position: Cell,
    name: str,
    health: int,
    armor: int,
    damage: int,
) -> int:
    x, y = position
    return world.create_entity(
        PlayerControlled(),
        Character(name=name),
        GridPosition(x=x, y=y),
        CombatStats(health=health, armor=armor, damage=damage),
    )


def create_npc(
    world: World,
    position: Cell,
    name: str,
    health: int,
    armor: int,
    damage: int,
) -> int:
    x, y = position
    return world.create_entity(
        RandomAgent(),
        Character(name=name),
        GridPosition(x=x, y=y),
        CombatStats(health=health, armor=armor, damage=damage),
    )


def create_enemy(
    world: World,
    enemy_id: int,
    grid: Grid,
    occupied: Iterable[Cell],
    ranges: EnemyStatRanges,
    rng: random.Random,
) -> int:
    position = random_free_cell(grid, occupied, rng)
    return create_npc(
        world,
        position,
        f"Enemy#{enemy_id}",
        health=ranges.health.roll(rng),
        armor=ranges.armor.roll(rng),
        damage=ranges.damage.roll(rng),
    )


def build_roster(
    world: World,
    config: GameConfig,
    profile: PlayerProfile,
    rng: random.Random,
) -> Roster:
    """Create the player followed by ``config.enemy_count`` enemies and attach the Roster.

    Capacity is validated once up front so a crowded map fails fast.
    """
    config.validate()
    grid = Grid(width=config.width, height=config.height)
    occupied: list[Cell] = []

    if config.player_start is not None:
        start = config.player_start
    else:
        start = random_free_cell(grid, occupied, rng)
    player = create_player(world, start, profile.name, profile.health, profile.armor, profile.damage)
    occupied.append(start)
    entities = [player]

    for enemy_id in range(1, config.enemy_count + 1):
        enemy = create_enemy(world, enemy_id, grid, occupied, config.enemy_ranges, rng)
        occupied.append(world.component_for_entity(enemy, GridPosition).as_tuple())
        entities.append(enemy)

    roster = Roster(entities=entities)
    world.create_entity(roster)
    logger.debug("Built roster of %d characters on a %dx%d grid", len(entities), grid.width, grid.height)
    return roster
