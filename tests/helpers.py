from __future__ import annotations

import random
from typing import Iterable

from esper import World

from skirmish.components.roster import Roster
from skirmish.config import GameConfig
from skirmish.events.bus import EventBus
from skirmish.factories.roster import create_npc, create_player
from skirmish.utils.commands import Direction
from skirmish.utils.world_queries import get_roster
from skirmish.world import create_world


class ScriptedRandom(random.Random):
    """Random source whose ``choice`` replays a fixed list of directions."""

    def __init__(self, choices: Iterable[Direction] = ()):
        super().__init__(0)
        self._choices = list(choices)

    def choice(self, seq):
        if self._choices:
            return self._choices.pop(0)
        return seq[0]


def make_world(
    width: int = 3,
    height: int = 3,
    bus: EventBus | None = None,
    rng: random.Random | None = None,
) -> tuple[World, EventBus]:
    """Empty world with a grid and an empty roster."""
    bus = bus or EventBus()
    config = GameConfig(width=width, height=height, enemy_count=0, player_start=None)
    world = create_world(bus, config, rng=rng or random.Random(0), populate=False)
    world.create_entity(Roster())
    return world, bus


def add_character(
    world: World,
    name: str,
    x: int,
    y: int,
    *,
    health: int = 100,
    armor: int = 0,
    damage: int = 10,
    player: bool = False,
) -> int:
    """Create a character and append it to the roster."""
    factory = create_player if player else create_npc
    entity = factory(world, (x, y), name, health, armor, damage)
    get_roster(world).entities.append(entity)
    return entity
