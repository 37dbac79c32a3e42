from __future__ import annotations

import random
from dataclasses import dataclass

from esper import World

from skirmish.config import GameConfig
from skirmish.events.bus import EventBus
from skirmish.factories.roster import PlayerProfile
from skirmish.systems.combat_system import CombatSystem
from skirmish.systems.movement_system import MovementSystem
from skirmish.systems.persistence_system import PersistenceSystem
from skirmish.systems.turn_system import TurnSystem
from skirmish.world import create_world


@dataclass
class GameSession:
    """A populated world together with the systems that drive it."""
    world: World
    event_bus: EventBus
    combat: CombatSystem
    movement: MovementSystem
    persistence: PersistenceSystem
    turns: TurnSystem


def create_session(
    config: GameConfig,
    profile: PlayerProfile,
    *,
    event_bus: EventBus | None = None,
    rng: random.Random | None = None,
) -> GameSession:
    bus = event_bus or EventBus()
    rng = rng or random.Random()
    world = create_world(bus, config, profile, rng=rng)
    combat = CombatSystem(world, bus)
    movement = MovementSystem(world, bus, combat, rng=rng)
    persistence = PersistenceSystem(world, bus, config.save_path)
    turns = TurnSystem(world, bus, movement, persistence)
    return GameSession(
        world=world,
        event_bus=bus,
        combat=combat,
        movement=movement,
        persistence=persistence,
        turns=turns,
    )
