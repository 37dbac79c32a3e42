import random

from esper import World
from skirmish.events.bus import EventBus
from skirmish.components.game_state import GameState, GamePhase
from skirmish.components.grid import Grid
from skirmish.config import GameConfig
from skirmish.constants import (
    DEFAULT_PLAYER_ARMOR,
    DEFAULT_PLAYER_DAMAGE,
    DEFAULT_PLAYER_HEALTH,
    DEFAULT_PLAYER_NAME,
)
from skirmish.factories.roster import PlayerProfile, build_roster


def create_world(
    event_bus: EventBus,
    config: GameConfig,
    profile: PlayerProfile | None = None,
    *,
    rng: random.Random | None = None,
    populate: bool = True,
) -> World:
    """Build the world: game state, grid and (unless ``populate`` is False) the roster.

    Raises ConfigError before placing anyone when the configuration cannot fit.
    """
    config.validate()
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "event_bus", event_bus)

    world.create_entity(GameState(phase=GamePhase.AWAITING_COMMAND))
    world.create_entity(Grid(width=config.width, height=config.height))

    if populate:
        if profile is None:
            profile = PlayerProfile(
                DEFAULT_PLAYER_NAME,
                DEFAULT_PLAYER_HEALTH,
                DEFAULT_PLAYER_ARMOR,
                DEFAULT_PLAYER_DAMAGE,
            )
        build_roster(world, config, profile, world.random)
    return world
