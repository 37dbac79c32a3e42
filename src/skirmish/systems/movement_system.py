from __future__ import annotations

import random
from enum import Enum, auto

from esper import World

from skirmish.components.combat_stats import CombatStats
from skirmish.components.grid_position import GridPosition
from skirmish.components.random_agent import RandomAgent
from skirmish.events.bus import EventBus, EVENT_CHARACTER_BLOCKED, EVENT_CHARACTER_MOVED
from skirmish.systems.combat_system import CombatSystem
from skirmish.utils.commands import CARDINAL_DIRECTIONS, Direction
from skirmish.utils.world_queries import character_name, get_grid, is_player, roster_characters


class CellOutcome(Enum):
    FREE = auto()
    ATTACKED = auto()
    BLOCKED = auto()


class MoveOutcome(Enum):
    SKIPPED_DEAD = auto()
    OUT_OF_BOUNDS = auto()
    MOVED = auto()
    ATTACKED = auto()
    BLOCKED = auto()


class MovementSystem:
    """Moves one character a single cell, turning collisions into attacks.

    Flow for ``resolve_turn``:
      - dead characters do nothing;
      - NPCs (RandomAgent) ignore the commanded direction and roll their own;
      - stepping off the grid is a no-op;
      - otherwise the target cell is inspected with ``cell_outcome`` and the
        character only moves when the cell is free.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        combat: CombatSystem,
        rng: random.Random | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.combat = combat
        self.random = rng or getattr(world, "random", None) or random.Random()

    def effective_direction(self, entity: int, commanded: Direction) -> Direction:
        if self.world.has_component(entity, RandomAgent):
            return self.random.choice(CARDINAL_DIRECTIONS)
        return commanded

    def resolve_turn(self, entity: int, commanded: Direction) -> MoveOutcome:
        stats = self.world.component_for_entity(entity, CombatStats)
        if stats.is_dead:
            return MoveOutcome.SKIPPED_DEAD

        direction = self.effective_direction(entity, commanded)
        position = self.world.component_for_entity(entity, GridPosition)
        dx, dy = direction.delta
        new_x, new_y = position.x + dx, position.y + dy
        if not get_grid(self.world).contains(new_x, new_y):
            return MoveOutcome.OUT_OF_BOUNDS

        outcome = self.cell_outcome(entity, new_x, new_y)
        if outcome is CellOutcome.ATTACKED:
            return MoveOutcome.ATTACKED
        if outcome is CellOutcome.BLOCKED:
            return MoveOutcome.BLOCKED

        position.x = new_x
        position.y = new_y
        self.event_bus.emit(
            EVENT_CHARACTER_MOVED,
            entity=entity,
            name=character_name(self.world, entity),
            x=new_x,
            y=new_y,
        )
        return MoveOutcome.MOVED

    def cell_outcome(self, entity: int, x: int, y: int) -> CellOutcome:
        """Inspect a cell for ``entity``; attacks a hostile occupant as a side effect.

        The first live occupant in roster order decides the outcome.
        """
        mover_is_player = is_player(self.world, entity)
        for other, position, stats in roster_characters(self.world):
            if other == entity or stats.is_dead:
                continue
            if position.x != x or position.y != y:
                continue
            if is_player(self.world, other) != mover_is_player:
                self.combat.attack(entity, other)
                return CellOutcome.ATTACKED
            self.event_bus.emit(EVENT_CHARACTER_BLOCKED, entity=entity, blocker=other)
            return CellOutcome.BLOCKED
        return CellOutcome.FREE
