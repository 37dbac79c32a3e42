from __future__ import annotations

import logging
from dataclasses import dataclass

from esper import World

from skirmish.components.combat_stats import CombatStats
from skirmish.components.game_state import GamePhase, GameState
from skirmish.errors import ErrorKind
from skirmish.events.bus import (
    EventBus,
    EVENT_COMMAND_REJECTED,
    EVENT_GAME_OVER,
    EVENT_GAME_PHASE_CHANGED,
    EVENT_TURN_RESOLVED,
    EVENT_TURN_STARTED,
)
from skirmish.systems.movement_system import MovementSystem
from skirmish.systems.persistence_system import PersistenceSystem
from skirmish.utils.commands import ControlCommand, Direction, parse_command
from skirmish.utils.world_queries import get_or_create_game_state, get_roster, is_player

logger = logging.getLogger("skirmish.systems.turn")


@dataclass(slots=True)
class CommandResult:
    phase: GamePhase
    error: ErrorKind | None = None
    direction: Direction | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TurnSystem:
    """Drives the AWAITING_COMMAND -> RESOLVING -> outcome state machine.

    Flow:
      - ``submit`` parses a command token. Directions resolve a turn; exit
        quits; save/load go to the persistence collaborator and do not
        advance the turn; anything else is rejected.
      - ``resolve`` walks the roster once in order, then evaluates the end
        condition: a dead player is a defeat, all NPCs dead is a victory.
    Domain errors come back in the CommandResult; nothing is raised.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        movement: MovementSystem,
        persistence: PersistenceSystem | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.movement = movement
        self.persistence = persistence
        get_or_create_game_state(world)

    @property
    def state(self) -> GameState:
        return get_or_create_game_state(self.world)

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    def submit(self, token: str) -> CommandResult:
        if self.phase.is_terminal:
            return self._reject(token, ErrorKind.GAME_OVER)
        command = parse_command(token)
        if command is None:
            return self._reject(token, ErrorKind.INVALID_COMMAND)
        if isinstance(command, Direction):
            return CommandResult(phase=self.resolve(command), direction=command)
        if command is ControlCommand.EXIT:
            self._set_phase(GamePhase.QUIT)
            return CommandResult(phase=self.phase)
        if self.persistence is None:
            return self._reject(token, ErrorKind.INVALID_COMMAND)
        if command is ControlCommand.SAVE:
            error = self.persistence.save()
        else:
            error = self.persistence.load()
        return CommandResult(phase=self.phase, error=error)

    def resolve(self, direction: Direction) -> GamePhase:
        if self.phase.is_terminal:
            return self.phase
        state = self.state
        self._set_phase(GamePhase.RESOLVING)
        self.event_bus.emit(EVENT_TURN_STARTED, turn=state.turn + 1, direction=direction)
        for entity in list(get_roster(self.world).entities):
            self.movement.resolve_turn(entity, direction)
        state.turn += 1
        phase = self.evaluate_outcome()
        logger.debug("Turn %d resolved (%s) -> %s", state.turn, direction.value, phase.name)
        self.event_bus.emit(EVENT_TURN_RESOLVED, turn=state.turn, phase=phase)
        return phase

    def evaluate_outcome(self) -> GamePhase:
        npc_total = 0
        npc_dead = 0
        player_dead = False
        for entity in get_roster(self.world).entities:
            stats = self.world.component_for_entity(entity, CombatStats)
            if is_player(self.world, entity):
                player_dead = player_dead or stats.is_dead
                continue
            npc_total += 1
            if stats.is_dead:
                npc_dead += 1
        if player_dead:
            phase = GamePhase.DEFEAT
        elif npc_dead == npc_total:
            phase = GamePhase.VICTORY
        else:
            phase = GamePhase.AWAITING_COMMAND
        self._set_phase(phase)
        return phase

    def _set_phase(self, phase: GamePhase) -> None:
        state = self.state
        previous = state.phase
        if previous == phase:
            return
        state.phase = phase
        self.event_bus.emit(EVENT_GAME_PHASE_CHANGED, previous_phase=previous, new_phase=phase)
        if phase.is_terminal:
            self.event_bus.emit(EVENT_GAME_OVER, phase=phase, turn=state.turn)

    def _reject(self, token: str, kind: ErrorKind) -> CommandResult:
        self.event_bus.emit(EVENT_COMMAND_REJECTED, token=token, kind=kind)
        return CommandResult(phase=self.phase, error=kind)
