from __future__ import annotations

from typing import Callable

from skirmish.components.game_state import GamePhase
from skirmish.errors import ErrorKind
from skirmish.events.bus import (
    EventBus,
    EVENT_ATTACK_RESOLVED,
    EVENT_CHARACTER_DIED,
    EVENT_CHARACTER_MOVED,
    EVENT_COMMAND_REJECTED,
    EVENT_GAME_OVER,
    EVENT_PERSISTENCE_FAILED,
    EVENT_ROSTER_LOADED,
    EVENT_ROSTER_SAVED,
)

_OUTCOME_MESSAGES = {
    GamePhase.VICTORY: "VICTORY!",
    GamePhase.DEFEAT: "DEFEAT...",
}


class ConsoleSystem:
    """Narrates game events as console lines."""

    def __init__(self, event_bus: EventBus, out: Callable[[str], None] = print) -> None:
        self.event_bus = event_bus
        self.out = out
        event_bus.subscribe(EVENT_CHARACTER_MOVED, self.on_character_moved)
        event_bus.subscribe(EVENT_ATTACK_RESOLVED, self.on_attack_resolved)
        event_bus.subscribe(EVENT_CHARACTER_DIED, self.on_character_died)
        event_bus.subscribe(EVENT_COMMAND_REJECTED, self.on_command_rejected)
        event_bus.subscribe(EVENT_ROSTER_SAVED, self.on_roster_saved)
        event_bus.subscribe(EVENT_ROSTER_LOADED, self.on_roster_loaded)
        event_bus.subscribe(EVENT_PERSISTENCE_FAILED, self.on_persistence_failed)
        event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)

    def on_character_moved(self, sender, **payload) -> None:
        self.out(f"\t{payload.get('name')} is moved on {payload.get('x')} : {payload.get('y')}")

    def on_attack_resolved(self, sender, **payload) -> None:
        attacker = payload.get("attacker_name")
        target = payload.get("target_name")
        self.out(f"\t{attacker} attacks {target} on {payload.get('damage')}")
        self.out(f"\t{target}: armor is {payload.get('armor')}")
        self.out(f"\t{target}: health is {payload.get('health')}")

    def on_character_died(self, sender, **payload) -> None:
        self.out(f"\t{payload.get('name')} is dead. Rest in peace.")

    def on_command_rejected(self, sender, **payload) -> None:
        if payload.get("kind") is ErrorKind.GAME_OVER:
            self.out("The game is over.")
            return
        self.out("Bad command. Try again.")

    def on_roster_saved(self, sender, **payload) -> None:
        self.out(f"Game saved to {payload.get('path')}.")

    def on_roster_loaded(self, sender, **payload) -> None:
        self.out(f"Game loaded from {payload.get('path')} ({payload.get('count')} characters).")

    def on_persistence_failed(self, sender, **payload) -> None:
        self.out(f"{payload.get('message')}")

    def on_game_over(self, sender, **payload) -> None:
        message = _OUTCOME_MESSAGES.get(payload.get("phase"))
        if message:
            self.out(message)
