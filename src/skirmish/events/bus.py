from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, /, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# COMMANDS
# ============================================================================
EVENT_COMMAND_REJECTED = "command_rejected"    # payload: token=str, kind=ErrorKind


# ============================================================================
# TURN SYSTEM
# ============================================================================
EVENT_TURN_STARTED = "turn_started"            # payload: turn=int, direction=Direction
EVENT_TURN_RESOLVED = "turn_resolved"          # payload: turn=int, phase=GamePhase


# ============================================================================
# MOVEMENT & COMBAT
# ============================================================================
EVENT_CHARACTER_MOVED = "character_moved"      # payload: entity=int, name=str, x=int, y=int
EVENT_CHARACTER_BLOCKED = "character_blocked"  # payload: entity=int, blocker=int
EVENT_ATTACK_RESOLVED = "attack_resolved"      # payload: attacker=int, target=int, attacker_name=str, target_name=str, damage=int, armor=int, health=int, killed=bool
EVENT_CHARACTER_DIED = "character_died"        # payload: entity=int, name=str, source=int|None


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_PHASE_CHANGED = "game_phase_changed"  # payload: previous_phase=GamePhase, new_phase=GamePhase
EVENT_GAME_OVER = "game_over"                    # payload: phase=GamePhase, turn=int


# ============================================================================
# PERSISTENCE
# ============================================================================
EVENT_ROSTER_SAVED = "roster_saved"              # payload: path=Path, count=int
EVENT_ROSTER_LOADED = "roster_loaded"            # payload: path=Path, count=int
EVENT_PERSISTENCE_FAILED = "persistence_failed"  # payload: path=Path, kind=ErrorKind, message=str
