"""Game state resource describing where the turn engine currently is."""
from dataclasses import dataclass
from enum import Enum, auto


class GamePhase(Enum):
    """Turn engine states. VICTORY, DEFEAT and QUIT are terminal."""
    AWAITING_COMMAND = auto()
    RESOLVING = auto()
    VICTORY = auto()
    DEFEAT = auto()
    QUIT = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.VICTORY, GamePhase.DEFEAT, GamePhase.QUIT)


@dataclass
class GameState:
    """Singleton component storing the active phase and completed turn count."""
    phase: GamePhase = GamePhase.AWAITING_COMMAND
    turn: int = 0
