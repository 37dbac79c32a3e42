"""Error kinds shared by setup, the turn engine and persistence."""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_COMMAND = "invalid_command"
    GAME_OVER = "game_over"
    TOO_MANY_ENEMIES = "too_many_enemies"
    INVALID_CONFIG = "invalid_config"
    SAVE_FAILED = "save_failed"
    LOAD_FAILED = "load_failed"
    CORRUPT_SAVE = "corrupt_save"
    INVALID_RECORD = "invalid_record"


class SkirmishError(Exception):
    """Base error carrying an ``ErrorKind`` so callers can branch without parsing text."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class ConfigError(SkirmishError):
    """Fatal setup problem; the roster is not built."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.INVALID_CONFIG) -> None:
        super().__init__(kind, message)


class CodecError(SkirmishError):
    """Roster bytes could not be produced or parsed."""
