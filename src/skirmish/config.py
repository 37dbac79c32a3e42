"""Game configuration passed explicitly to the world builder and roster factory."""
from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from skirmish.errors import ConfigError, ErrorKind


@dataclass(frozen=True, slots=True)
class StatRange:
    """Inclusive integer range used for enemy stat rolls."""
    minimum: int
    maximum: int

    def roll(self, rng: random.Random) -> int:
        return rng.randint(self.minimum, self.maximum)

    def __contains__(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


@dataclass(frozen=True, slots=True)
class EnemyStatRanges:
    health: StatRange = StatRange(50, 150)
    armor: StatRange = StatRange(0, 50)
    damage: StatRange = StatRange(15, 30)


@dataclass(frozen=True)
class GameConfig:
    width: int = 2
    height: int = 2
    enemy_count: int = 2
    # None places the player on a random free cell.
    player_start: tuple[int, int] | None = (0, 0)
    enemy_ranges: EnemyStatRanges = field(default_factory=EnemyStatRanges)
    save_path: Path = Path("savegame.bin")

    @property
    def free_cells(self) -> int:
        """Cells left for enemies once the player is placed."""
        return self.width * self.height - 1

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Grid size must be positive, got {self.width}x{self.height}.")
        if self.enemy_count < 0:
            raise ConfigError(f"Enemy count must not be negative, got {self.enemy_count}.")
        if self.enemy_count > self.free_cells:
            raise ConfigError(
                "Number of enemies is bigger than free cells on map "
                f"({self.enemy_count} > {self.free_cells}).",
                kind=ErrorKind.TOO_MANY_ENEMIES,
            )
        if self.player_start is not None:
            x, y = self.player_start
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ConfigError(f"Player start {self.player_start} lies outside the grid.")
        for label in ("health", "armor", "damage"):
            stat_range: StatRange = getattr(self.enemy_ranges, label)
            if stat_range.minimum > stat_range.maximum:
                raise ConfigError(
                    f"Enemy {label} range is inverted: {stat_range.minimum} > {stat_range.maximum}."
                )
        if self.enemy_ranges.armor.minimum < 0:
            raise ConfigError("Enemy armor range must not go below zero.")


def _parse_range(label: str, raw: Any) -> StatRange:
    try:
        low, high = raw
        return StatRange(int(low), int(high))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Enemy {label} range must be a [min, max] pair, got {raw!r}.") from exc


def config_from_dict(data: Mapping[str, Any]) -> GameConfig:
    """Build a config from a plain mapping; missing keys keep their defaults."""
    defaults = GameConfig()
    raw_ranges = data.get("enemy_ranges", {})
    if not isinstance(raw_ranges, Mapping):
        raise ConfigError("'enemy_ranges' must be an object.")
    ranges = EnemyStatRanges(
        health=_parse_range("health", raw_ranges["health"]) if "health" in raw_ranges else defaults.enemy_ranges.health,
        armor=_parse_range("armor", raw_ranges["armor"]) if "armor" in raw_ranges else defaults.enemy_ranges.armor,
        damage=_parse_range("damage", raw_ranges["damage"]) if "damage" in raw_ranges else defaults.enemy_ranges.damage,
    )
    start = data.get("player_start", defaults.player_start)
    if start is not None:
        try:
            start_x, start_y = start
            start = (int(start_x), int(start_y))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"'player_start' must be an [x, y] pair or null, got {start!r}.") from exc
    try:
        config = GameConfig(
            width=int(data.get("width", defaults.width)),
            height=int(data.get("height", defaults.height)),
            enemy_count=int(data.get("enemy_count", defaults.enemy_count)),
            player_start=start,
            enemy_ranges=ranges,
            save_path=Path(data.get("save_path", defaults.save_path)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid configuration value: {exc}") from exc
    config.validate()
    return config


def load_config(path: Path | str) -> GameConfig:
    """Read a JSON configuration file."""
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {config_path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Config file {config_path} must hold a JSON object.")
    return config_from_dict(payload)
