from __future__ import annotations

import logging
from pathlib import Path

from esper import World

from skirmish.components.character import Character
from skirmish.components.combat_stats import CombatStats
from skirmish.components.grid_position import GridPosition
from skirmish.errors import CodecError, ErrorKind
from skirmish.events.bus import (
    EventBus,
    EVENT_PERSISTENCE_FAILED,
    EVENT_ROSTER_LOADED,
    EVENT_ROSTER_SAVED,
)
from skirmish.factories.roster import create_npc, create_player
from skirmish.persistence.codec import CharacterRecord, decode_roster, encode_roster
from skirmish.utils.world_queries import get_grid, get_roster, is_player

logger = logging.getLogger("skirmish.systems.persistence")


def roster_problem(records: list[CharacterRecord]) -> str | None:
    """Describe why ``records`` cannot form a playable roster, or return None.

    An empty roster is accepted. Otherwise exactly one player is required and
    no two live characters may share a cell.
    """
    if not records:
        return None
    players = sum(1 for record in records if record.is_player)
    if players != 1:
        return f"Save holds {players} players, expected exactly one."
    live_cells: dict[tuple[int, int], str] = {}
    for record in records:
        if record.is_dead:
            continue
        cell = (record.x, record.y)
        if cell in live_cells:
            return f"{record.name} and {live_cells[cell]} both stand on {record.x} : {record.y}."
        live_cells[cell] = record.name
    return None


class PersistenceSystem:
    """Saves and restores the roster to a binary file.

    Failures never raise: they are reported through EVENT_PERSISTENCE_FAILED
    and returned as an ErrorKind. A failed load leaves the roster untouched and
    a failed encode leaves the previous save file untouched.
    """

    def __init__(self, world: World, event_bus: EventBus, save_path: Path | str) -> None:
        self.world = world
        self.event_bus = event_bus
        self.save_path = Path(save_path)

    def snapshot(self) -> list[CharacterRecord]:
        records: list[CharacterRecord] = []
        for entity in get_roster(self.world).entities:
            stats = self.world.component_for_entity(entity, CombatStats)
            position = self.world.component_for_entity(entity, GridPosition)
            records.append(
                CharacterRecord(
                    name=self.world.component_for_entity(entity, Character).name,
                    health=stats.health,
                    armor=stats.armor,
                    damage=stats.damage,
                    x=position.x,
                    y=position.y,
                    is_dead=stats.is_dead,
                    is_player=is_player(self.world, entity),
                )
            )
        return records

    def save(self) -> ErrorKind | None:
        try:
            payload = encode_roster(self.snapshot())
        except CodecError as exc:
            return self._fail(exc.kind, str(exc))
        try:
            self.save_path.parent.mkdir(parents=True, exist_ok=True)
            with self.save_path.open("wb") as handle:
                handle.write(payload)
        except OSError as exc:
            return self._fail(ErrorKind.SAVE_FAILED, f"Could not write {self.save_path}: {exc}")
        count = len(get_roster(self.world))
        logger.info("Saved %d characters to %s", count, self.save_path)
        self.event_bus.emit(EVENT_ROSTER_SAVED, path=self.save_path, count=count)
        return None

    def load(self) -> ErrorKind | None:
        try:
            with self.save_path.open("rb") as handle:
                data = handle.read()
        except OSError as exc:
            return self._fail(ErrorKind.LOAD_FAILED, f"Could not read {self.save_path}: {exc}")
        try:
            records = decode_roster(data)
        except CodecError as exc:
            return self._fail(exc.kind, str(exc))
        grid = get_grid(self.world)
        for record in records:
            if not grid.contains(record.x, record.y):
                return self._fail(
                    ErrorKind.CORRUPT_SAVE,
                    f"{record.name} at {record.x} : {record.y} lies outside the grid.",
                )
            if record.is_dead != (record.health <= 0):
                return self._fail(
                    ErrorKind.CORRUPT_SAVE,
                    f"{record.name} has health {record.health} but is_dead={record.is_dead}.",
                )
        problem = roster_problem(records)
        if problem:
            return self._fail(ErrorKind.CORRUPT_SAVE, problem)
        self.restore(records)
        logger.info("Loaded %d characters from %s", len(records), self.save_path)
        self.event_bus.emit(EVENT_ROSTER_LOADED, path=self.save_path, count=len(records))
        return None

    def restore(self, records: list[CharacterRecord]) -> None:
        """Replace every roster character with entities built from ``records``."""
        roster = get_roster(self.world)
        for entity in roster.entities:
            self.world.delete_entity(entity, immediate=True)
        entities: list[int] = []
        for record in records:
            factory = create_player if record.is_player else create_npc
            entities.append(
                factory(
                    self.world,
                    (record.x, record.y),
                    record.name,
                    record.health,
                    record.armor,
                    record.damage,
                )
            )
        roster.entities = entities

    def _fail(self, kind: ErrorKind, message: str) -> ErrorKind:
        logger.warning("%s: %s", kind.value, message)
        self.event_bus.emit(
            EVENT_PERSISTENCE_FAILED,
            path=self.save_path,
            kind=kind,
            message=message,
        )
        return kind
