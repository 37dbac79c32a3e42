"""Flat binary roster format.

Each character is written as::

    int32 name_length | name bytes (UTF-8) | int32 health | int32 armor |
    int32 damage | int32 x | int32 y | uint8 is_dead | uint8 is_player

All integers are little-endian. A record whose name length is zero ends the
stream early, as does running out of bytes between records. There is no
header or version tag.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterable

from skirmish.errors import CodecError, ErrorKind

_LENGTH = struct.Struct("<i")
_BODY = struct.Struct("<iiiii??")


@dataclass(frozen=True, slots=True)
class CharacterRecord:
    name: str
    health: int
    armor: int
    damage: int
    x: int
    y: int
    is_dead: bool
    is_player: bool


def encode_roster(records: Iterable[CharacterRecord]) -> bytes:
    chunks: list[bytes] = []
    for record in records:
        name_bytes = record.name.encode("utf-8")
        if not name_bytes:
            # A zero length marks end of stream, so an unnamed character would truncate the save.
            raise CodecError(ErrorKind.INVALID_RECORD, "Cannot save a character with an empty name.")
        try:
            chunks.append(_LENGTH.pack(len(name_bytes)))
            chunks.append(name_bytes)
            chunks.append(
                _BODY.pack(
                    record.health,
                    record.armor,
                    record.damage,
                    record.x,
                    record.y,
                    record.is_dead,
                    record.is_player,
                )
            )
        except struct.error as exc:
            raise CodecError(ErrorKind.INVALID_RECORD, f"Cannot encode {record.name!r}: {exc}") from exc
    return b"".join(chunks)


def decode_roster(data: bytes) -> list[CharacterRecord]:
    records: list[CharacterRecord] = []
    offset = 0
    while offset < len(data):
        if len(data) - offset < _LENGTH.size:
            raise CodecError(ErrorKind.CORRUPT_SAVE, f"Truncated name length at byte {offset}.")
        (name_length,) = _LENGTH.unpack_from(data, offset)
        offset += _LENGTH.size
        if name_length == 0:
            break
        if name_length < 0 or offset + name_length + _BODY.size > len(data):
            raise CodecError(ErrorKind.CORRUPT_SAVE, f"Truncated or invalid record at byte {offset}.")
        try:
            name = data[offset:offset + name_length].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CodecError(ErrorKind.CORRUPT_SAVE, f"Character name is not valid UTF-8: {exc}") from exc
        offset += name_length
        health, armor, damage, x, y, is_dead, is_player = _BODY.unpack_from(data, offset)
        offset += _BODY.size
        records.append(
            CharacterRecord(
                name=name,
                health=health,
                armor=armor,
                damage=damage,
                x=x,
                y=y,
                is_dead=is_dead,
                is_player=is_player,
            )
        )
    return records
