"""Map tiles and the text form they are stored in."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

TILE_SIZE = 48
"""Side of one tile in pixels."""

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


class Direction(IntEnum):
    """Direction an enemy follows when leaving a tile."""

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


@dataclass
class Tile:
    """One cell of the map."""

    terrain: int = 0
    decoration: int = -1
    # 0 marks the home, positive values mark spawn points.
    special_flag: int = -1
    has_tower: bool = False
    direction: Direction = Direction.NONE


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else -1


def _split_fields(text: str, sep: str) -> list[str]:
    parts = text.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


def parse_tile(text: str) -> Tile:
    """Parse ``terrain\\decoration\\direction\\flag``; missing or bad fields get defaults."""
    values = [_leading_int(field) for field in _split_fields(text.strip(" \t"), "\\")]

    terrain = values[0] if values and values[0] >= 0 else 0
    decoration = values[1] if len(values) >= 2 else -1
    direction = Direction.NONE
    if len(values) >= 3 and values[2] >= 0:
        try:
            direction = Direction(values[2])
        except ValueError:
            direction = Direction.NONE
    special_flag = values[3] if len(values) > 3 else -1

    return Tile(
        terrain=terrain,
        decoration=decoration,
        special_flag=special_flag,
        direction=direction,
    )