"""Tile map loaded from a CSV file."""

from __future__ import annotations

from os import PathLike

from .route import Point, Route
from .tile import Tile, parse_tile


class MapLoadError(Exception):
    """Raised when a map file cannot be read or holds no tiles."""


def _split_fields(text: str, sep: str) -> list[str]:
    parts = text.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


class GameMap:
    """The grid of tiles, the home position and the routes from each spawn point."""

    def __init__(self) -> None:
        self._tiles: list[list[Tile]] = []
        self._home: Point = (0, 0)
        self._spawner_routes: dict[int, Route] = {}

    @property
    def tile_map(self) -> list[list[Tile]]:
        return self._tiles

    @property
    def width(self) -> int:
        return len(self._tiles[0]) if self._tiles else 0

    @property
    def height(self) -> int:
        return len(self._tiles)

    @property
    def home(self) -> Point:
        return self._home

    @property
    def spawner_routes(self) -> dict[int, Route]:
        return self._spawner_routes

    def load(self, path: str | PathLike[str]) -> None:
        """Load the map from a CSV file."""
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise MapLoadError(f"cannot read map file {path}: {exc}") from exc
        self.loads(text)

    def loads(self, text: str) -> None:
        """Load the map from CSV text; rows are lines, tiles are comma separated."""
        tiles: list[list[Tile]] = []
        for line in text.split("\n"):
            line = line.strip(" \t")
            if not line:
                continue
            tiles.append([parse_tile(cell) for cell in _split_fields(line, ",")])

        if not tiles or not tiles[0]:
            raise MapLoadError("map holds no tiles")

        self._tiles = tiles
        self._build_cache()

    def place_tower(self, index: Point) -> None:
        """Mark the tile at ``(x, y)`` as holding a tower."""
        x, y = index
        self._tiles[y][x].has_tower = True

    def _build_cache(self) -> None:
        width = self.width
        for y, row in enumerate(self._tiles):
            for x, tile in enumerate(row[:width]):
                if tile.special_flag < 0:
                    continue
                if tile.special_flag == 0:
                    self._home = (x, y)
                else:
                    self._spawner_routes[tile.special_flag] = Route(self._tiles, (x, y))