"""Paths that enemies follow from a spawn point."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .tile import Direction, Tile

Point = tuple[int, int]

_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Route:
    """Tile indices walked from an origin by following tile directions."""

    def __init__(self, tile_map: Sequence[Sequence[Tile]], origin: Point) -> None:
        width = len(tile_map[0])
        height = len(tile_map)
        points: list[Point] = []
        seen: set[Point] = set()
        x, y = origin

        while 0 <= x < width and 0 <= y < height and x < len(tile_map[y]):
            if (x, y) in seen:
                break
            points.append((x, y))
            seen.add((x, y))

            tile = tile_map[y][x]
            if tile.special_flag == 0:
                break
            step = _STEPS.get(tile.direction)
            if step is None:
                break
            x, y = x + step[0], y + step[1]

        self._points = tuple(points)

    @property
    def points(self) -> tuple[Point, ...]:
        """The (x, y) tile indices in walking order."""
        return self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"Route({list(self._points)!r})"