# tdguard

The groundwork of a small tower defence game: a tile map read from CSV,
enemy routes traced across it, waves and balance numbers read from JSON, the
game's images, sounds, music and font loaded with pygame, and a window that
draws the map with the home on it.

## Installing

```
pip install .
```

This pulls in `pygame`.

## Data files

The game reads these files from one directory:

- `map.csv` — the tile map. Each line is a row; cells are separated by commas
  and each cell is `terrain\decoration\direction\flag`, separated by
  backslashes. Missing or unreadable fields take defaults (terrain `0`,
  decoration `-1`, direction none, flag `-1`); blank lines are skipped.
  Direction is `1` (up), `2` (down), `3` (left) or `4` (right); anything else
  means none. A flag of `0` marks the home tile; a flag above `0` marks a
  spawn point.
- `level.json` — an array of waves. Each wave may have `rewards`, `interval`
  and a `spawn_list` of events with `interval`, `point` and `enemy` (`Slim`,
  `KingSlim`, `Skeleton`, `Goblin` or `GoblinPriest`; an unknown name leaves
  the default `Slim`). A wave whose `spawn_list` is an array with no usable
  events is dropped; a file that ends up with no waves is rejected.
- `config.json` — an object that must have the sections `basic` (window
  title, width and height), `player`, `tower` (`archer`, `axeman`, `gunner`,
  each with per-level arrays `interval`, `damage`, `view_range`, `cost` of up
  to 10 entries and `upgrade_cost` of up to 9) and `enemy` (`slim`,
  `king_slim`, `skeleton`, `goblin`, `goblin_priest`). Keys are matched
  without regard to case; missing or non-numeric values keep their defaults.
- `resources/` — the images, sounds, music and font listed by
  `tdguard.resources.resource_paths()`.

## Running the game

```
tdguard [directory]
```

`directory` defaults to the current one. The game opens a window with the
configured title and size and draws the tile map, centred, with the home
tile, at up to 60 frames per second until the window is closed. If a data
file or resource is missing or malformed, it prints which step failed to
stderr and exits with status -1.

## The demo

```
tdguard-demo [directory]
```

The demo prints the name, age and pets from `test.json` and the cells of each
line of `test.csv` (or `file not exist` for a missing file), then opens a
window in which `avatar.jpg`, a translucent red circle and a caption drawn
with `ipix.ttf` follow the mouse while `music.mp3` plays.

## Using the pieces

The map, route, wave and configuration code needs no display:

```python
from tdguard.gamemap import GameMap
from tdguard.config import ConfigManager

game_map = GameMap()
game_map.load("map.csv")
print(game_map.width, game_map.height, game_map.home)
for flag, route in game_map.spawner_routes.items():
    print(flag, list(route))

config = ConfigManager()
config.load_level_config("level.json")
config.load_game_config("config.json")
print(len(config.wave_list), config.archer_template.damage)
```

`GameMap.loads`, `ConfigManager.parse_level_config` and
`ConfigManager.parse_game_config` take text instead of a path.
`GameMap.load`/`loads` raise `MapLoadError`; the `ConfigManager` loaders
raise `ConfigError`.

A `Route` starts at a spawn tile and follows each tile's direction, stopping
at the home tile, at a tile with no direction, at a tile already visited, or
at the edge of the map.

Other modules:

- `tdguard.vector2d.Vector2D` — a 2D vector with arithmetic, `dot`,
  `length`, `normalize` and `approx_zero`; vectors compare by length.
- `tdguard.tile` — `Tile`, `Direction`, `parse_tile` and `TILE_SIZE` (48).
- `tdguard.wave` — `Wave`, `SpawnEvent` and `EnemyType`.
- `tdguard.resources` — `ResID`, `ResourcesManager.load(base_dir)` and
  `ResourceError`.
- `tdguard.home.HomeManager` — the home's hit points; `decrease_hp` never
  goes below zero and plays the hurt sound if one was given.
- `tdguard.game` — `GameManager`, `InitError`, `tile_source_rect` and
  `centered_map_rect`.

## What it does not do

The game window only shows the map. Waves are loaded but no enemies are
spawned or moved, there are no towers to place or upgrade, no player, no
coins, no on-screen status and no win or loss; music and sounds are loaded
but the game never plays them.

## Tests

```
pip install .[test]
pytest
```