import pytest

from tdguard.gamemap import GameMap, MapLoadError

MAP_TEXT = (
    "0\\-1\\4\\1,0\\-1\\4,0\\-1\\2\n"
    "\n"
    "   0,0,0\\-1\\0\\0   \n"
)


def test_loads_dimensions():
    game_map = GameMap()
    game_map.loads(MAP_TEXT)
    assert game_map.width == 3
    assert game_map.height == 2


def test_home_and_spawner_route():
    game_map = GameMap()
    game_map.loads(MAP_TEXT)
    assert game_map.home == (2, 1)
    assert list(game_map.spawner_routes) == [1]
    assert list(game_map.spawner_routes[1]) == [(0, 0), (1, 0), (2, 0), (2, 1)]


def test_empty_map_is_rejected():
    game_map = GameMap()
    with pytest.raises(MapLoadError):
        game_map.loads("  \n\t\n")


def test_failed_load_keeps_previous_map():
    game_map = GameMap()
    game_map.loads(MAP_TEXT)
    with pytest.raises(MapLoadError):
        game_map.loads("")
    assert game_map.height == 2


def test_load_from_file(tmp_path):
    path = tmp_path / "map.csv"
    path.write_text(MAP_TEXT, encoding="utf-8")
    game_map = GameMap()
    game_map.load(path)
    assert game_map.home == (2, 1)


def test_missing_file_raises(tmp_path):
    with pytest.raises(MapLoadError):
        GameMap().load(tmp_path / "absent.csv")


def test_place_tower():
    game_map = GameMap()
    game_map.loads(MAP_TEXT)
    game_map.place_tower((1, 1))
    assert game_map.tile_map[1][1].has_tower
    assert not game_map.tile_map[0][1].has_tower


def test_trailing_comma_adds_no_tile():
    game_map = GameMap()
    game_map.loads("1,2,\n3,4,\n")
    assert game_map.width == 2
    assert [tile.terrain for tile in game_map.tile_map[1]] == [3, 4]


def test_empty_map_has_zero_size():
    game_map = GameMap()
    assert (game_map.width, game_map.height) == (0, 0)