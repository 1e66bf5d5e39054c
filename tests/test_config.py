import json

import pytest

from tdguard.config import (
    BasicTemplate,
    ConfigError,
    ConfigManager,
    EnemyTemplate,
    PlayerTemplate,
    TowerTemplate,
)
from tdguard.wave import EnemyType

LEVEL = [
    {
        "rewards": 100,
        "interval": 5,
        "spawn_list": [
            {"interval": 1.5, "point": 1, "enemy": "Slim"},
            {"interval": 2, "point": 2, "enemy": "KingSlim"},
            {"interval": 0.5, "point": 3, "enemy": "Skeleton"},
            {"interval": 0.5, "point": 1, "enemy": "Goblin"},
            {"interval": 0.5, "point": 2, "enemy": "GoblinPriest"},
        ],
    },
    {"rewards": 50, "interval": 3, "spawn_list": [{"point": 4, "enemy": "Goblin"}]},
]

GAME = {
    "basic": {"window_title": "Village", "window_width": 800, "window_height": 600},
    "player": {
        "speed": 4,
        "normal_attack_interval": 0.25,
        "normal_attack_damage": 7,
        "skill_interval": 12,
        "skill_damage": 3,
    },
    "tower": {
        "archer": {
            "interval": [1, 0.9, 0.8],
            "damage": [10, 12, 14, 16, 18, 20, 22, 24, 25, 25],
            "view_range": [5, 5.5],
            "cost": [50],
            "upgrade_cost": [75, 80],
        },
        "axeman": {"damage": [30]},
        "gunner": {"cost": [150]},
    },
    "enemy": {
        "slim": {"hp": 120, "speed": 1.5},
        "king_slim": {"hp": 500, "recover_range": 2},
        "skeleton": {"damage": 3},
        "goblin": {"reward_ratio": 0.8},
        "goblin_priest": {"recover_interval": 4, "recover_intensity": 30},
    },
}


def test_tower_template_defaults_fill_only_first_level():
    tpl = TowerTemplate()
    assert tpl.interval == [1.0] + [0.0] * 9
    assert tpl.damage == [25.0] + [0.0] * 9
    assert tpl.view_range == [5.0] + [0.0] * 9
    assert tpl.cost == [50.0] + [0.0] * 9
    assert tpl.upgrade_cost == [75.0] + [0.0] * 8


def test_other_template_defaults():
    assert BasicTemplate() == BasicTemplate("守卫村子", 1280, 720)
    assert PlayerTemplate().speed == 3
    assert EnemyTemplate().recover_intensity == 25


def test_parse_level_config_reads_waves():
    config = ConfigManager()
    config.parse_level_config(json.dumps(LEVEL))
    assert len(config.wave_list) == 2
    first = config.wave_list[0]
    assert first.rewards == 100
    assert first.interval == 5
    assert [e.enemy_type for e in first.spawn_events] == [
        EnemyType.SLIM,
        EnemyType.KING_SLIM,
        EnemyType.SKELETON,
        EnemyType.GOBLIN,
        EnemyType.GOBLIN_PRIEST,
    ]
    assert [e.spawn_point for e in first.spawn_events] == [1, 2, 3, 1, 2]
    assert first.spawn_events[0].interval == 1.5


def test_missing_event_fields_keep_defaults():
    config = ConfigManager()
    config.parse_level_config(json.dumps(LEVEL))
    event = config.wave_list[1].spawn_events[0]
    assert event.interval == 0.0
    assert event.spawn_point == 4
    assert event.enemy_type is EnemyType.GOBLIN


def test_unknown_enemy_and_wrong_types_are_ignored():
    data = [{"rewards": "lots", "interval": True,
             "spawn_list": [{"interval": "x", "point": "y", "enemy": "Dragon"}]}]
    config = ConfigManager()
    config.parse_level_config(json.dumps(data))
    wave = config.wave_list[0]
    assert wave.rewards == 0.0
    assert wave.interval == 0.0
    event = wave.spawn_events[0]
    assert (event.interval, event.spawn_point, event.enemy_type) == (0.0, 1, EnemyType.SLIM)


def test_wave_with_empty_spawn_list_is_dropped():
    data = [{"rewards": 1, "spawn_list": []}, {"rewards": 2, "spawn_list": [{"point": 1}]}]
    config = ConfigManager()
    config.parse_level_config(json.dumps(data))
    assert [w.rewards for w in config.wave_list] == [2]


def test_wave_without_spawn_list_is_kept():
    config = ConfigManager()
    config.parse_level_config(json.dumps([{"rewards": 9}]))
    assert len(config.wave_list) == 1
    assert config.wave_list[0].spawn_events == []


def test_non_object_entries_are_skipped():
    data = [1, "wave", [], {"spawn_list": [5, {"point": 2}]}]
    config = ConfigManager()
    config.parse_level_config(json.dumps(data))
    assert len(config.wave_list) == 1
    assert [e.spawn_point for e in config.wave_list[0].spawn_events] == [2]


def test_keys_are_case_insensitive_and_first_wins():
    text = '[{"Rewards": 3, "rewards": 4, "SPAWN_LIST": [{"Point": 2}]}]'
    config = ConfigManager()
    config.parse_level_config(text)
    assert config.wave_list[0].rewards == 3
    assert config.wave_list[0].spawn_events[0].spawn_point == 2


def test_fractional_point_is_truncated():
    config = ConfigManager()
    config.parse_level_config('[{"spawn_list": [{"point": 2.9}]}]')
    assert config.wave_list[0].spawn_events[0].spawn_point == 2


def test_waves_accumulate_across_calls():
    config = ConfigManager()
    config.parse_level_config(json.dumps(LEVEL))
    config.parse_level_config(json.dumps(LEVEL))
    assert len(config.wave_list) == 4


@pytest.mark.parametrize(
    "text",
    ['{"rewards": 1}', "not json", "[]", '[{"spawn_list": []}]', "[1, 2]", "[NaN]"],
)
def test_bad_level_config_raises(text):
    with pytest.raises(ConfigError):
        ConfigManager().parse_level_config(text)


def test_load_level_config_from_file(tmp_path):
    path = tmp_path / "level.json"
    path.write_text(json.dumps(LEVEL), encoding="utf-8")
    config = ConfigManager()
    config.load_level_config(path)
    assert [w.rewards for w in config.wave_list] == [100, 50]


def test_load_level_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        ConfigManager().load_level_config(tmp_path / "absent.json")


def test_parse_game_config_fills_templates():
    config = ConfigManager()
    config.parse_game_config(json.dumps(GAME))
    assert config.basic_template == BasicTemplate("Village", 800, 600)
    assert config.player_template == PlayerTemplate(4, 0.25, 7, 12, 3)
    assert config.archer_template.damage == [10, 12, 14, 16, 18, 20, 22, 24, 25, 25]
    assert config.archer_template.interval[:3] == [1, 0.9, 0.8]
    assert config.archer_template.view_range[:2] == [5, 5.5]
    assert config.archer_template.upgrade_cost[:2] == [75, 80]
    assert config.axeman_template.damage[0] == 30
    assert config.gunner_template.cost[0] == 150
    assert config.slim_template.hp == 120
    assert config.slim_template.speed == 1.5
    assert config.king_slim_template.recover_range == 2
    assert config.skeleton_template.damage == 3
    assert config.goblin_template.reward_ratio == 0.8
    assert config.goblin_priest_template.recover_interval == 4
    assert config.goblin_priest_template.recover_intensity == 30


def test_untouched_fields_keep_defaults():
    config = ConfigManager()
    config.parse_game_config(json.dumps(GAME))
    assert config.axeman_template.interval == TowerTemplate().interval
    assert config.skeleton_template.hp == EnemyTemplate().hp
    assert config.archer_template.interval[3:] == TowerTemplate().interval[3:]


def test_number_array_skips_non_numbers_and_extra_items():
    game = json.loads(json.dumps(GAME))
    game["tower"]["gunner"] = {
        "damage": [40, "x", 60] + [1] * 20,
        "upgrade_cost": [100] * 12,
    }
    config = ConfigManager()
    config.parse_game_config(json.dumps(game))
    damage = config.gunner_template.damage
    assert len(damage) == 10
    assert damage[0] == 40
    assert damage[1] == TowerTemplate().damage[1]
    assert damage[2] == 60
    assert config.gunner_template.upgrade_cost == [100] * 9


def test_missing_enemy_entry_keeps_defaults():
    game = json.loads(json.dumps(GAME))
    del game["enemy"]["goblin"]
    game["tower"]["archer"] = "archer"
    config = ConfigManager()
    config.parse_game_config(json.dumps(game))
    assert config.goblin_template == EnemyTemplate()
    assert config.archer_template == TowerTemplate()


@pytest.mark.parametrize("section", ["basic", "player", "tower", "enemy"])
def test_missing_section_raises_and_leaves_templates(section):
    game = json.loads(json.dumps(GAME))
    del game[section]
    config = ConfigManager()
    with pytest.raises(ConfigError):
        config.parse_game_config(json.dumps(game))
    assert config.basic_template == BasicTemplate()
    assert config.slim_template == EnemyTemplate()


@pytest.mark.parametrize("section", ["basic", "player", "tower", "enemy"])
def test_section_not_object_raises(section):
    game = json.loads(json.dumps(GAME))
    game[section] = [1, 2]
    with pytest.raises(ConfigError):
        ConfigManager().parse_game_config(json.dumps(game))


@pytest.mark.parametrize("text", ["[]", "{", "3"])
def test_bad_game_config_raises(text):
    with pytest.raises(ConfigError):
        ConfigManager().parse_game_config(text)


def test_load_game_config_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_bytes(json.dumps(GAME, ensure_ascii=False).encode("utf-8"))
    config = ConfigManager()
    config.load_game_config(path)
    assert config.basic_template.window_width == 800
    assert config.slim_template.hp == 120


def test_load_game_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        ConfigManager().load_game_config(tmp_path / "nope.json")


def test_new_manager_starting_state():
    config = ConfigManager()
    assert config.wave_list == []
    assert config.map.height == 0
    assert (config.is_game_win, config.is_game_over) == (True, False)
    assert (config.num_initial_hp, config.num_initial_coin, config.num_coin_per_prop) == (10, 100, 10)