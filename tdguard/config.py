"""Game and level configuration loaded from JSON files."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from os import PathLike
from typing import Any

from .gamemap import GameMap
from .wave import EnemyType, SpawnEvent, Wave

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or has the wrong shape."""


@dataclass
class BasicTemplate:
    """Window settings."""

    window_title: str = "守卫村子"
    window_width: int = 1280
    window_height: int = 720


@dataclass
class PlayerTemplate:
    """Player movement and attack settings."""

    speed: float = 3.0
    normal_attack_interval: float = 0.5
    normal_attack_damage: float = 0.0
    skill_interval: float = 10.0
    skill_damage: float = 1.0


def _levels(first: float, count: int) -> list[float]:
    return [first] + [0.0] * (count - 1)


@dataclass
class TowerTemplate:
    """Per-level tower statistics; index 0 is the first level."""

    interval: list[float] = field(default_factory=lambda: _levels(1.0, 10))
    damage: list[float] = field(default_factory=lambda: _levels(25.0, 10))
    view_range: list[float] = field(default_factory=lambda: _levels(5.0, 10))
    cost: list[float] = field(default_factory=lambda: _levels(50.0, 10))
    upgrade_cost: list[float] = field(default_factory=lambda: _levels(75.0, 9))


@dataclass
class EnemyTemplate:
    """Statistics shared by every enemy of one kind."""

    hp: float = 100.0
    speed: float = 1.0
    damage: float = 1.0
    reward_ratio: float = 0.5
    recover_interval: float = 10.0
    recover_range: float = 0.0
    recover_intensity: float = 25.0


class _JsonObject:
    """A JSON object keeping key order; lookups ignore case and return the first match."""

    def __init__(self, pairs: list[tuple[str, Any]]) -> None:
        self.pairs = pairs

    def get(self, key: str) -> Any:
        wanted = key.lower()
        for name, value in self.pairs:
            if name.lower() == wanted:
                return value
        return None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def _decode(data: str | bytes) -> Any:
    try:
        text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        return json.loads(
            text,
            object_pairs_hook=_JsonObject,
            parse_constant=_reject_constant,
        )
    except ValueError as exc:
        raise ConfigError(f"malformed JSON: {exc}") from exc


def _read(path: str | PathLike[str]) -> bytes:
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_double(value: int | float) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _to_int(value: int | float) -> int:
    number = _to_double(value)
    if number >= _INT_MAX:
        return _INT_MAX
    if number <= _INT_MIN:
        return _INT_MIN
    return int(number)


def _number(obj: _JsonObject, key: str) -> float | None:
    value = obj.get(key)
    return _to_double(value) if _is_number(value) else None


def _apply_numbers(target: Any, obj: Any, names: tuple[str, ...]) -> None:
    if not isinstance(obj, _JsonObject):
        return
    for name in names:
        value = _number(obj, name)
        if value is not None:
            setattr(target, name, value)


def _apply_number_array(target: list[float], value: Any) -> None:
    if not isinstance(value, list):
        return
    for idx, item in enumerate(value):
        if idx >= len(target) or not _is_number(item):
            continue
        target[idx] = _to_double(item)


class ConfigManager:
    """Holds the map, the waves and every template the game reads its numbers from."""

    def __init__(self) -> None:
        self.map = GameMap()
        self.wave_list: list[Wave] = []

        self.level_archer = 0
        self.level_axeman = 0
        self.level_gunner = 0

        self.is_game_win = True
        self.is_game_over = False
        # (x, y, width, height) of the tile map on screen.
        self.rect_tile_map: tuple[int, int, int, int] = (0, 0, 0, 0)

        self.basic_template = BasicTemplate()
        self.player_template = PlayerTemplate()

        self.archer_template = TowerTemplate()
        self.axeman_template = TowerTemplate()
        self.gunner_template = TowerTemplate()

        self.slim_template = EnemyTemplate()
        self.king_slim_template = EnemyTemplate()
        self.skeleton_template = EnemyTemplate()
        self.goblin_template = EnemyTemplate()
        self.goblin_priest_template = EnemyTemplate()

        self.num_initial_hp = 10.0
        self.num_initial_coin = 100.0
        self.num_coin_per_prop = 10.0

    def load_level_config(self, path: str | PathLike[str]) -> None:
        """Read waves from a level file and append them to ``wave_list``."""
        self.parse_level_config(_read(path))

    def parse_level_config(self, data: str | bytes) -> None:
        """Parse level JSON text (an array of waves) and append the waves."""
        root = _decode(data)
        if not isinstance(root, list):
            raise ConfigError("level config must be a JSON array")

        for json_wave in root:
            if not isinstance(json_wave, _JsonObject):
                continue
            wave = self._parse_wave(json_wave)
            if wave is not None:
                self.wave_list.append(wave)

        if not self.wave_list:
            raise ConfigError("level config holds no waves")

    def load_game_config(self, path: str | PathLike[str]) -> None:
        """Read the templates from a game config file."""
        self.parse_game_config(_read(path))

    def parse_game_config(self, data: str | bytes) -> None:
        """Parse game config JSON text and fill the templates."""
        root = _decode(data)
        if not isinstance(root, _JsonObject):
            raise ConfigError("game config must be a JSON object")

        sections = {name: root.get(name) for name in ("basic", "player", "tower", "enemy")}
        for name, section in sections.items():
            if not isinstance(section, _JsonObject):
                raise ConfigError(f"game config section {name!r} is missing or not an object")

        self._parse_basic(sections["basic"])
        _apply_numbers(
            self.player_template,
            sections["player"],
            (
                "speed",
                "normal_attack_interval",
                "normal_attack_damage",
                "skill_interval",
                "skill_damage",
            ),
        )

        tower = sections["tower"]
        self._parse_tower(self.archer_template, tower.get("archer"))
        self._parse_tower(self.axeman_template, tower.get("axeman"))
        self._parse_tower(self.gunner_template, tower.get("gunner"))

        enemy = sections["enemy"]
        enemy_fields = (
            "hp",
            "speed",
            "damage",
            "reward_ratio",
            "recover_interval",
            "recover_range",
            "recover_intensity",
        )
        _apply_numbers(self.slim_template, enemy.get("slim"), enemy_fields)
        _apply_numbers(self.king_slim_template, enemy.get("king_slim"), enemy_fields)
        _apply_numbers(self.skeleton_template, enemy.get("skeleton"), enemy_fields)
        _apply_numbers(self.goblin_template, enemy.get("goblin"), enemy_fields)
        _apply_numbers(self.goblin_priest_template, enemy.get("goblin_priest"), enemy_fields)

    @staticmethod
    def _parse_wave(json_wave: _JsonObject) -> Wave | None:
        wave = Wave()
        rewards = _number(json_wave, "rewards")
        if rewards is not None:
            wave.rewards = rewards
        interval = _number(json_wave, "interval")
        if interval is not None:
            wave.interval = interval

        spawn_list = json_wave.get("spawn_list")
        if not isinstance(spawn_list, list):
            return wave

        for json_event in spawn_list:
            if not isinstance(json_event, _JsonObject):
                continue
            event = SpawnEvent()
            event_interval = _number(json_event, "interval")
            if event_interval is not None:
                event.interval = event_interval
            point = json_event.get("point")
            if _is_number(point):
                event.spawn_point = _to_int(point)
            enemy = json_event.get("enemy")
            if isinstance(enemy, str):
                try:
                    event.enemy_type = EnemyType.from_name(enemy)
                except ValueError:
                    pass
            wave.spawn_events.append(event)

        return wave if wave.spawn_events else None

    def _parse_basic(self, obj: _JsonObject) -> None:
        title = obj.get("window_title")
        if isinstance(title, str):
            self.basic_template.window_title = title
        width = obj.get("window_width")
        if _is_number(width):
            self.basic_template.window_width = _to_int(width)
        height = obj.get("window_height")
        if _is_number(height):
            self.basic_template.window_height = _to_int(height)

    @staticmethod
    def _parse_tower(template: TowerTemplate, obj: Any) -> None:
        if not isinstance(obj, _JsonObject):
            return
        _apply_number_array(template.interval, obj.get("interval"))
        _apply_number_array(template.damage, obj.get("damage"))
        _apply_number_array(template.view_range, obj.get("view_range"))
        _apply_number_array(template.cost, obj.get("cost"))
        _apply_number_array(template.upgrade_cost, obj.get("upgrade_cost"))