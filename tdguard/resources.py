"""Textures, sounds, music and fonts the game loads at start-up."""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path
from os import PathLike
from types import MappingProxyType
from collections.abc import Mapping

import pygame

_FONT_SIZE = 25


class ResID(Enum):
    """Identifiers of every resource the game uses."""

    TEX_TILESET = auto()

    TEX_PLAYER = auto()
    TEX_ARCHER = auto()
    TEX_AXEMAN = auto()
    TEX_GUNNER = auto()

    TEX_SLIME = auto()
    TEX_KING_SLIME = auto()
    TEX_SKELETON = auto()
    TEX_GOBLIN = auto()
    TEX_GOBLIN_PRIEST = auto()
    TEX_SLIME_SKETCH = auto()
    TEX_KING_SLIME_SKETCH = auto()
    TEX_SKELETON_SKETCH = auto()
    TEX_GOBLIN_SKETCH = auto()
    TEX_GOBLIN_PRIEST_SKETCH = auto()

    TEX_BULLET_ARROW = auto()
    TEX_BULLET_AXE = auto()
    TEX_BULLET_SHELL = auto()

    TEX_COIN = auto()
    TEX_HOME = auto()

    TEX_EFFECT_FLASH_UP = auto()
    TEX_EFFECT_FLASH_DOWN = auto()
    TEX_EFFECT_FLASH_LEFT = auto()
    TEX_EFFECT_FLASH_RIGHT = auto()
    TEX_EFFECT_IMPACT_UP = auto()
    TEX_EFFECT_IMPACT_DOWN = auto()
    TEX_EFFECT_IMPACT_LEFT = auto()
    TEX_EFFECT_IMPACT_RIGHT = auto()
    TEX_EFFECT_EXPLODE = auto()

    TEX_UI_SELECT_CURSOR = auto()
    TEX_UI_PLACE_IDLE = auto()
    TEX_UI_PLACE_HOVERED_TOP = auto()
    TEX_UI_PLACE_HOVERED_LEFT = auto()
    TEX_UI_PLACE_HOVERED_RIGHT = auto()
    TEX_UI_UPGRADE_IDLE = auto()
    TEX_UI_UPGRADE_HOVERED_TOP = auto()
    TEX_UI_UPGRADE_HOVERED_LEFT = auto()
    TEX_UI_UPGRADE_HOVERED_RIGHT = auto()
    TEX_UI_HOME_AVATAR = auto()
    TEX_UI_PLAYER_AVATAR = auto()
    TEX_UI_HEART = auto()
    TEX_UI_COIN = auto()
    TEX_UI_GAME_OVER_BAR = auto()
    TEX_UI_WIN_TEXT = auto()
    TEX_UI_LOSS_TEXT = auto()

    SOUND_ARROW_FIRE_1 = auto()
    SOUND_ARROW_FIRE_2 = auto()
    SOUND_AXE_FIRE = auto()
    SOUND_SHELL_FIRE = auto()
    SOUND_ARROW_HIT_1 = auto()
    SOUND_ARROW_HIT_2 = auto()
    SOUND_ARROW_HIT_3 = auto()
    SOUND_AXE_HIT_1 = auto()
    SOUND_AXE_HIT_2 = auto()
    SOUND_AXE_HIT_3 = auto()
    SOUND_SHELL_HIT = auto()

    SOUND_FLASH = auto()
    SOUND_IMPACT = auto()

    SOUND_COIN = auto()
    SOUND_HOME_HURT = auto()
    SOUND_PLACE_TOWER = auto()
    SOUND_TOWER_LEVEL_UP = auto()

    SOUND_WIN = auto()
    SOUND_LOSS = auto()

    MUSIC_BGM = auto()

    FONT_MAIN = auto()


_TEXTURE_FILES: dict[ResID, str] = {
    ResID.TEX_TILESET: "resources/tileset.png",
    ResID.TEX_PLAYER: "resources/player.png",
    ResID.TEX_ARCHER: "resources/tower_archer.png",
    ResID.TEX_AXEMAN: "resources/tower_axeman.png",
    ResID.TEX_GUNNER: "resources/tower_gunner.png",
    ResID.TEX_SLIME: "resources/enemy_slime.png",
    ResID.TEX_KING_SLIME: "resources/enemy_king_slime.png",
    ResID.TEX_SKELETON: "resources/enemy_skeleton.png",
    ResID.TEX_GOBLIN: "resources/enemy_goblin.png",
    ResID.TEX_GOBLIN_PRIEST: "resources/enemy_goblin_priest.png",
    ResID.TEX_SLIME_SKETCH: "resources/enemy_slime_sketch.png",
    ResID.TEX_KING_SLIME_SKETCH: "resources/enemy_king_slime_sketch.png",
    ResID.TEX_SKELETON_SKETCH: "resources/enemy_skeleton_sketch.png",
    ResID.TEX_GOBLIN_SKETCH: "resources/enemy_goblin_sketch.png",
    ResID.TEX_GOBLIN_PRIEST_SKETCH: "resources/enemy_goblin_priest_sketch.png",
    ResID.TEX_BULLET_ARROW: "resources/bullet_arrow.png",
    ResID.TEX_BULLET_AXE: "resources/bullet_axe.png",
    ResID.TEX_BULLET_SHELL: "resources/bullet_shell.png",
    ResID.TEX_COIN: "resources/coin.png",
    ResID.TEX_HOME: "resources/home.png",
    ResID.TEX_EFFECT_FLASH_UP: "resources/effect_flash_up.png",
    ResID.TEX_EFFECT_FLASH_DOWN: "resources/effect_flash_down.png",
    ResID.TEX_EFFECT_FLASH_LEFT: "resources/effect_flash_left.png",
    ResID.TEX_EFFECT_FLASH_RIGHT: "resources/effect_flash_right.png",
    ResID.TEX_EFFECT_IMPACT_UP: "resources/effect_impact_up.png",
    ResID.TEX_EFFECT_IMPACT_DOWN: "resources/effect_impact_down.png",
    ResID.TEX_EFFECT_IMPACT_LEFT: "resources/effect_impact_left.png",
    ResID.TEX_EFFECT_IMPACT_RIGHT: "resources/effect_impact_right.png",
    ResID.TEX_EFFECT_EXPLODE: "resources/effect_explode.png",
    ResID.TEX_UI_SELECT_CURSOR: "resources/ui_select_cursor.png",
    ResID.TEX_UI_PLACE_IDLE: "resources/ui_place_idle.png",
    ResID.TEX_UI_PLACE_HOVERED_TOP: "resources/ui_place_hovered_top.png",
    ResID.TEX_UI_PLACE_HOVERED_LEFT: "resources/ui_place_hovered_left.png",
    ResID.TEX_UI_PLACE_HOVERED_RIGHT: "resources/ui_place_hovered_right.png",
    ResID.TEX_UI_UPGRADE_IDLE: "resources/ui_upgrade_idle.png",
    ResID.TEX_UI_UPGRADE_HOVERED_TOP: "resources/ui_upgrade_hovered_top.png",
    ResID.TEX_UI_UPGRADE_HOVERED_LEFT: "resources/ui_upgrade_hovered_left.png",
    ResID.TEX_UI_UPGRADE_HOVERED_RIGHT: "resources/ui_upgrade_hovered_right.png",
    ResID.TEX_UI_HOME_AVATAR: "resources/ui_home_avatar.png",
    ResID.TEX_UI_PLAYER_AVATAR: "resources/ui_player_avatar.png",
    ResID.TEX_UI_HEART: "resources/ui_heart.png",
    ResID.TEX_UI_COIN: "resources/ui_coin.png",
    ResID.TEX_UI_GAME_OVER_BAR: "resources/ui_game_over_bar.png",
    ResID.TEX_UI_WIN_TEXT: "resources/ui_win_text.png",
    ResID.TEX_UI_LOSS_TEXT: "resources/ui_loss_text.png",
}

_SOUND_FILES: dict[ResID, str] = {
    ResID.SOUND_ARROW_FIRE_1: "resources/sound_arrow_fire_1.mp3",
    ResID.SOUND_ARROW_FIRE_2: "resources/sound_arrow_fire_2.mp3",
    ResID.SOUND_AXE_FIRE: "resources/sound_axe_fire.wav",
    ResID.SOUND_SHELL_FIRE: "resources/sound_shell_fire.wav",
    ResID.SOUND_ARROW_HIT_1: "resources/sound_arrow_hit_1.mp3",
    ResID.SOUND_ARROW_HIT_2: "resources/sound_arrow_hit_2.mp3",
    ResID.SOUND_ARROW_HIT_3: "resources/sound_arrow_hit_3.mp3",
    ResID.SOUND_AXE_HIT_1: "resources/sound_axe_hit_1.mp3",
    ResID.SOUND_AXE_HIT_2: "resources/sound_axe_hit_2.mp3",
    ResID.SOUND_AXE_HIT_3: "resources/sound_axe_hit_3.mp3",
    ResID.SOUND_SHELL_HIT: "resources/sound_shell_hit.mp3",
    ResID.SOUND_FLASH: "resources/sound_flash.wav",
    ResID.SOUND_IMPACT: "resources/sound_impact.wav",
    ResID.SOUND_COIN: "resources/sound_coin.mp3",
    ResID.SOUND_HOME_HURT: "resources/sound_home_hurt.wav",
    ResID.SOUND_PLACE_TOWER: "resources/sound_place_tower.mp3",
    ResID.SOUND_TOWER_LEVEL_UP: "resources/sound_tower_level_up.mp3",
    ResID.SOUND_WIN: "resources/sound_win.wav",
    ResID.SOUND_LOSS: "resources/sound_loss.mp3",
}

_MUSIC_FILES: dict[ResID, str] = {
    ResID.MUSIC_BGM: "resources/music_bgm.mp3",
}

_FONT_FILES: dict[ResID, str] = {
    ResID.FONT_MAIN: "resources/ipix.ttf",
}


class ResourceError(Exception):
    """Raised when a resource file is missing or cannot be decoded."""


def resource_paths() -> dict[ResID, str]:
    """Return the relative file path of every resource."""
    return {**_TEXTURE_FILES, **_SOUND_FILES, **_MUSIC_FILES, **_FONT_FILES}


def _require_file(path: Path) -> None:
    if not path.is_file():
        raise ResourceError(f"resource file not found: {path}")


def _load_texture(path: Path) -> pygame.Surface:
    _require_file(path)
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise ResourceError(f"cannot load image {path}: {exc}") from exc
    if pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def _load_sound(path: Path) -> pygame.mixer.Sound:
    _require_file(path)
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, OSError) as exc:
        raise ResourceError(f"cannot load sound {path}: {exc}") from exc


def _load_font(path: Path) -> pygame.font.Font:
    _require_file(path)
    try:
        return pygame.font.Font(str(path), _FONT_SIZE)
    except (pygame.error, OSError) as exc:
        raise ResourceError(f"cannot load font {path}: {exc}") from exc


class ResourcesManager:
    """Pools of loaded resources, keyed by :class:`ResID`."""

    def __init__(self) -> None:
        self._textures: dict[ResID, pygame.Surface] = {}
        self._sounds: dict[ResID, pygame.mixer.Sound] = {}
        self._music: dict[ResID, Path] = {}
        self._fonts: dict[ResID, pygame.font.Font] = {}

    @property
    def textures(self) -> Mapping[ResID, pygame.Surface]:
        return MappingProxyType(self._textures)

    @property
    def sounds(self) -> Mapping[ResID, pygame.mixer.Sound]:
        return MappingProxyType(self._sounds)

    @property
    def music(self) -> Mapping[ResID, Path]:
        """Paths of music tracks, streamed by the mixer when played."""
        return MappingProxyType(self._music)

    @property
    def fonts(self) -> Mapping[ResID, pygame.font.Font]:
        return MappingProxyType(self._fonts)

    def load(self, base_dir: str | PathLike[str] = ".") -> None:
        """Load textures, then sounds, music and fonts from under ``base_dir``."""
        base = Path(base_dir)
        for res_id, rel in _TEXTURE_FILES.items():
            self._textures[res_id] = _load_texture(base / rel)
        for res_id, rel in _SOUND_FILES.items():
            self._sounds[res_id] = _load_sound(base / rel)
        for res_id, rel in _MUSIC_FILES.items():
            path = base / rel
            _require_file(path)
            self._music[res_id] = path
        for res_id, rel in _FONT_FILES.items():
            self._fonts[res_id] = _load_font(base / rel)