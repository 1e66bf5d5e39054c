"""The game window, its start-up and its main loop."""

from __future__ import annotations

import argparse
import math
import os
import sys
import time
from os import PathLike
from pathlib import Path

import pygame

from .config import ConfigError, ConfigManager
from .gamemap import MapLoadError
from .resources import ResID, ResourceError, ResourcesManager
from .tile import TILE_SIZE

_FRAME_SECONDS = 1.0 / 60.0

Rect = tuple[int, int, int, int]


class InitError(Exception):
    """Raised when the game cannot start."""


def tile_source_rect(index: int, tiles_per_row: int) -> Rect:
    """Return the rectangle of tile ``index`` in a tileset ``tiles_per_row`` tiles wide."""
    column, row = index % tiles_per_row, index // tiles_per_row
    return (column * TILE_SIZE, row * TILE_SIZE, TILE_SIZE, TILE_SIZE)


def _half(value: int) -> int:
    return -((-value) // 2) if value < 0 else value // 2


def centered_map_rect(
    window_width: int, window_height: int, map_width: int, map_height: int
) -> Rect:
    """Return the rectangle that centres a map of the given pixel size in the window."""
    return (
        _half(window_width - map_width),
        _half(window_height - map_height),
        map_width,
        map_height,
    )


def _require(flag: object, message: str) -> None:
    if not flag:
        raise InitError(message)


class GameManager:
    """Starts pygame, loads configuration and resources, and runs the main loop."""

    def __init__(self, base_dir: str | PathLike[str] = ".") -> None:
        self._base = Path(base_dir)
        self.config = ConfigManager()
        self.resources = ResourcesManager()
        self._window: pygame.Surface | None = None
        self._tile_map: pygame.Surface | None = None
        self._exit = False
        try:
            self._setup()
        except InitError:
            pygame.quit()
            raise

    def _setup(self) -> None:
        os.environ.setdefault("SDL_IME_SHOW_UI", "1")
        pygame.init()
        _require(pygame.display.get_init(), "SDL 初始化失败")
        _require(pygame.image.get_extended(), "IMG 初始化失败")
        _require(pygame.font.get_init(), "TTF 初始化失败")
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error:
            pass

        try:
            self.config.map.load(self._base / "map.csv")
        except MapLoadError as exc:
            raise InitError("加载地图配置文件失败") from exc
        try:
            self.config.load_level_config(self._base / "level.json")
        except ConfigError as exc:
            raise InitError("加载关卡配置文件失败") from exc
        try:
            self.config.load_game_config(self._base / "config.json")
        except ConfigError as exc:
            raise InitError("加载游戏配置文件失败") from exc

        basic = self.config.basic_template
        try:
            self._window = pygame.display.set_mode(
                (basic.window_width, basic.window_height)
            )
        except pygame.error as exc:
            raise InitError("创建窗口失败") from exc
        pygame.display.set_caption(basic.window_title)

        try:
            self.resources.load(self._base)
        except ResourceError as exc:
            raise InitError("加载游戏资源失败") from exc

        self._tile_map = self._build_tile_map()

    def _build_tile_map(self) -> pygame.Surface:
        failure = "生成瓦片地图纹理失败"
        tileset = self.resources.textures[ResID.TEX_TILESET]
        tiles_per_row = math.ceil(tileset.get_width() / TILE_SIZE)
        _require(tiles_per_row > 0, failure)

        game_map = self.config.map
        width_px = game_map.width * TILE_SIZE
        height_px = game_map.height * TILE_SIZE
        try:
            surface = pygame.Surface((width_px, height_px), pygame.SRCALPHA)
        except pygame.error as exc:
            raise InitError(failure) from exc

        basic = self.config.basic_template
        self.config.rect_tile_map = centered_map_rect(
            basic.window_width, basic.window_height, width_px, height_px
        )

        for y, row in enumerate(game_map.tile_map):
            for x, tile in enumerate(row[: game_map.width]):
                dst = (x * TILE_SIZE, y * TILE_SIZE)
                surface.blit(tileset, dst, tile_source_rect(tile.terrain, tiles_per_row))
                if tile.decoration >= 0:
                    surface.blit(
                        tileset, dst, tile_source_rect(tile.decoration, tiles_per_row)
                    )

        home = pygame.transform.scale(
            self.resources.textures[ResID.TEX_HOME], (TILE_SIZE, TILE_SIZE)
        )
        home_x, home_y = game_map.home
        surface.blit(home, (home_x * TILE_SIZE, home_y * TILE_SIZE))
        return surface

    def _on_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._exit = True

    def _on_render(self) -> None:
        x, y, _, _ = self.config.rect_tile_map
        self._window.blit(self._tile_map, (x, y))

    def run(self) -> int:
        """Run the main loop until the window is closed; return the exit status."""
        try:
            while not self._exit:
                start = time.perf_counter()
                for event in pygame.event.get():
                    self._on_input(event)

                delta = time.perf_counter() - start
                if delta < _FRAME_SECONDS:
                    pygame.time.delay(int((_FRAME_SECONDS - delta) * 1000))

                self._window.fill((0, 0, 0))
                self._on_render()
                pygame.display.flip()
        finally:
            pygame.quit()
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the game from the files in a directory (default: current one)."""
    parser = argparse.ArgumentParser(description="Defend the village from waves of enemies.")
    parser.add_argument("directory", nargs="?", default=".", help="game data directory")
    args = parser.parse_args(argv)
    try:
        game = GameManager(args.directory)
    except InitError as exc:
        print(f"游戏初始化失败: {exc}", file=sys.stderr)
        return -1
    return game.run()


if __name__ == "__main__":
    sys.exit(main())