"""Small demo: reads a JSON and a CSV file, then shows an image following the mouse."""

from __future__ import annotations

import argparse
import json
import sys
from os import PathLike
from pathlib import Path

import pygame

_FPS = 60
_WINDOW_SIZE = (1280, 720)
_CIRCLE_RADIUS = 50


def describe_json(path: str | PathLike[str]) -> list[str]:
    """Return the name, age and pet lines read from a JSON document."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    lines = [f"name: {data['name']}", f"age: {int(data['age'])}"]
    lines.extend(f"pet: {pet}" for pet in data.get("pets") or [])
    return lines


def _split_fields(text: str, sep: str) -> list[str]:
    if not text:
        return []
    parts = text.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


def read_csv_cells(path: str | PathLike[str]) -> list[list[str]]:
    """Return the comma-separated cells of each line of a file."""
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [_split_fields(line, ",") for line in lines]


def _run_window(base: Path) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode(_WINDOW_SIZE)
        pygame.display.set_caption("塔防小游戏")

        image = pygame.image.load(str(base / "avatar.jpg")).convert_alpha()
        font = pygame.font.Font(str(base / "ipix.ttf"), 32)
        text = font.render("塔防世界", True, (255, 255, 255))

        pygame.mixer.music.load(str(base / "music.mp3"))
        pygame.mixer.music.play(-1, fade_ms=1500)

        circle = pygame.Surface((2 * _CIRCLE_RADIUS, 2 * _CIRCLE_RADIUS), pygame.SRCALPHA)
        pygame.draw.circle(
            circle, (255, 0, 0, 125), (_CIRCLE_RADIUS, _CIRCLE_RADIUS), _CIRCLE_RADIUS
        )

        cursor = (0, 0)
        frame = 1.0 / _FPS
        last = pygame.time.get_ticks()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    cursor = event.pos

            now = pygame.time.get_ticks()
            delta = (now - last) / 1000.0
            last = now
            if delta < frame:
                pygame.time.delay(int((frame - delta) * 1000))

            screen.fill((0, 0, 0))
            screen.blit(image, cursor)
            screen.blit(circle, (cursor[0] - _CIRCLE_RADIUS, cursor[1] - _CIRCLE_RADIUS))
            screen.blit(text, cursor)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Print test.json and test.csv, then open the demo window."""
    parser = argparse.ArgumentParser(description="Show the demo window.")
    parser.add_argument("directory", nargs="?", default=".", help="directory holding the demo files")
    args = parser.parse_args(argv)
    base = Path(args.directory)

    try:
        for line in describe_json(base / "test.json"):
            print(line)
    except FileNotFoundError:
        print("file not exist")

    try:
        for row in read_csv_cells(base / "test.csv"):
            print("".join(f"{cell} " for cell in row))
    except FileNotFoundError:
        print("file not exist")

    try:
        _run_window(base)
    except (pygame.error, OSError) as exc:
        print(f"demo failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())