"""Hit points of the home the player defends."""

from __future__ import annotations

from typing import Any


class HomeManager:
    """Tracks the home's hit points and plays a sound when it is hurt."""

    def __init__(self, initial_hp: float, hurt_sound: Any = None) -> None:
        self._hp = float(initial_hp)
        self._hurt_sound = hurt_sound

    @property
    def current_hp(self) -> float:
        return self._hp

    def decrease_hp(self, value: float) -> None:
        """Take ``value`` hit points off, never going below zero."""
        self._hp = max(self._hp - value, 0.0)
        if self._hurt_sound is not None:
            self._hurt_sound.play()