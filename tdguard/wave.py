"""Enemy waves and the events that spawn enemies in them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EnemyType(Enum):
    """Kinds of enemy, valued by the names used in level files."""

    SLIM = "Slim"
    KING_SLIM = "KingSlim"
    SKELETON = "Skeleton"
    GOBLIN = "Goblin"
    GOBLIN_PRIEST = "GoblinPriest"

    @classmethod
    def from_name(cls, name: str) -> EnemyType:
        """Return the type named ``name`` in a level file."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown enemy type: {name!r}") from None


@dataclass
class SpawnEvent:
    """One enemy appearing at a spawn point after a delay."""

    interval: float = 0.0
    spawn_point: int = 1
    enemy_type: EnemyType = EnemyType.SLIM


@dataclass
class Wave:
    """A group of spawn events with a reward for clearing it."""

    rewards: float = 0.0
    interval: float = 0.0
    spawn_events: list[SpawnEvent] = field(default_factory=list)