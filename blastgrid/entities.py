"""Board entities: solid blocks, destructible blocks and falling enemies."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import ClassVar

TILE = 48
SPRITE_SIZE = 16
SPRITE_SHEET = "spites.png"
ENEMY_IMAGE = "enemigo2.png"
ENEMY_SIZE = TILE
ENEMY_SPAWN_RANGE = 700


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in scene coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap; touching edges do not count."""
        if self.empty or other.empty:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def moved(self, dx: float, dy: float) -> Rect:
        """Return a copy shifted by the given offsets."""
        return replace(self, x=self.x + dx, y=self.y + dy)


@dataclass
class _Tile:
    x: float
    y: float

    sprite: ClassVar[tuple[int, int]] = (0, 0)

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, TILE, TILE)


@dataclass
class Block(_Tile):
    """Indestructible wall tile."""

    sprite: ClassVar[tuple[int, int]] = (48, 48)


@dataclass
class DestructibleBlock(_Tile):
    """Wall tile that an explosion removes."""

    sprite: ClassVar[tuple[int, int]] = (64, 48)


@dataclass
class Enemy:
    """Enemy that falls from the top of the board."""

    x: float
    y: float = 0

    STEP: ClassVar[int] = 5
    TICK_MS: ClassVar[int] = 50
    EXIT_Y: ClassVar[int] = 600

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, ENEMY_SIZE, ENEMY_SIZE)

    def advance(self) -> bool:
        """Move one step down; return True once the enemy has left the board."""
        self.y += self.STEP
        return self.y > self.EXIT_Y


def random_enemy(rng: random.Random) -> Enemy:
    """Create an enemy at a random column on the top edge."""
    return Enemy(x=rng.randrange(ENEMY_SPAWN_RANGE), y=0)