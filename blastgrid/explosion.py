"""Timed explosions: a set of tiles that destroy what they touch."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from blastgrid.entities import TILE, Rect

FUSE_MS = 3000
BOMB_LIFETIME_MS = 3500


class Phase(Enum):
    ARMED = "armed"
    DETONATED = "detonated"
    FINISHED = "finished"


@dataclass(frozen=True)
class ExplosionPart:
    """One tile of an explosion and its sprite position in the sheet."""

    name: str
    rect: Rect
    sprite: tuple[int, int]


@dataclass
class Explosion:
    """Explosion that detonates after its fuse and disappears after its lifetime."""

    parts: tuple[ExplosionPart, ...]
    fuse_ms: int = FUSE_MS
    lifetime_ms: int = FUSE_MS
    elapsed_ms: int = field(default=0, init=False)
    phase: Phase = field(default=Phase.ARMED, init=False)

    def __post_init__(self) -> None:
        if self.fuse_ms < 0:
            raise ValueError("fuse must not be negative")
        if self.lifetime_ms < self.fuse_ms:
            raise ValueError("lifetime must not be shorter than the fuse")
        self.parts = tuple(self.parts)

    @property
    def finished(self) -> bool:
        return self.phase is Phase.FINISHED

    def hits(self, rect: Rect) -> bool:
        """True when any part of the explosion overlaps the rectangle."""
        return any(part.rect.intersects(rect) for part in self.parts)

    def tick(self, elapsed_ms: int) -> list[Phase]:
        """Advance the clock and return the phases entered, in order."""
        if elapsed_ms < 0:
            raise ValueError("elapsed time must not be negative")
        if self.finished:
            return []
        self.elapsed_ms += elapsed_ms
        reached: list[Phase] = []
        if self.phase is Phase.ARMED and self.elapsed_ms >= self.fuse_ms:
            self.phase = Phase.DETONATED
            reached.append(Phase.DETONATED)
        if self.phase is Phase.DETONATED and self.elapsed_ms >= self.lifetime_ms:
            self.phase = Phase.FINISHED
            reached.append(Phase.FINISHED)
        return reached


def _parts(x: float, y: float, layout) -> tuple[ExplosionPart, ...]:
    return tuple(
        ExplosionPart(name, Rect(x + dx, y + dy, TILE, TILE), sprite)
        for name, dx, dy, sprite in layout
    )


_CROSS_LAYOUT = (
    ("center", 0, 0, (112, 96)),
    ("up-mid", 0, -TILE, (112, 80)),
    ("up-end", 0, -2 * TILE, (112, 64)),
    ("down-mid", 0, TILE, (112, 112)),
    ("down-end", 0, 2 * TILE, (112, 128)),
    ("left-mid", -TILE, 0, (96, 96)),
    ("left-end", -2 * TILE, 0, (80, 96)),
    ("right-mid", TILE, 0, (128, 96)),
    ("right-end", 2 * TILE, 0, (144, 96)),
)

_BOMB_LAYOUT = (
    ("center", 0, 0, (112, 96)),
    ("up", 0, -TILE, (112, 80)),
    ("down", 0, TILE, (112, 112)),
    ("left", -TILE, 0, (96, 96)),
    ("right", TILE, 0, (128, 96)),
)


def cross_explosion(x: float, y: float) -> Explosion:
    """Two-tile cross explosion that detonates and vanishes after the fuse."""
    return Explosion(_parts(x, y, _CROSS_LAYOUT), fuse_ms=FUSE_MS, lifetime_ms=FUSE_MS)


def bomb_explosion(x: float, y: float) -> Explosion:
    """One-tile cross explosion that lingers briefly after detonating."""
    return Explosion(
        _parts(x, y, _BOMB_LAYOUT), fuse_ms=FUSE_MS, lifetime_ms=BOMB_LIFETIME_MS
    )