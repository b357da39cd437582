"""The playing field: walls, the player, enemies, explosions and the HUD."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from itertools import chain

from blastgrid.entities import TILE, Block, DestructibleBlock, Enemy, Rect, random_enemy
from blastgrid.explosion import Explosion, Phase, cross_explosion
from blastgrid.hud import Health, Score

SCENE_WIDTH = 816
SCENE_HEIGHT = 672
HUD_HEIGHT = 48
GRID_ROWS = 12
GRID_COLUMNS = 16
DESTRUCTIBLE_CHANCE = 30
SPAWN_INTERVAL_MS = 2000
PLAYER_STEP = 8
PLAYER_START = (48, 96)
PLAYER_MIN_X = 48
PLAYER_MAX_X = 720
PLAYER_MIN_Y = 48
PLAYER_MAX_Y = 576


class Direction(Enum):
    """A direction the player can walk in, as a unit offset."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


PLAYER_SPRITES = {
    Direction.DOWN: (48, 0),
    Direction.LEFT: (0, 0),
    Direction.RIGHT: (0, 16),
    Direction.UP: (48, 16),
}


@dataclass
class Player:
    """The player's position and the way it is facing."""

    x: float = PLAYER_START[0]
    y: float = PLAYER_START[1]
    facing: Direction = Direction.DOWN

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, TILE, TILE)

    @property
    def sprite(self) -> tuple[int, int]:
        return PLAYER_SPRITES[self.facing]


@dataclass
class Blast:
    """What a detonation destroyed and how often it hit the player."""

    enemies_destroyed: int = 0
    blocks_destroyed: int = 0
    player_hits: int = 0


def border_blocks() -> list[Block]:
    """Solid wall around the board, below the HUD strip."""
    top = [Block(x, HUD_HEIGHT) for x in range(0, SCENE_WIDTH, TILE)]
    bottom = [Block(x, SCENE_HEIGHT - TILE) for x in range(0, SCENE_WIDTH, TILE)]
    rows = range(TILE, SCENE_HEIGHT - TILE, TILE)
    left = [Block(0, y + HUD_HEIGHT) for y in rows]
    right = [Block(SCENE_WIDTH - TILE, y + HUD_HEIGHT) for y in rows]
    return top + bottom + left + right


def pillar_blocks() -> list[Block]:
    """Fixed pattern of solid pillars inside the board."""
    return [
        Block(col * TILE, row * TILE + HUD_HEIGHT)
        for row in range(2, GRID_ROWS - 1)
        for col in range(1, GRID_COLUMNS - 1)
        if row % 2 == 0 and col % 2 == 0
    ]


def scatter_destructibles(rng: random.Random) -> list[DestructibleBlock]:
    """Place destructible blocks on interior cells, each with a 30% chance."""
    return [
        DestructibleBlock(col * TILE, row * TILE)
        for col in range(1, GRID_COLUMNS - 1)
        for row in range(2, GRID_ROWS - 1)
        if rng.randrange(100) < DESTRUCTIBLE_CHANCE
    ]


@dataclass
class World:
    """Game state, advanced by key presses and elapsed time."""

    rng: random.Random = field(default_factory=random.Random)
    blocks: list[Block] | None = None
    destructibles: list[DestructibleBlock] | None = None
    player: Player = field(default_factory=Player)
    enemies: list[Enemy] = field(default_factory=list)
    explosions: list[Explosion] = field(default_factory=list)
    score: Score = field(default_factory=Score)
    health: Health = field(default_factory=Health)

    def __post_init__(self) -> None:
        if self.blocks is None:
            self.blocks = border_blocks() + pillar_blocks()
        if self.destructibles is None:
            self.destructibles = scatter_destructibles(self.rng)
        self._enemy_clock = 0
        self._spawn_clock = 0

    def _within_limits(self, direction: Direction) -> bool:
        p = self.player
        return {
            Direction.LEFT: p.x > PLAYER_MIN_X,
            Direction.RIGHT: p.x < PLAYER_MAX_X,
            Direction.UP: p.y > PLAYER_MIN_Y,
            Direction.DOWN: p.y < PLAYER_MAX_Y,
        }[direction]

    def _player_blocked(self) -> bool:
        rect = self.player.rect
        return any(b.rect.intersects(rect) for b in chain(self.blocks, self.destructibles))

    def move_player(self, direction: Direction) -> bool:
        """Walk one step; a step into a wall is undone. Return True if the player moved."""
        p = self.player
        start = (p.x, p.y)
        dx, dy = direction.dx * PLAYER_STEP, direction.dy * PLAYER_STEP
        if self._within_limits(direction):
            p.x += dx
            p.y += dy
            p.facing = direction
        if self._player_blocked():
            p.x -= dx
            p.y -= dy
        else:
            p.facing = direction
        return (p.x, p.y) != start

    def drop_explosion(self) -> Explosion:
        """Place a timed explosion where the player stands."""
        explosion = cross_explosion(self.player.x, self.player.y)
        self.explosions.append(explosion)
        return explosion

    def spawn_enemy(self) -> Enemy:
        """Add an enemy at a random column on the top edge."""
        enemy = random_enemy(self.rng)
        self.enemies.append(enemy)
        return enemy

    def detonate(self, explosion: Explosion) -> Blast:
        """Apply an explosion: destroy enemies and destructible blocks, hurt the player."""
        blast = Blast()
        for part in explosion.parts:
            for enemy in [e for e in self.enemies if part.rect.intersects(e.rect)]:
                self.score.increase()
                self.enemies.remove(enemy)
                blast.enemies_destroyed += 1
            for block in [b for b in self.destructibles if part.rect.intersects(b.rect)]:
                self.destructibles.remove(block)
                blast.blocks_destroyed += 1
            if part.rect.intersects(self.player.rect):
                self.health.decrease()
                blast.player_hits += 1
        return blast

    def _move_enemies(self) -> None:
        for enemy in list(self.enemies):
            if enemy.advance():
                self.health.decrease()
                self.enemies.remove(enemy)

    def _tick_explosions(self, elapsed_ms: int) -> None:
        for explosion in list(self.explosions):
            for phase in explosion.tick(elapsed_ms):
                if phase is Phase.DETONATED:
                    self.detonate(explosion)
                elif phase is Phase.FINISHED:
                    self.explosions.remove(explosion)

    def advance(self, elapsed_ms: int) -> None:
        """Run the game clock forward by the given number of milliseconds."""
        if elapsed_ms < 0:
            raise ValueError("elapsed time must not be negative")
        remaining = elapsed_ms
        while remaining > 0:
            step = min(
                remaining,
                Enemy.TICK_MS - self._enemy_clock,
                SPAWN_INTERVAL_MS - self._spawn_clock,
            )
            remaining -= step
            self._enemy_clock += step
            self._spawn_clock += step
            if self._enemy_clock >= Enemy.TICK_MS:
                self._enemy_clock = 0
                self._move_enemies()
            if self._spawn_clock >= SPAWN_INTERVAL_MS:
                self._spawn_clock = 0
                self.spawn_enemy()
            self._tick_explosions(step)