"""Window, input handling and drawing for the game."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from blastgrid.entities import ENEMY_IMAGE, ENEMY_SIZE, SPRITE_SHEET, SPRITE_SIZE, TILE
from blastgrid.hud import HUD_FONT
from blastgrid.world import SCENE_HEIGHT, SCENE_WIDTH, Direction, World

FPS = 60
HEALTH_OFFSET_Y = 25
BACKGROUND_IMAGE = "fondo.jpg"
MUSIC_FILE = "bgroundsound.mp3"
EXPLOSION_SOUND = "080884_bullet-hit-39872.mp3"

_FALLBACK_COLORS = {
    "block": (110, 110, 110),
    "destructible": (150, 90, 40),
    "enemy": (160, 40, 160),
    "player": (240, 240, 240),
    "explosion": (250, 160, 30),
}

_KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


def key_direction(key: int) -> Direction | None:
    """Direction bound to a key, or None for keys that do not move the player."""
    return _KEY_DIRECTIONS.get(key)


@dataclass
class _Assets:
    sheet: pygame.Surface | None = None
    enemy: pygame.Surface | None = None
    background: pygame.Surface | None = None
    music: Path | None = None
    explosion_sound: pygame.mixer.Sound | None = None
    _sprites: dict[tuple[int, int], pygame.Surface] = field(default_factory=dict)

    @classmethod
    def load(cls, directory: Path | None) -> _Assets:
        assets = cls()
        if directory is None:
            return assets
        assets.sheet = _load_image(directory / "images" / SPRITE_SHEET)
        assets.enemy = _load_image(directory / "images" / ENEMY_IMAGE)
        assets.background = _load_image(directory / "images" / BACKGROUND_IMAGE)
        try:
            pygame.mixer.init()
        except pygame.error:
            return assets
        music = directory / "sounds" / MUSIC_FILE
        if music.is_file():
            assets.music = music
        effect = directory / "sounds" / EXPLOSION_SOUND
        if effect.is_file():
            try:
                assets.explosion_sound = pygame.mixer.Sound(str(effect))
            except pygame.error:
                pass
        return assets

    def sprite(self, origin: tuple[int, int]) -> pygame.Surface | None:
        if self.sheet is None:
            return None
        if origin not in self._sprites:
            tile = self.sheet.subsurface(pygame.Rect(*origin, SPRITE_SIZE, SPRITE_SIZE))
            self._sprites[origin] = pygame.transform.scale(tile, (TILE, TILE))
        return self._sprites[origin]

    def play_music(self) -> None:
        if self.music is None:
            return
        try:
            pygame.mixer.music.load(str(self.music))
            pygame.mixer.music.play()
        except pygame.error:
            pass

    def play_explosion(self) -> None:
        if self.explosion_sound is not None:
            self.explosion_sound.stop()
            self.explosion_sound.play()


def _load_image(path: Path) -> pygame.Surface | None:
    if not path.is_file():
        return None
    try:
        return pygame.image.load(str(path)).convert_alpha()
    except pygame.error:
        return None


def _blit_tile(screen, assets: _Assets, origin, x, y, kind: str) -> None:
    sprite = assets.sprite(origin)
    if sprite is not None:
        screen.blit(sprite, (x, y))
    else:
        pygame.draw.rect(screen, _FALLBACK_COLORS[kind], pygame.Rect(x, y, TILE, TILE))


def _draw(screen: pygame.Surface, world: World, assets: _Assets, font) -> None:
    screen.fill((0, 0, 0))
    if assets.background is not None:
        screen.blit(assets.background, (0, 0))
    for block in world.blocks:
        _blit_tile(screen, assets, block.sprite, block.x, block.y, "block")
    for block in world.destructibles:
        _blit_tile(screen, assets, block.sprite, block.x, block.y, "destructible")
    for enemy in world.enemies:
        if assets.enemy is not None:
            screen.blit(assets.enemy, (enemy.x, enemy.y))
        else:
            rect = pygame.Rect(enemy.x, enemy.y, ENEMY_SIZE, ENEMY_SIZE)
            pygame.draw.rect(screen, _FALLBACK_COLORS["enemy"], rect)
    player = world.player
    _blit_tile(screen, assets, player.sprite, player.x, player.y, "player")
    for explosion in world.explosions:
        for part in explosion.parts:
            _blit_tile(screen, assets, part.sprite, part.rect.x, part.rect.y, "explosion")
    score = font.render(world.score.text, True, pygame.Color(world.score.color))
    health = font.render(world.health.text, True, pygame.Color(world.health.color))
    screen.blit(score, (0, 0))
    screen.blit(health, (0, HEALTH_OFFSET_Y))


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive number")
    return value


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="blastgrid", description="Bomb the blocks, dodge the enemies.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random board")
    parser.add_argument("--assets", type=Path, default=None, help="directory with images/ and sounds/")
    parser.add_argument("--frames", type=_positive_int, default=None, help="quit after this many frames")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCENE_WIDTH, SCENE_HEIGHT))
        pygame.display.set_caption("blastgrid")
        pygame.key.set_repeat(200, 30)
        assets = _Assets.load(args.assets)
        font = pygame.font.SysFont(*HUD_FONT)
        world = World(rng=random.Random(args.seed))
        clock = pygame.time.Clock()
        assets.play_music()
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    direction = key_direction(event.key)
                    if direction is not None:
                        world.move_player(direction)
                    elif event.key == pygame.K_SPACE:
                        world.drop_explosion()
                        assets.play_explosion()
            world.advance(clock.tick(FPS))
            _draw(screen, world, assets, font)
            pygame.display.flip()
            frames += 1
            if args.frames is not None and frames >= args.frames:
                running = False
    finally:
        pygame.quit()
    return 0