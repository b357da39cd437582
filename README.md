# blastgrid

A small arcade game played on a walled grid. You walk between fixed
pillars and randomly scattered destructible blocks, and drop explosions
that go off three seconds later in a cross shape reaching two tiles in
each direction. An explosion clears the destructible blocks it touches,
destroys enemies for a point each and costs you a point of health if you
are standing in it.

Enemies come down from the top of the field, one every two seconds. Each
one that falls past the bottom edge costs a point of health. You begin
with 5 health and 0 score; health never drops below zero.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
blastgrid
```

Options:

- `--seed N`: seed for the random placement of destructible blocks and
  enemies, so a board can be replayed.
- `--assets DIR`: directory holding the images and sounds (see below).
- `--frames N`: quit after this many frames (a positive number).

Controls:

- Arrow keys: move one step (8 pixels) in that direction. Walls and
  blocks stop you.
- Space: drop an explosion where you are standing.

Closing the window ends the game.

### Images and sounds

With `--assets DIR`, the game looks for these files and uses whichever it
finds:

- `DIR/images/spites.png`: sprite sheet of 16x16 tiles for walls, blocks,
  the player and explosions, drawn scaled to 48x48.
- `DIR/images/enemigo2.png`: the enemy picture.
- `DIR/images/fondo.jpg`: the background.
- `DIR/sounds/bgroundsound.mp3`: background music, played once at start.
- `DIR/sounds/080884_bullet-hit-39872.mp3`: sound played when you drop an
  explosion.

Anything missing is drawn as a plain coloured square, or stays silent.

## Using it as a library

The game rules do not depend on the window. You can drive them yourself:

```python
import random

from blastgrid.world import Direction, World

world = World(random.Random(1))
world.move_player(Direction.RIGHT)
world.drop_explosion()
world.spawn_enemy()
world.advance(3000)  # the explosion goes off and is removed
print(world.score.value, world.health.value)
```

`World.move_player` returns whether the player moved, `World.detonate`
applies an explosion at once and returns a `Blast` with counts of what it
destroyed, and `World.advance(ms)` runs enemy movement, enemy spawning and
explosion timers forward.

The building blocks live in these modules:

- `blastgrid.hud`: the `Score` and `Health` counters and their `text`.
- `blastgrid.entities`: `Rect`, `Block`, `DestructibleBlock`, `Enemy` and
  `random_enemy`.
- `blastgrid.explosion`: `Explosion` with its `hits` and `tick` methods,
  `cross_explosion` (two tiles each way, gone as it detonates) and
  `bomb_explosion` (one tile each way, lingering half a second after
  detonating).
- `blastgrid.world`: `Direction`, `Player`, `World` and the level layout
  helpers `border_blocks`, `pillar_blocks` and `scatter_destructibles`.
- `blastgrid.app`: the pygame front end, `key_direction` and `main`.

## What it does not do

- No images or sounds come with the package; without `--assets` the game
  is drawn with coloured squares and plays no sound.
- Reaching zero health does not end the game or show a game-over screen;
  play goes on until the window is closed.
- The front end only ever drops the cross-shaped explosion;
  `bomb_explosion` is available to library users only.

## Running the tests

```
pip install ".[test]"
pytest
```