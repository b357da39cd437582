import pygame
import pytest

from blastgrid.app import key_direction, main
from blastgrid.world import Direction


@pytest.mark.parametrize(
    ("key", "direction"),
    [
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
    ],
)
def test_arrow_keys_map_to_directions(key, direction):
    assert key_direction(key) is direction


@pytest.mark.parametrize("key", [pygame.K_SPACE, pygame.K_a, pygame.K_RETURN])
def test_other_keys_do_not_move(key):
    assert key_direction(key) is None


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_non_positive_frame_count_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--frames", "0"])
    assert excinfo.value.code == 2


def test_runs_headless_for_a_few_frames(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    assert main(["--frames", "3", "--seed", "5"]) == 0