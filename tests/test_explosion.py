import pytest

from blastgrid.entities import TILE, Rect
from blastgrid.explosion import (
    Explosion,
    ExplosionPart,
    Phase,
    bomb_explosion,
    cross_explosion,
)


def _offsets(explosion, x, y):
    return {(p.rect.x - x, p.rect.y - y) for p in explosion.parts}


def test_cross_explosion_has_nine_tiles():
    explosion = cross_explosion(240, 288)
    assert len(explosion.parts) == 9
    assert len({p.name for p in explosion.parts}) == 9


def test_bomb_explosion_has_five_tiles():
    explosion = bomb_explosion(240, 288)
    assert len(explosion.parts) == 5


@pytest.mark.parametrize("factory", [cross_explosion, bomb_explosion])
def test_explosion_is_symmetric_cross(factory):
    offsets = _offsets(factory(240, 288), 240, 288)
    assert (0, 0) in offsets
    for dx, dy in offsets:
        assert (-dx, -dy) in offsets
        assert dx == 0 or dy == 0


@pytest.mark.parametrize("factory", [cross_explosion, bomb_explosion])
def test_centre_part_sits_on_origin(factory):
    explosion = factory(96, 144)
    centre = next(p for p in explosion.parts if p.name == "center")
    assert centre.rect == Rect(96, 144, TILE, TILE)
    assert centre.sprite == (112, 96)


def test_cross_reaches_further_than_bomb():
    far = Rect(240 + 2 * TILE, 288, TILE, TILE)
    assert cross_explosion(240, 288).hits(far)
    assert not bomb_explosion(240, 288).hits(far)


def test_hits_ignores_diagonal_tile():
    diagonal = Rect(240 + TILE, 288 + TILE, TILE, TILE)
    assert not cross_explosion(240, 288).hits(diagonal)


def test_hits_overlapping_rect():
    assert bomb_explosion(240, 288).hits(Rect(250, 300, 10, 10))


def test_cross_detonates_and_finishes_together():
    explosion = cross_explosion(0, 0)
    assert explosion.tick(2999) == []
    assert explosion.phase is Phase.ARMED
    assert explosion.tick(1) == [Phase.DETONATED, Phase.FINISHED]
    assert explosion.finished


def test_bomb_lingers_after_detonation():
    explosion = bomb_explosion(0, 0)
    assert explosion.tick(3000) == [Phase.DETONATED]
    assert not explosion.finished
    assert explosion.tick(499) == []
    assert explosion.tick(1) == [Phase.FINISHED]
    assert explosion.elapsed_ms == 3500


def test_finished_explosion_reports_nothing_more():
    explosion = cross_explosion(0, 0)
    explosion.tick(5000)
    assert explosion.tick(5000) == []
    assert explosion.phase is Phase.FINISHED


def test_negative_tick_rejected():
    with pytest.raises(ValueError):
        cross_explosion(0, 0).tick(-1)


def test_lifetime_shorter_than_fuse_rejected():
    part = ExplosionPart("center", Rect(0, 0, TILE, TILE), (112, 96))
    with pytest.raises(ValueError):
        Explosion((part,), fuse_ms=100, lifetime_ms=50)


def test_negative_fuse_rejected():
    with pytest.raises(ValueError):
        Explosion((), fuse_ms=-1, lifetime_ms=0)