import pytest

from blastgrid.hud import Health, Score


def test_score_starts_at_zero():
    score = Score()
    assert score.value == 0
    assert score.text == "Score: 0"


@pytest.mark.parametrize("times", [1, 2, 7])
def test_score_increase_counts_each_call(times):
    score = Score()
    for _ in range(times):
        score.increase()
    assert score.value == times
    assert score.text == f"Score: {times}"


def test_health_starts_at_five():
    health = Health()
    assert health.value == 5
    assert health.text == "Health: 5"
    assert not health.depleted


def test_health_decrease_lowers_by_one():
    health = Health()
    start = health.value
    health.decrease()
    assert health.value == start - 1
    assert health.text == f"Health: {start - 1}"


def test_health_never_goes_negative():
    health = Health()
    for _ in range(20):
        health.decrease()
    assert health.value == 0
    assert health.depleted
    assert health.text == "Health: 0"


def test_hud_colours_differ():
    score = Score()
    health = Health()
    score.increase()
    health.decrease()
    assert score.color == "blue"
    assert health.color == "red"
    assert score.font == health.font