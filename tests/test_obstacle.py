import random

import pytest

from config import SCREEN_HEIGHT
from obstacle import Obstacle, gap_size_for
from player import Player


@pytest.fixture
def rng():
    return random.Random(7)


def make_obstacle(x, gap_y, size, rng):
    obstacle = Obstacle(x, 0, rng)
    obstacle.gap_y = gap_y
    obstacle.size = size
    return obstacle


@pytest.mark.parametrize("score", range(0, 18))
def test_gap_shrinks_linearly(score):
    assert gap_size_for(score) == 20 - score


@pytest.mark.parametrize("score", [18, 19, 25, 100, 10_000])
def test_gap_floor(score):
    assert gap_size_for(score) == 2


def test_gap_center_in_range(rng):
    for score in range(40):
        obstacle = Obstacle.create(80, score, rng)
        assert 10 <= obstacle.gap_y < 40
        assert obstacle.size == gap_size_for(score)
        assert obstacle.x == 80


def test_same_seed_same_obstacles():
    first = [Obstacle(80, 0, random.Random(42)).gap_y for _ in range(3)]
    second = [Obstacle(80, 0, random.Random(42)).gap_y for _ in range(3)]
    assert first == second


def test_hit_outside_gap(rng):
    obstacle = make_obstacle(10, 25, 10, rng)
    player = Player(10, 5)
    assert obstacle.collides_with(player)


def test_no_hit_inside_gap(rng):
    obstacle = make_obstacle(10, 25, 10, rng)
    player = Player(10, 25)
    assert not obstacle.collides_with(player)


@pytest.mark.parametrize("y, hit", [(19, True), (20, False), (30, False), (31, True)])
def test_gap_edges(rng, y, hit):
    obstacle = make_obstacle(10, 25, 10, rng)
    assert obstacle.collides_with(Player(10, y)) is hit


@pytest.mark.parametrize("x", [9, 11])
def test_only_exact_column_is_checked(rng, x):
    obstacle = make_obstacle(10, 25, 10, rng)
    assert not obstacle.collides_with(Player(x, 0))


def test_render_draws_both_walls(rng, surface):
    obstacle = make_obstacle(30, 25, 10, rng)
    obstacle.render(surface, player_x=10)

    rows = sorted(call[2] for call in surface.cells())
    assert all(call[1] == 20 for call in surface.cells())
    assert rows == list(range(0, 20)) + list(range(31, SCREEN_HEIGHT))
